"""Test the single-language sentence segmenter."""

from srxsegmenter.segmenters.sentence import SentenceSegmenter


class TestSentenceSegmenter:
    """Test sentence segmentation for one language."""
    
    def test_rules_resolved_once(self, sample_engine):
        """The segmenter keeps the resolved rules for its language."""
        segmenter = SentenceSegmenter(sample_engine, language="en")
        
        assert segmenter.language == "en"
        assert len(segmenter.rules) == 6
    
    def test_segment_is_lossless(self, sample_engine):
        """Without strip, segments join back to the input."""
        segmenter = SentenceSegmenter(sample_engine, language="en")
        text = "Hello Mr. Blair. He left again!  Bye."
        
        segments = segmenter.segment(text)
        assert "".join(segments) == text
        assert segments == ["Hello Mr. Blair.", " He left again!", "  Bye."]
    
    def test_strip(self, sample_engine):
        """With strip, segments are trimmed and blank ones dropped."""
        segmenter = SentenceSegmenter(sample_engine, language="en", strip=True)
        
        assert segmenter.segment("Hi there. \n Bye.") == ["Hi there.", "Bye."]
        assert segmenter.segment("   ") == []
    
    def test_empty_text(self, sample_engine):
        """Empty text has no sentences."""
        assert SentenceSegmenter(sample_engine).segment("") == []
