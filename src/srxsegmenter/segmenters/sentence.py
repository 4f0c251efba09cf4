"""Sentence segmenter bound to one language of a segmentation engine."""

from typing import List

from ..runtime.engine import SegmentationEngine

class SentenceSegmenter:
    """
    Rule-based sentence segmenter for a single language.
    Resolves the language's rules once and reuses them for every call.
    """
    
    def __init__(self, engine: SegmentationEngine, language: str = "en", strip: bool = False):
        """
        Initialize segmenter.
        
        Args:
            engine: Built segmentation engine
            language: Language code used to select rules
            strip: Trim whitespace around segments and drop blank ones
        """
        self.language = language
        self.strip = strip
        self.rules = engine.language_rules(language)
        
    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.
        
        Args:
            text: Input text to segment
            
        Returns:
            List[str]: Sentence segments. Without strip they join back to text.
        """
        segments = self.rules.split(text)
        if not self.strip:
            return segments
            
        result = []
        for segment in segments:
            segment = segment.strip()
            if segment:
                result.append(segment)
                
        return result
