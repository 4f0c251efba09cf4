"""Ordered rule sets and the segmentation algorithm."""

from typing import Iterable, Iterator, List, Optional

import numpy as np

from ..core.abc import Logger, Meter
from ..core.mask import new_mask, claim, break_offsets, utf8_offsets
from ..core.types import Decision, Span
from .compiler import Rule

class RuleSet:
    """
    Ordered, immutable collection of rules for one language.
    
    Rule order is priority: when two rules produce a candidate at the same
    offset, the earlier rule decides it. Instances hold no state tied to any
    text and can be shared between threads.
    """
    
    def __init__(self, rules: Iterable[Rule] = (), *,
                 match_timeout: Optional[float] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize rule set.
        
        Args:
            rules: Compiled rules in priority order
            match_timeout: Seconds allowed per match attempt (None for no limit)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self._rules = tuple(rules)
        self.match_timeout = match_timeout
        self.log = logger
        self.meter = meter

    @property
    def rules(self) -> tuple:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(rules={len(self._rules)})"

    def decisions(self, text: str) -> np.ndarray:
        """
        Compute the per-offset decision mask for text.
        
        Args:
            text: Input text
            
        Returns:
            np.ndarray: int8 array of Decision values, shape (len(text),)
        """
        mask = new_mask(len(text))
        if not text:
            return mask

        for position, rule in enumerate(self._rules):
            claim(mask, self._candidates(rule, position, text), Decision.from_flag(rule.do_break))
        return mask

    def _candidates(self, rule: Rule, position: int, text: str) -> List[int]:
        """Collect a rule's offsets, keeping those found before a timeout."""
        offsets: List[int] = []
        try:
            for offset in rule.match_offsets(text, timeout=self.match_timeout):
                offsets.append(offset)
        except TimeoutError:
            if self.meter:
                self.meter.inc("srx.match_timeout")
            if self.log:
                self.log.warn("rule_match_timeout",
                              rule=position,
                              timeout=self.match_timeout,
                              text_length=len(text),
                              offsets_kept=len(offsets))
        return offsets

    def split_ranges(self, text: str) -> List[Span]:
        """
        Partition text into segments and return their character spans.
        
        Args:
            text: Input text
            
        Returns:
            List[Span]: Contiguous (start, end) spans covering the whole text.
            Empty for empty text. A break at offset 0 gives an empty first span.
        """
        spans: List[Span] = []
        prev = 0
        for boundary in break_offsets(self.decisions(text)).tolist():
            spans.append((prev, boundary))
            prev = boundary

        if prev != len(text):
            spans.append((prev, len(text)))

        if self.meter:
            self.meter.observe("srx.segments", len(spans))
        return spans

    def split_byte_ranges(self, text: str) -> List[Span]:
        """
        Same segments as split_ranges, as UTF-8 byte offsets.
        
        Every span starts and ends on a character boundary of
        text.encode("utf-8").
        """
        spans = self.split_ranges(text)
        if not spans:
            return []
        byte_at = utf8_offsets(text)
        return [(int(byte_at[start]), int(byte_at[end])) for start, end in spans]

    def split(self, text: str) -> List[str]:
        """
        Split text into segments.
        
        Args:
            text: Input text
            
        Returns:
            List[str]: Segments in order; "".join(result) == text
        """
        return [text[start:end] for start, end in self.split_ranges(text)]
