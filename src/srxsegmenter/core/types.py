"""Shared value types for rule compilation and segmentation."""

from enum import IntEnum
from typing import Tuple

# Opaque name of a rule bucket (an SRX <languagerule>)
Language = str

# Half-open (start, end) offsets of one segment
Span = Tuple[int, int]

class Decision(IntEnum):
    """Per-offset outcome in the segmentation mask."""
    UNDECIDED = 0
    NO_BREAK = 1
    BREAK = 2

    @classmethod
    def from_flag(cls, do_break: bool) -> "Decision":
        """Map a rule's break flag to the mask value it claims."""
        return cls.BREAK if do_break else cls.NO_BREAK
