"""Tri-state decision mask and offset utilities."""

import numpy as np
from typing import Iterable

from .types import Decision

def new_mask(size: int) -> np.ndarray:
    """
    Allocate an all-undecided mask.
    
    Args:
        size: Number of offsets (the text length)
        
    Returns:
        np.ndarray: int8 array of shape (size,) filled with Decision.UNDECIDED
    """
    return np.full(size, Decision.UNDECIDED, dtype=np.int8)

def claim(mask: np.ndarray, offsets: Iterable[int], decision: Decision) -> int:
    """
    Record a decision at every offset that is still undecided.
    
    Offsets already decided keep their earlier value, so the first rule to
    claim an offset wins.
    
    Args:
        mask: Mask from new_mask, modified in place
        offsets: Candidate offsets, each in [0, len(mask))
        decision: Decision.BREAK or Decision.NO_BREAK
        
    Returns:
        int: Number of offsets newly decided
    """
    idx = np.fromiter(offsets, dtype=np.intp)
    if idx.size == 0:
        return 0
    idx = np.unique(idx[mask[idx] == Decision.UNDECIDED])
    mask[idx] = decision
    return int(idx.size)

def break_offsets(mask: np.ndarray) -> np.ndarray:
    """Offsets decided as BREAK, ascending."""
    return np.flatnonzero(mask == Decision.BREAK)

def utf8_offsets(text: str) -> np.ndarray:
    """
    Map character offsets to UTF-8 byte offsets.
    
    Args:
        text: Text of valid Unicode scalar values
        
    Returns:
        np.ndarray: Shape (len(text) + 1,). Entry i is the byte offset of
        character i; the last entry is the encoded length.
    """
    if not text:
        return np.zeros(1, dtype=np.intp)
    codes = np.frombuffer(text.encode("utf-32-le"), dtype=np.uint32)
    widths = (1 + (codes >= 0x80).astype(np.intp)
              + (codes >= 0x800) + (codes >= 0x10000))
    offsets = np.zeros(len(text) + 1, dtype=np.intp)
    np.cumsum(widths, out=offsets[1:])
    return offsets
