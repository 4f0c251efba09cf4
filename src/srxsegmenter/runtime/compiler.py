"""Compile SRX before/after pattern pairs into single-regex rules."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

import regex

from .errors import EmptyPatternPairError, InvalidRegexSyntaxError

# Name of the group whose start marks the break candidate
BREAK_GROUP = "srxbreak"

@dataclass(frozen=True)
class Rule:
    """Compiled break/no-break rule."""
    pattern: "regex.Pattern" = field(repr=False)
    do_break: bool
    before_break: Optional[str] = None
    after_break: Optional[str] = None

    def match_offsets(self, text: str, timeout: Optional[float] = None) -> Iterator[int]:
        """
        Yield break candidate offsets in text, left to right.
        
        Matches do not overlap, so overlapping occurrences of this rule are
        not reported. Offsets at or past the end of the text are skipped.

        Args:
            text: Text to scan
            timeout: Seconds allowed for each match attempt (None for no limit)

        Yields:
            int: Character offset where the after_break part starts

        Raises:
            TimeoutError: If a single match attempt exceeds timeout
        """
        size = len(text)
        pos = 0
        while pos <= size:
            match = self.pattern.search(text, pos, timeout=timeout)
            if match is None:
                break
            offset = match.start(BREAK_GROUP)
            if 0 <= offset < size:
                yield offset
            # an empty match would be found again at the same position
            pos = match.end() if match.end() > match.start() else match.end() + 1

def fuse_patterns(before_break: Optional[str], after_break: Optional[str]) -> str:
    """Concatenate before_break with after_break wrapped in the break group."""
    return f"{before_break or ''}(?P<{BREAK_GROUP}>{after_break or ''})"

def compile_rule(before_break: Optional[str], after_break: Optional[str],
                 do_break: bool) -> Rule:
    """
    Build a rule from an SRX pattern pair.
    
    Args:
        before_break: Context that must precede the break (None or "" if absent)
        after_break: Context that must follow the break (None or "" if absent)
        do_break: True for a break rule, False for an exception rule
        
    Returns:
        Rule: Compiled rule
        
    Raises:
        EmptyPatternPairError: If both patterns are absent
        InvalidRegexSyntaxError: If the fused pattern does not compile
    """
    if not before_break and not after_break:
        raise EmptyPatternPairError()

    source = fuse_patterns(before_break, after_break)
    try:
        compiled = regex.compile(source)
    except (regex.error, ValueError, OverflowError) as e:
        raise InvalidRegexSyntaxError(source, e) from e

    return Rule(
        pattern=compiled,
        do_break=do_break,
        before_break=before_break or None,
        after_break=after_break or None,
    )
