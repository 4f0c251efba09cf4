"""Language-code to rule-bucket resolution."""

from dataclasses import dataclass, field
from typing import List, Tuple

import regex

from ..core.types import Language

@dataclass(frozen=True)
class LanguageMapEntry:
    """One <languagemap>: a language-code pattern and the bucket it selects."""
    pattern: "regex.Pattern" = field(repr=False)
    language: Language

    def matches(self, code: str) -> bool:
        """True if the pattern matches the whole language code."""
        return self.pattern.fullmatch(code) is not None

@dataclass(frozen=True)
class LanguageMap:
    """Ordered language map with SRX cascade semantics."""
    entries: Tuple[LanguageMapEntry, ...]
    cascade: bool

    def matching_languages(self, code: str) -> List[Language]:
        """
        Buckets that apply to a language code, in map order.
        
        Without cascade only the first matching entry is used.
        
        Args:
            code: Language code such as "en" or "de-AT"
            
        Returns:
            List[Language]: Matched bucket names (empty if nothing matches)
        """
        matched: List[Language] = []
        for entry in self.entries:
            if entry.matches(code):
                matched.append(entry.language)
                if not self.cascade:
                    break
        return matched

    @property
    def languages(self) -> List[Language]:
        """Bucket names referenced by the map, in map order."""
        return [entry.language for entry in self.entries]
