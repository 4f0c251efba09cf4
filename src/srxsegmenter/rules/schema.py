"""Pydantic schemas for rule table validation."""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

def parse_flag(value: Any) -> bool:
    """Accept a boolean or the SRX tokens 'yes'/'no'."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip() in ("yes", "no"):
        return value.strip() == "yes"
    raise ValueError(f"unexpected boolean value {value!r}. Expected 'yes' or 'no'.")

class RuleDef(BaseModel):
    """One raw <rule>: a break flag and its before/after contexts."""
    do_break: bool = Field(default=True, alias="break",
                           description="Break (yes) or exception (no) rule")
    before_break: Optional[str] = Field(default=None,
                                        description="Regex for the text before the break")
    after_break: Optional[str] = Field(default=None,
                                       description="Regex for the text after the break")

    class Config:
        extra = "forbid"
        populate_by_name = True

    @field_validator("do_break", mode="before")
    @classmethod
    def parse_break(cls, value: Any) -> bool:
        return parse_flag(value)

class LanguageMapEntry(BaseModel):
    """One <languagemap>: language-code pattern and the bucket it selects."""
    pattern: str = Field(description="Regex matched against the whole language code")
    language: str = Field(description="Name of the rule bucket to apply")

    class Config:
        extra = "forbid"

class SegmenterSettings(BaseModel):
    """Runtime limits for rule matching."""
    match_timeout: Optional[float] = Field(default=1.0, gt=0.0,
                                           description="Seconds per match attempt; null disables the limit")

    class Config:
        extra = "forbid"

class RuleTable(BaseModel):
    """Complete rule table: cascade flag, language map and rule buckets."""
    version: str = Field(default="2.0", description="SRX version the table follows")
    cascade: bool = Field(description="Apply every matching language map entry, not just the first")
    language_map: List[LanguageMapEntry] = Field(description="Ordered language map")
    language_rules: Dict[str, List[RuleDef]] = Field(description="Rule buckets by language name")
    settings: SegmenterSettings = Field(default_factory=SegmenterSettings)

    class Config:
        extra = "forbid"

    @field_validator("cascade", mode="before")
    @classmethod
    def parse_cascade(cls, value: Any) -> bool:
        return parse_flag(value)

    def missing_languages(self) -> List[str]:
        """Languages named in the map that have no rule bucket, in map order."""
        missing = []
        for entry in self.language_map:
            if entry.language not in self.language_rules and entry.language not in missing:
                missing.append(entry.language)
        return missing
