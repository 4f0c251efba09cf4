"""Exceptions raised while compiling rules and building engines."""

from ..core.types import Language

class SegmentationError(Exception):
    """Base class for segmentation errors."""
    pass

class EngineBuildError(SegmentationError):
    """The rule table cannot be turned into an engine. No engine is produced."""
    pass

class MissingRuleBucketError(EngineBuildError):
    """A language named in the language map has no rule bucket."""

    def __init__(self, language: Language):
        self.language = language
        super().__init__(
            "language_rules must have an entry for each language in language_map. "
            f"Did not find entry for {language!r}"
        )

class InvalidLanguagePatternError(EngineBuildError):
    """A language map pattern is not a valid regex."""

    def __init__(self, pattern: str, cause: Exception):
        self.pattern = pattern
        super().__init__(f"invalid language pattern {pattern!r}: {cause}")

class RuleCompileError(SegmentationError):
    """A single rule could not be compiled. Non-fatal: the rule is dropped."""
    pass

class EmptyPatternPairError(RuleCompileError):
    """Neither before_break nor after_break was given."""

    def __init__(self):
        super().__init__("either `before_break` or `after_break` must be set")

class InvalidRegexSyntaxError(RuleCompileError):
    """The fused before/after pattern is not a valid regex."""

    def __init__(self, pattern: str, cause: Exception):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"invalid regex {pattern!r}: {cause}")
