"""Segmentation engine built from a validated rule table."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import regex

from ..core.abc import Logger, Meter
from ..core.types import Language
from ..rules.schema import RuleTable
from .compiler import Rule, compile_rule
from .errors import InvalidLanguagePatternError, MissingRuleBucketError, RuleCompileError
from .language_map import LanguageMap, LanguageMapEntry
from .rule_set import RuleSet

class SegmentationEngine:
    """
    Compiled rule buckets plus the language map.
    
    Read-only after construction. Use build_engine() or from_table() to
    create one.
    """
    
    def __init__(self, *, language_map: LanguageMap,
                 buckets: Mapping[Language, Tuple[Rule, ...]],
                 errors: Mapping[Language, Tuple[str, ...]],
                 match_timeout: Optional[float] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize engine from compiled parts.
        
        Args:
            language_map: Compiled language map (carries the cascade flag)
            buckets: Compiled rules per language, in priority order
            errors: Compile failure reasons per language
            match_timeout: Seconds allowed per match attempt in derived rule sets
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        for language in language_map.languages:
            if language not in buckets:
                raise MissingRuleBucketError(language)

        self.language_map = language_map
        self._buckets = MappingProxyType({k: tuple(v) for k, v in buckets.items()})
        self._errors = MappingProxyType({k: tuple(v) for k, v in errors.items()})
        self.match_timeout = match_timeout
        self.log = logger
        self.meter = meter

    @classmethod
    def from_table(cls, table: RuleTable, *, logger: Optional[Logger] = None,
                   meter: Optional[Meter] = None) -> "SegmentationEngine":
        """Build an engine from a rule table. See build_engine()."""
        return build_engine(table, logger=logger, meter=meter)

    @property
    def cascade(self) -> bool:
        return self.language_map.cascade

    @property
    def languages(self) -> List[Language]:
        """Names of all rule buckets."""
        return list(self._buckets)

    def bucket(self, language: Language) -> RuleSet:
        """
        Rules of a single bucket.
        
        Raises:
            KeyError: If there is no bucket with that name
        """
        return self._rule_set(self._buckets[language])

    def matching_languages(self, code: str) -> List[Language]:
        """Bucket names that apply to a language code, in priority order."""
        return self.language_map.matching_languages(code)

    def language_rules(self, code: str) -> RuleSet:
        """
        Resolve the rules for a language code.
        
        Matched buckets are concatenated in map order, which is also their
        priority order. A code that matches nothing yields an empty rule set,
        which leaves any text unsplit. Each call returns a new RuleSet, so
        callers should keep the result per language code.
        
        Args:
            code: Language code such as "en" or "fr-CA"
            
        Returns:
            RuleSet: Rules for the code
        """
        rules: List[Rule] = []
        for language in self.matching_languages(code):
            rules.extend(self._buckets[language])
        return self._rule_set(rules)

    resolve = language_rules

    def errors(self) -> Dict[Language, List[str]]:
        """Compile failure reasons per language (empty lists for clean buckets)."""
        return {language: list(reasons) for language, reasons in self._errors.items()}

    def _rule_set(self, rules) -> RuleSet:
        return RuleSet(rules, match_timeout=self.match_timeout,
                       logger=self.log, meter=self.meter)

def build_engine(table: RuleTable, *, logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None) -> SegmentationEngine:
    """
    Compile a rule table into a segmentation engine.
    
    Rules that fail to compile are dropped from their bucket and reported
    through engine.errors(); they never abort the build.
    
    Args:
        table: Validated rule table
        logger: Optional structured logger
        meter: Optional metrics collector
        
    Returns:
        SegmentationEngine: Engine ready for language_rules()
        
    Raises:
        MissingRuleBucketError: If the language map names a language
            without a bucket
        InvalidLanguagePatternError: If a language map pattern is invalid
    """
    missing = table.missing_languages()
    if missing:
        raise MissingRuleBucketError(missing[0])

    entries = []
    for entry in table.language_map:
        try:
            pattern = regex.compile(entry.pattern)
        except (regex.error, ValueError, OverflowError) as e:
            raise InvalidLanguagePatternError(entry.pattern, e) from e
        entries.append(LanguageMapEntry(pattern=pattern, language=entry.language))
    language_map = LanguageMap(entries=tuple(entries), cascade=table.cascade)

    buckets: Dict[Language, List[Rule]] = {}
    errors: Dict[Language, List[str]] = {}
    dropped = 0

    for language, definitions in table.language_rules.items():
        buckets[language] = []
        errors[language] = []
        for index, definition in enumerate(definitions):
            try:
                rule = compile_rule(definition.before_break, definition.after_break,
                                    definition.do_break)
            except RuleCompileError as e:
                errors[language].append(f"rule {index}: {e}")
                dropped += 1
                if meter:
                    meter.inc("srx.rules_dropped", language=language)
                if logger:
                    logger.warn("rule_dropped", language=language, index=index, reason=str(e))
                continue
            buckets[language].append(rule)

    if logger:
        logger.info("engine_built",
                    languages=len(buckets),
                    rules=sum(len(rules) for rules in buckets.values()),
                    dropped=dropped,
                    cascade=table.cascade)

    return SegmentationEngine(
        language_map=language_map,
        buckets=buckets,
        errors=errors,
        match_timeout=table.settings.match_timeout,
        logger=logger,
        meter=meter,
    )
