"""
srx-segmenter - Rule-based sentence segmentation with SRX 2.0 rule tables.

Rules are ordered break / no-break regex pairs grouped per language and
selected through a cascading language map. Load a table, build an engine
once, then resolve rules per language code and split text.
"""

__version__ = "0.1.0"

from .rules.loader import RuleTableLoadError, load_rule_table, load_rule_table_from_string
from .rules.schema import RuleTable
from .runtime.engine import SegmentationEngine, build_engine
from .runtime.errors import (
    SegmentationError,
    EngineBuildError,
    MissingRuleBucketError,
    InvalidLanguagePatternError,
    RuleCompileError,
    EmptyPatternPairError,
    InvalidRegexSyntaxError,
)
from .runtime.rule_set import RuleSet
from .segmenters.sentence import SentenceSegmenter

__all__ = [
    'RuleTableLoadError', 'load_rule_table', 'load_rule_table_from_string',
    'RuleTable', 'SegmentationEngine', 'build_engine', 'RuleSet',
    'SentenceSegmenter', 'SegmentationError', 'EngineBuildError',
    'MissingRuleBucketError', 'InvalidLanguagePatternError', 'RuleCompileError',
    'EmptyPatternPairError', 'InvalidRegexSyntaxError',
]
