"""
Models package for atomizer

Contains data structures and type definitions for the generation pipeline.
"""

from .state import ProgramState, pipeline
from .rules import Rule, RuleType, KeywordRule
from .match import (
    ClassMatch,
    MatchRecord,
    ParentContext,
    FractionValue,
    HexValue,
    NumberValue,
    NamedValue,
)
from .config import AtomizerConfig, CssOptions

__all__ = [
    "ProgramState",
    "pipeline",
    "Rule",
    "RuleType",
    "KeywordRule",
    "ClassMatch",
    "MatchRecord",
    "ParentContext",
    "FractionValue",
    "HexValue",
    "NumberValue",
    "NamedValue",
    "AtomizerConfig",
    "CssOptions",
]
