"""
atomizer engine

Grammar compilation, class name extraction and resolution, style model
building and CSS compilation.
"""

from .atomizer import Atomizer
from .compiler import CssCompiler, StyleSheetCompiler
from .errors import (
    AtomizerError,
    BreakPointError,
    DuplicateRuleError,
    HelperDeclarationError,
    StyleSheetCompileError,
)
from .grammar import Grammar, grammar_compile
from .registry import RuleRegistry
from .log import LOG, state_connectToLogger

__all__ = [
    "Atomizer",
    "CssCompiler",
    "StyleSheetCompiler",
    "AtomizerError",
    "BreakPointError",
    "DuplicateRuleError",
    "HelperDeclarationError",
    "StyleSheetCompileError",
    "Grammar",
    "grammar_compile",
    "RuleRegistry",
    "LOG",
    "state_connectToLogger",
]
