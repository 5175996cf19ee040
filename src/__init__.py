"""
atomizer - Atomic CSS generator

Finds atomic class names (D-n, W-1/3, C-#fff.5:h, LineClamp(3,4.5em)) in
markup and generates the CSS that backs them.
"""

__version__ = "1.0.0"

from .lib import Atomizer, CssCompiler, RuleRegistry, grammar_compile, LOG, state_connectToLogger
from .models import AtomizerConfig, CssOptions, Rule, RuleType, KeywordRule

__all__ = [
    "Atomizer",
    "CssCompiler",
    "RuleRegistry",
    "grammar_compile",
    "AtomizerConfig",
    "CssOptions",
    "Rule",
    "RuleType",
    "KeywordRule",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
