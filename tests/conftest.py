"""
Shared fixtures

A small rule set covering every kind of value the grammar knows about.
"""

import pytest

from atomizer.lib.grammar import grammar_compile
from atomizer.models.config import AtomizerConfig
from atomizer.models.rules import KeywordRule, Rule, RuleType


@pytest.fixture
def rules():
    """Display, width, color, margin, font-size and a line-clamp helper"""
    return [
        Rule(
            prefix="D",
            name="Display",
            properties=["display"],
            allowSuffixToValue=False,
            keywordRules=[KeywordRule("n", "none"), KeywordRule("b", "block")],
        ),
        Rule(prefix="W", name="Width", properties=["width"], keywordRules=[KeywordRule("a", "auto")]),
        Rule(prefix="C", name="Color", properties=["color"]),
        Rule(prefix="M", name="Margin", properties=["margin"]),
        Rule(prefix="Fz", name="Font size", properties=["font-size"]),
        Rule(
            prefix="LineClamp",
            type=RuleType.HELPER,
            name="Line clamp",
            declaration={"-webkit-line-clamp": "$0", "max-height": "$1"},
            subRules={"[class*=LineClamp]": {"overflow": "hidden"}},
        ),
    ]


@pytest.fixture
def grammar(rules):
    """Grammar compiled from the shared rule set"""
    return grammar_compile(rules)


@pytest.fixture
def config():
    """Empty configuration"""
    return AtomizerConfig()
