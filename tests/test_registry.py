"""
Rule registry tests

Tests registering rules, prefix lookup and grammar caching.
"""

import pytest

from atomizer.lib.errors import DuplicateRuleError
from atomizer.lib.registry import RuleRegistry
from atomizer.models.rules import KeywordRule, Rule, RuleType


class TestRegistration:
    """Test adding rules"""

    def test_rules_keep_order(self, rules):
        """Registration order is preserved"""
        registry = RuleRegistry(rules)
        assert [rule.prefix for rule in registry.rules] == [rule.prefix for rule in rules]

    def test_stem_with_and_without_hyphen(self):
        """'Op' is stored under the stem 'Op-'"""
        registry = RuleRegistry([Rule(prefix="Op", properties=["opacity"])])
        assert list(registry.specs) == ["Op-"]
        assert registry.specs["Op-"].prefix == "Op"

    def test_helper_stem(self, rules):
        """Helpers are stored under their prefix as is"""
        registry = RuleRegistry(rules)
        assert registry.specs["LineClamp"].type is RuleType.HELPER

    def test_duplicate_is_rejected(self, rules):
        """A prefix can only be registered once"""
        registry = RuleRegistry(rules)
        with pytest.raises(DuplicateRuleError, match="Rule D- already exists"):
            registry.rules_add([Rule(prefix="D-", properties=["display"])])

    def test_failed_batch_registers_nothing(self, rules):
        """A clash anywhere in a batch leaves the registry unchanged"""
        registry = RuleRegistry(rules)
        with pytest.raises(DuplicateRuleError):
            registry.rules_add([
                Rule(prefix="Op", properties=["opacity"]),
                Rule(prefix="W", properties=["width"]),
            ])
        assert len(registry.rules) == len(rules)
        assert "Op-" not in registry.specs

    def test_duplicate_within_batch(self):
        """Two rules of one batch can clash too"""
        with pytest.raises(DuplicateRuleError):
            RuleRegistry([
                Rule(prefix="Op", properties=["opacity"]),
                Rule(prefix="Op-", properties=["opacity"]),
            ])

    def test_rules_from_mappings(self):
        """Plain mappings are converted to rules"""
        registry = RuleRegistry([{
            "prefix": "Ov",
            "properties": ["overflow"],
            "allowSuffixToValue": False,
            "rules": [{"suffix": "h", "value": "hidden"}, {"suffix": "a", "values": ["x", "auto"]}],
        }])
        rule = registry.specs["Ov-"]
        assert rule.properties == ("overflow",)
        assert rule.allowSuffixToValue is False
        assert rule.keywordRules == (KeywordRule("h", "hidden"), KeywordRule("a", "auto"))

    def test_helper_from_mapping(self):
        """The rule type can be given as a string"""
        registry = RuleRegistry([{
            "prefix": "Ell",
            "type": "helper",
            "declaration": {"text-overflow": "ellipsis"},
        }])
        assert registry.rules[0].prefix == "Ell"
        assert registry.rules[0].type is RuleType.HELPER


class TestGrammarCache:
    """Test grammar compilation on demand"""

    def test_grammar_is_cached(self, rules):
        """The same grammar is returned until rules change"""
        registry = RuleRegistry(rules)
        assert registry.grammar_get() is registry.grammar_get()

    def test_adding_rules_recompiles(self, rules):
        """New rules are part of the next grammar"""
        registry = RuleRegistry(rules)
        before = registry.grammar_get()
        registry.rules_add([Rule(prefix="Op", properties=["opacity"])])
        after = registry.grammar_get()
        assert after is not before
        assert after.classNames_find("Op-1") == ["Op-1"]
