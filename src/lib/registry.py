"""
Rule registry

Holds the ordered rule set of an Atomizer and the grammar compiled from it.
"""

import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..models.rules import Rule
from .errors import DuplicateRuleError
from .grammar import Grammar, grammar_compile
from .log import LOG


class RuleRegistry:
    """
    Registry of atomic rules

    Maps class-name stems to Rule objects and keeps registration order,
    which is also the order of the generated CSS. The compiled grammar is
    cached until rules are added.
    """

    def __init__(self, rules: Optional[Iterable[Union[Rule, Mapping[str, Any]]]] = None) -> None:
        """Initialize the registry, optionally registering a first set of rules"""
        self.rules: List[Rule] = []
        self.specs: Dict[str, Rule] = {}
        self._grammar: Optional[Grammar] = None
        self._lock = threading.Lock()
        if rules is not None:
            self.rules_add(rules)

    def rules_add(self, rules: Iterable[Union[Rule, Mapping[str, Any]]]) -> None:
        """
        Register rules, in order

        Plain mappings are converted with Rule.rule_fromDict(). Nothing is
        registered if any rule clashes with an existing one or with another
        rule of the same batch.

        Raises:
            DuplicateRuleError: If a stem is already registered
        """
        batch = [rule if isinstance(rule, Rule) else Rule.rule_fromDict(rule) for rule in rules]

        with self._lock:
            specs = dict(self.specs)
            for rule in batch:
                if rule.stem in specs:
                    raise DuplicateRuleError(rule.prefix)
                specs[rule.stem] = rule

            self.rules = self.rules + batch
            self.specs = specs
            self._grammar = None

        LOG(f"Registered {len(batch)} rules ({len(self.rules)} total)", level=3)

    def grammar_get(self) -> Grammar:
        """Return the grammar for the current rules, compiling it if needed"""
        with self._lock:
            if self._grammar is None:
                self._grammar = grammar_compile(self.rules)
            return self._grammar

