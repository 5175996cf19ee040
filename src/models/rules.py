"""
Rule definition models

Defines the structure of atomic rules: pattern rules that map a class-name
prefix to one or more CSS properties, and helper rules that expand a fixed
declaration template with positional parameters.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


class RuleType(Enum):
    """
    Kinds of atomic rules

    PATTERN rules take their value from the class name (.Op-1, .W-1/3).
    HELPER rules take a parameter list (.LineClamp(3,4.5em)).
    """
    PATTERN = "pattern"
    HELPER = "helper"


@dataclass(frozen=True)
class KeywordRule:
    """
    Named suffix declared by a pattern rule

    Attributes:
        suffix: Named suffix as written in the class name (e.g. "n" in D-n)
        value: CSS value applied to every property of the owning rule

    Example:
        KeywordRule(suffix="n", value="none") turns D-n into display: none
    """
    suffix: str
    value: str


@dataclass(frozen=True)
class Rule:
    """
    Specification of one atomic rule

    Attributes:
        prefix: Class-name prefix, unique in a registry ("Op", "Op-", "LineClamp")
        type: RuleType.PATTERN or RuleType.HELPER
        name: Human readable rule name
        properties: Target CSS properties (pattern rules)
        declaration: Property -> value template using $0, $1, ... (helper rules)
        allowSuffixToValue: Whether numbers, fractions and colors are used verbatim
        keywordRules: Named suffixes known by the rule, in lookup order
        subRules: Selector -> declaration map injected once by a helper
    """
    prefix: str
    type: RuleType = RuleType.PATTERN
    name: str = ""
    properties: Tuple[str, ...] = ()
    declaration: Optional[Dict[str, Any]] = None
    allowSuffixToValue: bool = True
    keywordRules: Tuple[KeywordRule, ...] = ()
    subRules: Optional[Dict[str, Dict[str, Any]]] = None

    def __post_init__(self) -> None:
        # lists are accepted for convenience but stored as tuples
        object.__setattr__(self, "properties", tuple(self.properties))
        object.__setattr__(self, "keywordRules", tuple(self.keywordRules))

    @property
    def stem(self) -> str:
        """
        Literal text this rule contributes to a class name

        Pattern prefixes are separated from their value by a single hyphen,
        so "Op" and "Op-" both produce the stem "Op-". Helper prefixes are
        followed directly by their parameter list and are used verbatim.
        """
        if self.type is RuleType.HELPER or self.prefix.endswith("-"):
            return self.prefix
        return f"{self.prefix}-"

    def keyword_get(self, suffix: str) -> Optional[KeywordRule]:
        """Return the keyword rule declared for a named suffix, if any"""
        for keyword in self.keywordRules:
            if keyword.suffix == suffix:
                return keyword
        return None

    @classmethod
    def rule_fromDict(cls, data: Dict[str, Any]) -> "Rule":
        """
        Build a Rule from a plain mapping (e.g. loaded from YAML or JSON)

        Accepts "type" as a string, "rules" as an alias for keywordRules
        and keyword entries either as {suffix, value} or {suffix, values}.

        Example:
            >>> Rule.rule_fromDict({"prefix": "Op-", "properties": ["opacity"]}).stem
            'Op-'
        """
        keywords: List[KeywordRule] = []
        for entry in data.get("keywordRules", data.get("rules", None)) or []:
            if isinstance(entry, KeywordRule):
                keywords.append(entry)
                continue
            if "value" in entry:
                value = entry["value"]
            else:
                # a list of values collapses to the last one
                value = list(entry.get("values", [""]))[-1]
            keywords.append(KeywordRule(suffix=str(entry["suffix"]), value=str(value)))

        rule_type = data.get("type", RuleType.PATTERN)
        if not isinstance(rule_type, RuleType):
            rule_type = RuleType(str(rule_type).lower())

        return cls(
            prefix=data["prefix"],
            type=rule_type,
            name=data.get("name", ""),
            properties=tuple(data.get("properties", ())),
            declaration=data.get("declaration"),
            allowSuffixToValue=data.get("allowSuffixToValue", True),
            keywordRules=tuple(keywords),
            subRules=data.get("subRules"),
        )
