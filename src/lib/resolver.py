"""
Class name resolver

Turns a class name recognised by the grammar into a MatchRecord: fractions
become percentages, hex colors with alpha become rgba(), "neg" numbers
become negative, and named suffixes are looked up in the rule's keyword
table and then in the caller's custom values.

Example:
    >>> grammar = grammar_compile([Rule(prefix="W", properties=["width"])])
    >>> record_resolve("W-1/3", grammar, AtomizerConfig()).value
    '33.3333%'
"""

import math
from fractions import Fraction
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.config import AtomizerConfig
from ..models.match import (
    ClassMatch,
    FractionValue,
    HexValue,
    MatchRecord,
    NamedValue,
    NumberValue,
)
from ..models.rules import Rule, RuleType
from .grammar import Grammar
from .log import LOG

IMPORTANT = " !important"


def hex_toRgb(hexColor: str) -> Tuple[int, int, int]:
    """
    Decode a 3 or 6 digit hex color into its RGB bytes

    Example:
        >>> hex_toRgb("#fff")
        (255, 255, 255)
        >>> hex_toRgb("#336699")
        (51, 102, 153)
    """
    digits = hexColor.lstrip("#")
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def number_format(value: float) -> str:
    """Print a number the way JavaScript does: 50 not 50.0, 33.3333 as is"""
    if value == int(value):
        return str(int(value))
    return repr(value)


def fraction_toPercentage(fraction: FractionValue) -> str:
    """
    Convert a fraction to a percentage rounded to 4 decimal places

    Computed exactly, so numerators of any size are fine. Halves round up.

    Example:
        >>> fraction_toPercentage(FractionValue(1, 3))
        '33.3333%'
        >>> fraction_toPercentage(FractionValue(2, 4))
        '50%'
    """
    percentage = Fraction(fraction.numerator, fraction.denominator) * 100
    whole, rest = divmod(math.floor(percentage * 10000 + Fraction(1, 2)), 10000)
    if not rest:
        return f"{whole}%"
    return f"{whole}.{rest:04d}".rstrip("0") + "%"


def hex_resolve(color: HexValue) -> str:
    """Return the hex color, or its rgba() form when an alpha is given"""
    if not color.alpha:
        return color.hex
    r, g, b = hex_toRgb(color.hex)
    return f"rgba({r},{g},{b},{color.alpha})"


def named_resolve(
    record: MatchRecord,
    rule: Rule,
    named: str,
    config: AtomizerConfig,
    warnings: List[str],
) -> None:
    """
    Resolve a named suffix in place

    Lookup order:
        1. the rule's keyword table -> record.declaration
        2. config.custom["<stem><named>"] -> record.value
        3. config.custom["<named>"] -> record.value
    When nothing matches the record value is cleared and "<stem><named>"
    is appended to warnings.
    """
    record.named = named

    keyword = rule.keyword_get(named)
    if keyword is not None:
        suffix = IMPORTANT if record.important else ""
        record.declaration = {prop: f"{keyword.value}{suffix}" for prop in rule.properties}
        return

    key = f"{rule.stem}{named}"
    custom = config.custom or {}
    if key in custom:
        record.value = str(custom[key])
    elif named in custom:
        record.value = str(custom[named])
    else:
        LOG(f"Ambiguous class name: {record.className}", level=2)
        warnings.append(key)
        record.value = None


def record_resolve(
    className: str,
    grammar: Grammar,
    config: AtomizerConfig,
    warnings: Optional[List[str]] = None,
) -> Optional[MatchRecord]:
    """
    Resolve one class name

    Args:
        className: Class name to resolve
        grammar: Compiled grammar of the rule set
        config: Caller configuration (custom values)
        warnings: Collects "<stem><named>" keys that could not be resolved

    Returns:
        MatchRecord (value None when a named suffix is unresolved),
        or None when the class name is not atomic
    """
    if warnings is None:
        warnings = []

    match: Optional[ClassMatch] = grammar.className_match(className)
    if match is None:
        LOG(f"Skipping non-atomic class name: {className}", level=3)
        return None

    rule = grammar.rule_get(match.stem)
    if rule is None:
        return None

    record = MatchRecord(
        className=match.className,
        prefix=rule.prefix,
        rule=rule,
        parentSelector=match.parentSelector,
        valuePseudo=match.valuePseudo,
        breakPoint=match.breakPoint,
        important=match.important,
    )

    if rule.type is RuleType.HELPER:
        record.params = match.params or ()
        return record

    value = match.value
    if not rule.allowSuffixToValue:
        value = NamedValue(named=match.raw)

    if isinstance(value, FractionValue):
        record.value = fraction_toPercentage(value)
    elif isinstance(value, HexValue):
        record.value = hex_resolve(value)
    elif isinstance(value, NumberValue):
        sign = "-" if value.negative else ""
        record.value = f"{sign}{value.number}{value.unit}"
    elif isinstance(value, NamedValue):
        named_resolve(record, rule, value.named, config, warnings)

    if record.important and record.value is not None:
        record.value += IMPORTANT

    return record


def records_resolve(
    classNames: Iterable[str],
    grammar: Grammar,
    config: AtomizerConfig,
) -> Tuple[List[MatchRecord], List[str]]:
    """
    Resolve a batch of class names

    Duplicates are resolved once; class names the grammar rejects are
    skipped.

    Returns:
        (records in first-seen order, unresolved "<stem><named>" keys)
    """
    records: List[MatchRecord] = []
    warnings: List[str] = []
    seen: Dict[str, None] = {}

    for className in classNames:
        if className in seen:
            continue
        seen[className] = None
        record = record_resolve(className, grammar, config, warnings)
        if record is not None:
            records.append(record)

    LOG(f"Resolved {len(records)} of {len(seen)} class names", level=2)
    return records, warnings
