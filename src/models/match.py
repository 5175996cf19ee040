"""
Match-specific data models

Type-safe structures produced while matching and resolving class names.

A ClassMatch is the purely syntactic view of one class name (what the
grammar recognised). A MatchRecord is the semantic view (what the class
name means once fractions, colors and named suffixes are resolved).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .rules import Rule


@dataclass(frozen=True)
class ParentContext:
    """
    Parent selector prefix of a class name

    Attributes:
        parent: Parent token (e.g. "foo" in foo:h>D-n)
        pseudo: Optional pseudo-class on the parent, as written (":h")
        separator: ">" for a direct child, "_" for a descendant

    Example:
        For "foo:h>D-n":
        ParentContext(parent="foo", pseudo=":h", separator=">")
    """
    parent: str
    pseudo: Optional[str]
    separator: str


@dataclass(frozen=True)
class FractionValue:
    """Fraction value, e.g. 1/3 in W-1/3"""
    numerator: int
    denominator: int


@dataclass(frozen=True)
class HexValue:
    """Hex color with optional alpha, e.g. #fff.5 in C-#fff.5"""
    hex: str
    alpha: Optional[str] = None


@dataclass(frozen=True)
class NumberValue:
    """Optionally negative number with optional unit, e.g. neg10px in M-neg10px"""
    number: str
    unit: str = ""
    negative: bool = False


@dataclass(frozen=True)
class NamedValue:
    """Named suffix needing keyword or custom lookup, e.g. n in D-n"""
    named: str


ValueKind = Union[FractionValue, HexValue, NumberValue, NamedValue]


@dataclass(frozen=True)
class ClassMatch:
    """
    Syntactic decomposition of one class name

    Returned by Grammar.className_match(). Exactly one of value (pattern
    rules) or params (helper rules) is set.

    Attributes:
        className: Full matched class name
        stem: Rule stem that matched ("Op-", "LineClamp")
        raw: Value text as written, without stem and modifiers ("neg10px")
        parentSelector: Optional parent context
        value: Decoded value variant (pattern rules)
        params: Parameter list (helper rules)
        important: Whether the ! marker is present
        valuePseudo: Trailing pseudo-class as written (":h" or ":hover")
        breakPoint: Breakpoint key ("sm" in D-n--sm)
    """
    className: str
    stem: str
    raw: str = ""
    parentSelector: Optional[ParentContext] = None
    value: Optional[ValueKind] = None
    params: Optional[Tuple[str, ...]] = None
    important: bool = False
    valuePseudo: Optional[str] = None
    breakPoint: Optional[str] = None


@dataclass
class MatchRecord:
    """
    Resolved class name, ready for the style tree builder

    Attributes:
        className: Verbatim class name
        prefix: Prefix of the owning rule
        rule: Owning rule
        parentSelector: Optional parent context
        value: Resolved CSS value, or None if it could not be resolved
        named: Named suffix, when the value was a named token
        declaration: Explicit property -> value map (keyword rules)
        params: Helper parameters, in order
        valuePseudo: Trailing pseudo-class as written
        breakPoint: Raw breakpoint key
        important: Whether the ! marker is present

    Example:
        For "Op-1!" with an opacity rule:
        MatchRecord(className="Op-1!", prefix="Op-", value="1 !important",
                    important=True, ...)
    """
    className: str
    prefix: str
    rule: 'Rule'
    parentSelector: Optional[ParentContext] = None
    value: Optional[str] = None
    named: Optional[str] = None
    declaration: Optional[Dict[str, str]] = None
    params: Tuple[str, ...] = field(default_factory=tuple)
    valuePseudo: Optional[str] = None
    breakPoint: Optional[str] = None
    important: bool = False
