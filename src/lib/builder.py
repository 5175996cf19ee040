"""
Style tree builder

Assembles resolved MatchRecords into the style model handed to the
style-sheet compiler: an ordered mapping from selector to declarations,
where declarations under a breakpoint are nested one level deeper under
the breakpoint's media query.

    {
        ".D-n": {"display": "none"},
        ".D-n--sm": {"@media(min-width:500px)": {"display": "none"}},
        ".foo:hover>.foo\\:h\\>C-\\#fff": {"color": "#fff"},
    }

Selectors follow rule registration order, then the order in which class
names were first seen.
"""

import copy
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models.config import CssOptions
from ..models.match import MatchRecord
from ..models.rules import Rule, RuleType
from .errors import HelperDeclarationError
from .log import LOG
from .selectors import commas_mask, pseudo_get, selector_escape

StyleModel = Dict[str, Any]


def dict_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge source into target (in place)

    Nested mappings are merged key by key; any other value in source
    replaces the value in target.

    Returns:
        target
    """
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            dict_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = dict_merge({}, value)
        else:
            target[key] = value
    return target


def selector_make(record: MatchRecord) -> str:
    r"""
    Build the CSS selector for a record

    Example:
        "D-n:h"      -> ".D-n\:h:hover"
        "foo:h>D-n"  -> ".foo:hover>.foo\:h\>D-n"
        "foo_D-n"    -> ".foo .foo_D-n"
    """
    selector = selector_escape(record.className)

    context = record.parentSelector
    if context is not None:
        separator = context.separator if context.separator == ">" else " "
        selector = "".join([
            selector_escape(context.parent),
            pseudo_get(context.pseudo),
            separator,
            ".",
            selector,
        ])

    if record.valuePseudo:
        selector += pseudo_get(record.valuePseudo)

    return f".{selector}"


def patternDeclaration_make(record: MatchRecord) -> Optional[Dict[str, Any]]:
    """Declarations of a pattern record, or None when it resolved to nothing"""
    if record.declaration is not None:
        return dict(record.declaration)
    if record.value is not None:
        return {prop: record.value for prop in record.rule.properties}
    return None


def helperDeclaration_make(rule: Rule, params: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Expand a helper's declaration template with its parameters

    $0 is replaced by the first parameter, $1 by the second, and so on.
    The rule's template is left untouched.

    Raises:
        HelperDeclarationError: If the rule has no declaration
    """
    if rule.declaration is None:
        raise HelperDeclarationError(rule.prefix)

    declaration = dict(rule.declaration)
    # highest index first, so $1 never eats the start of $10
    for index in reversed(range(len(params))):
        placeholder = f"${index}"
        for prop, value in declaration.items():
            if isinstance(value, str):
                declaration[prop] = value.replace(placeholder, params[index])
    return declaration


def styleModel_build(
    records: Iterable[MatchRecord],
    rules: Iterable[Rule],
    breakPoints: Optional[Mapping[str, str]] = None,
    options: Optional[CssOptions] = None,
) -> StyleModel:
    """
    Build the style model for resolved records

    Args:
        records: Resolved records, in first-seen order
        rules: Rules in registration order (drives selector order)
        breakPoints: Breakpoint key -> media query; unknown keys are ignored
        options: Namespace options

    Returns:
        Selector -> declarations mapping; pattern selectors first, helper
        selectors merged on top

    Raises:
        HelperDeclarationError: If a used helper rule has no declaration
    """
    options = options or CssOptions()
    breakPoints = breakPoints or {}

    grouped: Dict[str, List[MatchRecord]] = {}
    for record in records:
        grouped.setdefault(record.rule.stem, []).append(record)

    patterns: StyleModel = {}
    helpers: StyleModel = {}

    for rule in rules:
        for record in grouped.get(rule.stem, []):
            selector = commas_mask(selector_make(record))
            media = breakPoints.get(record.breakPoint) if record.breakPoint else None

            if rule.type is RuleType.HELPER:
                declaration = helperDeclaration_make(rule, record.params)
                helpers[selector] = {media: declaration} if media else declaration
                if rule.subRules:
                    dict_merge(patterns, copy.deepcopy(rule.subRules))
            else:
                declaration = patternDeclaration_make(record)
                if declaration is None:
                    continue
                patterns[selector] = {media: declaration} if media else declaration

            LOG(f"{selector} <- {record.className}", level=3)

    if options.namespace:
        patterns = {options.namespace: patterns}
    if options.helpersNS:
        helpers = {options.helpersNS: helpers}

    return dict_merge(patterns, helpers)
