"""
Grammar for atomic class names

Compiles a rule set into one composite regular expression and decodes the
matches it produces.

The grammar is regular on purpose: class names are picked out of arbitrary
text (HTML, templates, scripts) without a lexical analysis of that text.

A class name reads, left to right:

    [parent[:pseudo](>|_)] stem value [!] [:pseudo] [--breakpoint]   (pattern)
    [parent[:pseudo](>|_)] stem(param,param,...) [:pseudo] [--breakpoint]   (helper)

Example:
    >>> grammar = grammar_compile([Rule(prefix="Op", properties=["opacity"])])
    >>> grammar.classNames_find('<div class="Op-1 foo Op-.5">')
    ['Op-1']
    >>> grammar.className_match("Op-1").value
    NumberValue(number='1', unit='', negative=False)
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..models.match import (
    ClassMatch,
    FractionValue,
    HexValue,
    NamedValue,
    NumberValue,
    ParentContext,
    ValueKind,
)
from ..models.rules import Rule, RuleType
from .errors import DuplicateRuleError
from .log import LOG
from .selectors import PSEUDOS


def alternation_make(tokens: Iterable[str]) -> str:
    """Escape tokens and join them longest first so none shadows a longer one"""
    ordered = sorted(tokens, key=len, reverse=True)
    return "|".join(re.escape(token) for token in ordered)


PSEUDO_REGEX = "(?:" + alternation_make(list(PSEUDOS) + list(PSEUDOS.values())) + ")"

GRAMMAR: Dict[str, str] = {
    # start of text, whitespace, a quote or an opening brace
    'BOUNDARY'   : r'(?<![^\s"\'{])',
    'PARENT'     : r'[^\s:>_"\'{]+',
    'PARENT_SEP' : r'[>_]',
    'FRACTION'   : r'(?P<numerator>[0-9]+)/(?P<denominator>[1-9][0-9]*)',
    'PARAMS'     : r'\((?P<params>[^)\n]*)\)',
    'SIGN'       : r'neg',
    'NUMBER'     : r'[0-9]+(?:\.[0-9]+)?',
    'UNIT'       : r'[a-zA-Z%]+',
    'HEX'        : r'#[0-9a-f]{3}(?:[0-9a-f]{3})?',
    'ALPHA'      : r'\.\d{1,2}',
    'IMPORTANT'  : r'!',
    # words joined by single hyphens; "--" starts a breakpoint
    'NAMED'      : r'\w+(?:-(?!-)\w*)*',
    'PSEUDO'     : PSEUDO_REGEX,
    'BREAKPOINT' : r'--(?P<breakPoint>[a-z]+)',
}

GRAMMAR['PARENT_SELECTOR'] = ''.join([
    '(?P<parent>', GRAMMAR['PARENT'], ')',
    '(?P<parentPseudo>', GRAMMAR['PSEUDO'], ')?',
    '(?P<parentSep>', GRAMMAR['PARENT_SEP'], ')',
])

GRAMMAR['VALUE'] = ''.join([
    '(?P<value>',
        '(?P<fraction>', GRAMMAR['FRACTION'], ')',
        '|',
        '(?:',
            '(?P<hex>', GRAMMAR['HEX'], ')',
            '(?P<alpha>', GRAMMAR['ALPHA'], ')?',
            '(?!', GRAMMAR['UNIT'], ')',
        ')',
        '|',
        '(?P<sign>', GRAMMAR['SIGN'], ')?',
        '(?P<number>', GRAMMAR['NUMBER'], ')',
        '(?P<unit>', GRAMMAR['UNIT'], ')?',
        '|',
        '(?P<named>', GRAMMAR['NAMED'], ')',
    ')',
])


def syntax_build(patternStems: List[str], helperStems: List[str]) -> str:
    """
    Assemble the composite expression for the given stems

    Args:
        patternStems: Stems of pattern rules ("Op-", "W-")
        helperStems: Stems of helper rules ("LineClamp")

    Returns:
        Regular expression source; matches nothing when both lists are empty
    """
    branches = []

    if helperStems:
        branches.append(''.join([
            '(?P<helper>', alternation_make(helperStems), ')',
            GRAMMAR['PARAMS'],
        ]))

    if patternStems:
        branches.append(''.join([
            '(?P<prop>', alternation_make(patternStems), ')',
            GRAMMAR['VALUE'],
            '(?P<important>', GRAMMAR['IMPORTANT'], ')?',
        ]))

    if not branches:
        return '(?!)'

    main = branches[0] if len(branches) == 1 else '(?:' + '|'.join(branches) + ')'

    return ''.join([
        GRAMMAR['BOUNDARY'],
        '(?P<parentSelector>', GRAMMAR['PARENT_SELECTOR'], ')?',
        main,
        '(?P<valuePseudo>', GRAMMAR['PSEUDO'], ')?',
        '(?:', GRAMMAR['BREAKPOINT'], ')?',
    ])


@dataclass(frozen=True)
class Grammar:
    """
    Compiled matcher for a fixed rule set

    Immutable: a new Grammar is compiled whenever the rule set changes.

    Attributes:
        rules: Rules in registration order
        index: Stem -> rule
        regex: Compiled composite expression
    """
    rules: Tuple[Rule, ...]
    index: Mapping[str, Rule]
    regex: 're.Pattern[str]'

    def classNames_find(self, text: str) -> List[str]:
        """
        Find every atomic class name in a text blob

        Purely syntactic: anything the grammar accepts is returned, whether
        or not it resolves later.

        Args:
            text: Arbitrary source text

        Returns:
            Matched class names, first-seen order, without duplicates

        Example:
            For '<a class="D-n D-b D-n:h D-n">' with a display rule:
            ['D-n', 'D-b', 'D-n:h']
        """
        found: Dict[str, None] = {}
        for match in self.regex.finditer(text):
            found.setdefault(match.group(0), None)
        return list(found)

    def className_match(self, className: str) -> Optional[ClassMatch]:
        """
        Decompose a single class name

        The whole string has to satisfy the grammar.

        Args:
            className: One class name ("foo>Op-1:h--sm")

        Returns:
            ClassMatch, or None if the class name is not atomic
        """
        match = self.regex.fullmatch(className)
        if not match:
            return None

        groups = match.groupdict()

        parent: Optional[ParentContext] = None
        if groups['parentSelector']:
            parent = ParentContext(
                parent=groups['parent'],
                pseudo=groups['parentPseudo'],
                separator=groups['parentSep'],
            )

        params: Optional[Tuple[str, ...]] = None
        value: Optional[ValueKind] = None
        if groups.get('helper'):
            stem = groups['helper']
            raw = groups['params']
            # "()" carries no parameters
            params = tuple(raw.split(',')) if raw else ()
        else:
            stem = groups['prop']
            raw = groups['value']
            value = value_decode(groups)

        return ClassMatch(
            className=match.group(0),
            stem=stem,
            raw=raw,
            parentSelector=parent,
            value=value,
            params=params,
            important=bool(groups.get('important')),
            valuePseudo=groups['valuePseudo'],
            breakPoint=groups['breakPoint'],
        )

    def rule_get(self, stem: str) -> Optional[Rule]:
        """Return the rule owning a stem"""
        return self.index.get(stem)


def value_decode(groups: Dict[str, Optional[str]]) -> ValueKind:
    """Turn the value groups of a pattern match into a value variant"""
    if groups['fraction']:
        return FractionValue(
            numerator=int(groups['numerator']),
            denominator=int(groups['denominator']),
        )
    if groups['hex']:
        return HexValue(hex=groups['hex'], alpha=groups['alpha'])
    if groups['number']:
        return NumberValue(
            number=groups['number'],
            unit=groups['unit'] or '',
            negative=bool(groups['sign']),
        )
    return NamedValue(named=groups['named'])


def grammar_compile(rules: Iterable[Rule]) -> Grammar:
    """
    Compile a rule set into a Grammar

    Pure function of the rule set.

    Args:
        rules: Rules in registration order

    Returns:
        Grammar for the rules

    Raises:
        DuplicateRuleError: If two rules share a stem
    """
    ordered = tuple(rules)
    index: Dict[str, Rule] = {}
    patternStems: List[str] = []
    helperStems: List[str] = []

    for rule in ordered:
        if rule.stem in index:
            raise DuplicateRuleError(rule.prefix)
        index[rule.stem] = rule
        if rule.type is RuleType.HELPER:
            helperStems.append(rule.stem)
        else:
            patternStems.append(rule.stem)

    source = syntax_build(patternStems, helperStems)
    LOG(f"Compiled grammar: {len(patternStems)} patterns, {len(helperStems)} helpers", level=3)

    return Grammar(rules=ordered, index=MappingProxyType(index), regex=re.compile(source, re.ASCII))
