"""
Built-in rule set

Pattern rules first, then helpers. Registration order is the order of the
generated CSS, so shorthand properties come before their longhands.

__start__ and __end__ are replaced by left/right (right/left in rtl mode)
once the CSS is compiled.
"""

from typing import List

from ..models.rules import KeywordRule, Rule, RuleType


def keywords_make(**pairs: str) -> List[KeywordRule]:
    """Keyword rules from suffix=value pairs"""
    return [KeywordRule(suffix=suffix, value=value) for suffix, value in pairs.items()]


def pattern_make(prefix: str, name: str, properties: List[str], **keywords: str) -> Rule:
    """Pattern rule accepting numbers, fractions and colors as values"""
    return Rule(
        prefix=prefix,
        type=RuleType.PATTERN,
        name=name,
        properties=tuple(properties),
        allowSuffixToValue=True,
        keywordRules=tuple(keywords_make(**keywords)),
    )


def keyword_make(prefix: str, name: str, properties: List[str], **keywords: str) -> Rule:
    """Pattern rule whose values are named keywords only"""
    return Rule(
        prefix=prefix,
        type=RuleType.PATTERN,
        name=name,
        properties=tuple(properties),
        allowSuffixToValue=False,
        keywordRules=tuple(keywords_make(**keywords)),
    )


GLOBAL_KEYWORDS = dict(inh="inherit")
LENGTH_KEYWORDS = dict(a="auto", inh="inherit")

PATTERN_RULES: List[Rule] = [
    # display & box
    keyword_make("D-", "Display", ["display"],
                 n="none", b="block", ib="inline-block", i="inline", f="flex",
                 tb="table", tbc="table-cell", tbr="table-row",
                 li="list-item", inh="inherit", **{"if": "inline-flex"}),
    keyword_make("Bxz-", "Box sizing", ["box-sizing"],
                 cb="content-box", pb="padding-box", bb="border-box", inh="inherit"),
    keyword_make("Pos-", "Position", ["position"],
                 s="static", r="relative", a="absolute", f="fixed", st="sticky", inh="inherit"),
    keyword_make("Fl-", "Float", ["float"],
                 n="none", start="__start__", end="__end__", inh="inherit"),
    keyword_make("Cl-", "Clear", ["clear"],
                 n="none", b="both", start="__start__", end="__end__", inh="inherit"),
    keyword_make("Ov-", "Overflow", ["overflow"],
                 v="visible", h="hidden", s="scroll", a="auto", inh="inherit"),
    keyword_make("V-", "Visibility", ["visibility"],
                 v="visible", h="hidden", c="collapse", inh="inherit"),
    keyword_make("Cur-", "Cursor", ["cursor"],
                 a="auto", d="default", p="pointer", m="move", t="text", na="not-allowed"),

    # offsets & sizes
    pattern_make("T-", "Top", ["top"], **LENGTH_KEYWORDS),
    pattern_make("B-", "Bottom", ["bottom"], **LENGTH_KEYWORDS),
    pattern_make("Start-", "Start", ["__start__"], **LENGTH_KEYWORDS),
    pattern_make("End-", "End", ["__end__"], **LENGTH_KEYWORDS),
    pattern_make("Z-", "Z-index", ["z-index"], a="auto", inh="inherit"),
    pattern_make("W-", "Width", ["width"], **LENGTH_KEYWORDS),
    pattern_make("Maw-", "Max width", ["max-width"], n="none", **GLOBAL_KEYWORDS),
    pattern_make("Miw-", "Min width", ["min-width"], **GLOBAL_KEYWORDS),
    pattern_make("H-", "Height", ["height"], **LENGTH_KEYWORDS),
    pattern_make("Mah-", "Max height", ["max-height"], n="none", **GLOBAL_KEYWORDS),
    pattern_make("Mih-", "Min height", ["min-height"], **GLOBAL_KEYWORDS),

    # margins & paddings
    pattern_make("M-", "Margin (all edges)", ["margin"], **LENGTH_KEYWORDS),
    pattern_make("Mx-", "Margin (X axis)", ["margin-__start__", "margin-__end__"], **LENGTH_KEYWORDS),
    pattern_make("My-", "Margin (Y axis)", ["margin-top", "margin-bottom"], **LENGTH_KEYWORDS),
    pattern_make("Mt-", "Margin top", ["margin-top"], **LENGTH_KEYWORDS),
    pattern_make("Mend-", "Margin end", ["margin-__end__"], **LENGTH_KEYWORDS),
    pattern_make("Mb-", "Margin bottom", ["margin-bottom"], **LENGTH_KEYWORDS),
    pattern_make("Mstart-", "Margin start", ["margin-__start__"], **LENGTH_KEYWORDS),
    pattern_make("P-", "Padding (all edges)", ["padding"], **GLOBAL_KEYWORDS),
    pattern_make("Px-", "Padding (X axis)", ["padding-__start__", "padding-__end__"], **GLOBAL_KEYWORDS),
    pattern_make("Py-", "Padding (Y axis)", ["padding-top", "padding-bottom"], **GLOBAL_KEYWORDS),
    pattern_make("Pt-", "Padding top", ["padding-top"], **GLOBAL_KEYWORDS),
    pattern_make("Pend-", "Padding end", ["padding-__end__"], **GLOBAL_KEYWORDS),
    pattern_make("Pb-", "Padding bottom", ["padding-bottom"], **GLOBAL_KEYWORDS),
    pattern_make("Pstart-", "Padding start", ["padding-__start__"], **GLOBAL_KEYWORDS),

    # colors & borders
    pattern_make("C-", "Color", ["color"], cc="currentColor", **GLOBAL_KEYWORDS),
    pattern_make("Bgc-", "Background color", ["background-color"],
                 t="transparent", cc="currentColor", **GLOBAL_KEYWORDS),
    pattern_make("Bdc-", "Border color", ["border-color"],
                 t="transparent", cc="currentColor", **GLOBAL_KEYWORDS),
    keyword_make("Bds-", "Border style", ["border-style"],
                 n="none", h="hidden", d="dotted", da="dashed", s="solid", inh="inherit"),
    pattern_make("Bdw-", "Border width", ["border-width"],
                 t="thin", m="medium", th="thick", **GLOBAL_KEYWORDS),
    pattern_make("Bdrs-", "Border radius", ["border-radius"], **GLOBAL_KEYWORDS),
    pattern_make("Op-", "Opacity", ["opacity"], **GLOBAL_KEYWORDS),

    # typography
    pattern_make("Ff-", "Font family", ["font-family"], **GLOBAL_KEYWORDS),
    pattern_make("Fz-", "Font size", ["font-size"], **GLOBAL_KEYWORDS),
    keyword_make("Fs-", "Font style", ["font-style"],
                 n="normal", i="italic", o="oblique", inh="inherit"),
    keyword_make("Fw-", "Font weight", ["font-weight"],
                 n="normal", b="bold", br="bolder", lr="lighter", inh="inherit",
                 **{str(weight): str(weight) for weight in range(100, 1000, 100)}),
    pattern_make("Lh-", "Line height", ["line-height"], n="normal", **GLOBAL_KEYWORDS),
    pattern_make("Lts-", "Letter spacing", ["letter-spacing"], n="normal", **GLOBAL_KEYWORDS),
    keyword_make("Ta-", "Text align", ["text-align"],
                 start="__start__", end="__end__", c="center", j="justify", inh="inherit"),
    keyword_make("Td-", "Text decoration", ["text-decoration"],
                 n="none", u="underline", o="overline", lt="line-through", inh="inherit"),
    keyword_make("Tt-", "Text transform", ["text-transform"],
                 n="none", c="capitalize", u="uppercase", l="lowercase", inh="inherit"),
    keyword_make("Va-", "Vertical align", ["vertical-align"],
                 b="bottom", bl="baseline", m="middle", t="top", tb="text-bottom",
                 tt="text-top", inh="inherit"),
    keyword_make("Whs-", "White space", ["white-space"],
                 n="normal", p="pre", nw="nowrap", pw="pre-wrap", pl="pre-line", inh="inherit"),
    keyword_make("Tov-", "Text overflow", ["text-overflow"], c="clip", e="ellipsis", inh="inherit"),
]

HELPER_RULES: List[Rule] = [
    Rule(
        prefix="LineClamp",
        type=RuleType.HELPER,
        name="Line clamp",
        declaration={
            "-webkit-line-clamp": "$0",
            "max-height": "$1",
        },
        subRules={
            "[class*=LineClamp]": {
                "display": "-webkit-box",
                "-webkit-box-orient": "vertical",
                "overflow": "hidden",
            },
            "a[class*=LineClamp]": {
                "display": "inline-block",
                "zoom": 1,
            },
            # hides the ellipsis WebKit shows in the middle of clamped links
            "a[class*=LineClamp]:after": {
                "content": '"."',
                "font-size": 0,
                "visibility": "hidden",
                "display": "inline-block",
                "overflow": "hidden",
                "height": 0,
                "width": 0,
            },
        },
    ),
]

RULES: List[Rule] = PATTERN_RULES + HELPER_RULES
