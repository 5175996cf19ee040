"""
Selector helpers

Escaping of class names used as CSS selectors, expansion of pseudo-class
abbreviations, comma masking around the style-sheet compiler, and the
substitution of direction placeholders.
"""

import re
from typing import Any, Dict, Optional

from ..config import appsettings


# Full pseudo-class -> abbreviation. Either form is accepted in class names.
PSEUDOS: Dict[str, str] = {
    ':active':          ':a',
    ':checked':         ':c',
    ':default':         ':d',
    ':disabled':        ':di',
    ':empty':           ':e',
    ':enabled':         ':en',
    ':first':           ':fi',
    ':first-child':     ':fc',
    ':first-of-type':   ':fot',
    ':fullscreen':      ':fs',
    ':focus':           ':f',
    ':hover':           ':h',
    ':indeterminate':   ':ind',
    ':in-range':        ':ir',
    ':invalid':         ':inv',
    ':last-child':      ':lc',
    ':last-of-type':    ':lot',
    ':left':            ':l',
    ':link':            ':li',
    ':only-child':      ':oc',
    ':only-of-type':    ':oot',
    ':optional':        ':o',
    ':out-of-range':    ':oor',
    ':read-only':       ':ro',
    ':read-write':      ':rw',
    ':required':        ':req',
    ':right':           ':r',
    ':root':            ':rt',
    ':scope':           ':s',
    ':target':          ':t',
    ':valid':           ':va',
    ':visited':         ':vi',
}
PSEUDOS_INVERTED: Dict[str, str] = {abbr: full for full, abbr in PSEUDOS.items()}

# '-' counts as a word boundary, so it is captured and put back unescaped
_UNSAFE = re.compile(r'\b(-?)([^-_a-zA-Z0-9\s]+)', re.ASCII)


def pseudo_get(pseudo: Optional[str]) -> str:
    """
    Return the full pseudo-class for an abbreviated or full form

    Args:
        pseudo: ":h", ":hover" or None

    Returns:
        ":hover" for both ":h" and ":hover", "" for None or unknown names

    Example:
        >>> pseudo_get(":fc")
        ':first-child'
    """
    if not pseudo:
        return ""
    if pseudo in PSEUDOS:
        return pseudo
    return PSEUDOS_INVERTED.get(pseudo, "")


def selector_escape(value: Any) -> Any:
    r"""
    Escape CSS-unsafe characters with a backslash

    Every character other than word characters, hyphen, underscore and
    whitespace is escaped. A hyphen directly in front of an escaped run is
    kept as is.

    Args:
        value: Selector fragment to escape

    Returns:
        Escaped string; non-string values are returned unchanged

    Raises:
        TypeError: If value is None or an empty string

    Example:
        >>> selector_escape("W-100%")
        'W-100\\%'
        >>> selector_escape("C-#fff")
        'C-\\#fff'
    """
    if value is None or value == "":
        raise TypeError("str must be present")
    if not isinstance(value, str):
        return value

    def characters_escape(match: re.Match[str]) -> str:
        dash, characters = match.group(1), match.group(2)
        return dash + "".join(f"\\{character}" for character in characters)

    return _UNSAFE.sub(characters_escape, value)


def commas_mask(selector: str) -> str:
    """Replace commas so the style-sheet compiler does not split the selector"""
    return selector.replace(",", appsettings.comma_placeholder)


def commas_unmask(text: str) -> str:
    """Restore commas masked by commas_mask()"""
    return text.replace(appsettings.comma_placeholder, ",")


def constants_replace(text: Any, rtl: bool = False) -> Any:
    """
    Replace direction placeholders with concrete directions

    Args:
        text: Compiled CSS text
        rtl: Right-to-left mode

    Returns:
        Text with __start__/__end__ replaced by left/right (right/left in
        rtl mode); non-string or empty input is returned unchanged

    Example:
        >>> constants_replace("float: __start__", rtl=True)
        'float: right'
    """
    if not text or not isinstance(text, str):
        return text
    start, end = appsettings.directions_get(rtl)
    return (
        text.replace(appsettings.start_placeholder, start)
            .replace(appsettings.end_placeholder, end)
    )
