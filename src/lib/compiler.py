"""
Style-sheet compiler

Serializes a style model (selector -> declarations, possibly nested) into
CSS text.

The Atomizer only depends on the StyleSheetCompiler protocol; CssCompiler
is the implementation used when no other compiler is injected. It flattens
the model into cssutils rules and lets the cssutils serializer write them.
"""

import logging
import re
import threading
import xml.dom
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Protocol, Tuple

import cssutils
from cssutils.serialize import Preferences

from ..config import appsettings
from .errors import StyleSheetCompileError
from .log import LOG
from .resolver import number_format

# cssutils reports unknown properties (-webkit-*, __start__) on its own logger
cssutils.log.setLevel(logging.CRITICAL)

Block = Tuple[List[str], Dict[str, str]]

# "&" stands for the enclosing selector; "\&" comes from an escaped class name
AMPERSAND = re.compile(r'(?<!\\)&')
PRIORITY = re.compile(r'\s*!\s*important\s*$', re.IGNORECASE)
MEDIA = "@media"

# cssutils serializes through one module-level serializer
_serializer_lock = threading.Lock()


class StyleSheetCompiler(Protocol):
    """Anything able to turn a style model into CSS text"""

    def compile(self, model: Mapping, banner: str = "") -> str:
        ...


class CssCompiler:
    """
    Compiles a style model to CSS text

    Responsibilities:
    - Flatten nested selectors (namespaces) into descendant selectors
    - Expand comma-separated selector lists
    - Collect @media blocks into one media rule per query, after the plain rules
    - Serialize with cssutils (pretty or minified)

    Example:
        >>> CssCompiler().compile({".Op-1": {"opacity": 1}})
        '.Op-1 {\\n  opacity: 1;\\n}\\n'
    """

    def __init__(self, minify: bool = False, indent: Optional[str] = None) -> None:
        """
        Initialize compiler

        Args:
            minify: Emit compact CSS without whitespace
            indent: Declaration indentation for pretty output
                    (default: appsettings.indent)
        """
        self.minify = minify
        self.indent = appsettings.indent if indent is None else indent
        self.blocks: List[Block] = []
        self.media: Dict[str, List[Block]] = {}

    def compile(self, model: Mapping, banner: str = "") -> str:
        """
        Compile a style model

        Args:
            model: Selector -> declarations mapping
            banner: Text prepended to the output

        Returns:
            CSS text

        Raises:
            StyleSheetCompileError: If the model is malformed or cssutils
                                    rejects a selector, property or value
        """
        if not isinstance(model, Mapping):
            raise StyleSheetCompileError(
                f"style model must be a mapping, got {type(model).__name__}"
            )

        self.blocks = []
        self.media = {}
        self.node_compile([], model, None)

        try:
            sheet = self.sheet_make()
            text = self.sheet_serialize(sheet)
        except (xml.dom.DOMException, OverflowError) as e:
            raise StyleSheetCompileError(str(e)) from e

        LOG(f"Compiled {len(self.blocks)} rules, {len(self.media)} media blocks", level=2)
        if text and not self.minify:
            text += "\n"
        return banner + text

    def node_compile(self, selectors: List[str], node: Mapping, media: Optional[str]) -> None:
        """
        Collect the blocks of one level of the model

        Declarations of a level are recorded before the rules nested in it.

        Args:
            selectors: Selectors of the enclosing level ([] at the top)
            node: Mapping at this level
            media: Enclosing media query, if any
        """
        declarations: Dict[str, str] = {}
        nested: List[Tuple[str, Mapping]] = []

        for key, value in node.items():
            if isinstance(value, Mapping):
                nested.append((str(key), value))
            else:
                declarations[str(key)] = self.value_format(key, value)

        if declarations:
            if not selectors:
                raise StyleSheetCompileError(
                    f"declaration `{next(iter(declarations))}` is outside of any selector"
                )
            block: Block = (selectors, declarations)
            if media:
                self.media.setdefault(media, []).append(block)
            else:
                self.blocks.append(block)

        for key, value in nested:
            if key.startswith("@"):
                self.node_compile(selectors, value, key)
            else:
                self.node_compile(self.selectors_join(selectors, key), value, media)

    @staticmethod
    def selectors_join(parents: List[str], key: str) -> List[str]:
        r"""
        Combine enclosing selectors with a nested selector list

        An unescaped "&" in the nested selector stands for the enclosing
        selector, otherwise the nested selector becomes a descendant.

        Example:
            >>> CssCompiler.selectors_join(["#ns"], ".a, .b")
            ['#ns .a', '#ns .b']
            >>> CssCompiler.selectors_join(["#ns"], ".a\\&b")
            ['#ns .a\\&b']
        """
        children = [part.strip() for part in key.split(",") if part.strip()]
        if not parents:
            return children
        joined = []
        for parent in parents:
            for child in children:
                if AMPERSAND.search(child):
                    joined.append(AMPERSAND.sub(lambda _: parent, child))
                else:
                    joined.append(f"{parent} {child}")
        return joined

    @staticmethod
    def value_format(prop: Any, value: Any) -> str:
        """Render a declaration value; only strings and numbers are valid"""
        if isinstance(value, bool) or value is None:
            raise StyleSheetCompileError(f"invalid value for `{prop}`: {value!r}")
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return number_format(value)
        raise StyleSheetCompileError(f"invalid value for `{prop}`: {value!r}")

    @staticmethod
    def rule_make(block: Block) -> cssutils.css.CSSStyleRule:
        """Build the cssutils rule of one block; "!important" becomes the priority"""
        selectors, declarations = block
        style = cssutils.css.CSSStyleDeclaration()
        for prop, value in declarations.items():
            priority = ""
            if PRIORITY.search(value):
                value = PRIORITY.sub("", value)
                priority = "important"
            style.setProperty(prop, value, priority)
        return cssutils.css.CSSStyleRule(selectorText=", ".join(selectors), style=style)

    @staticmethod
    def mediaText_get(query: str) -> str:
        """
        Media list of an "@media ..." key

        Raises:
            StyleSheetCompileError: For any other at-rule
        """
        if not query.startswith(MEDIA):
            raise StyleSheetCompileError(f"unsupported at-rule `{query}`")
        return query[len(MEDIA):].strip() or "all"

    def sheet_make(self) -> cssutils.css.CSSStyleSheet:
        """Plain rules first, then one media rule per query in first-seen order"""
        sheet = cssutils.css.CSSStyleSheet()
        for block in self.blocks:
            sheet.add(self.rule_make(block))
        for query, blocks in self.media.items():
            mediaRule = cssutils.css.CSSMediaRule(mediaText=self.mediaText_get(query))
            for block in blocks:
                mediaRule.add(self.rule_make(block))
            sheet.add(mediaRule)
        return sheet

    def prefs_make(self) -> Preferences:
        """Serializer preferences for the requested output style"""
        prefs = Preferences()
        if self.minify:
            prefs.useMinified()
        else:
            prefs.indent = self.indent
            prefs.indentClosingBrace = False
            prefs.omitLastSemicolon = False
            prefs.minimizeColorHash = False
            prefs.keepComments = False
        prefs.selectorCombinatorSpacer = ""
        return prefs

    def sheet_serialize(self, sheet: cssutils.css.CSSStyleSheet) -> str:
        """Serialize a sheet with this compiler's preferences"""
        with _serializer_lock:
            previous = cssutils.ser
            cssutils.setSerializer(cssutils.CSSSerializer(prefs=self.prefs_make()))
            try:
                return sheet.cssText.decode("utf-8")
            finally:
                cssutils.setSerializer(previous)
