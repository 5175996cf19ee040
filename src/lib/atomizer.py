"""
Atomizer

Entry point of the engine: finds atomic class names in text and generates
the CSS that backs them.

Example:
    >>> atomizer = Atomizer()
    >>> classNames = atomizer.classNames_find('<div class="D-n D-b:h Op-1/2">')
    >>> print(atomizer.css_get({"classNames": classNames}))
    .D-n {
      display: none;
    }
    ...
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config import appsettings
from ..models.config import AtomizerConfig, CssOptions
from ..models.rules import Rule
from .builder import StyleModel, styleModel_build
from .compiler import CssCompiler, StyleSheetCompiler
from .errors import StyleSheetCompileError
from .grammar import Grammar
from .log import LOG, WARN
from .registry import RuleRegistry
from .resolver import records_resolve
from .rules import RULES
from .selectors import commas_unmask, constants_replace

ConfigLike = Union[AtomizerConfig, Mapping, None]
OptionsLike = Union[CssOptions, Mapping, None]


class Atomizer:
    """
    Generates atomic CSS from class names

    Responsibilities:
    - Own the rule registry and its compiled grammar
    - Extract class names from text
    - Resolve class names and build the style model
    - Compile the model and finalize the CSS text
    """

    def __init__(
        self,
        rules: Optional[Iterable[Union[Rule, Mapping[str, Any]]]] = None,
        verbose: Optional[bool] = None,
    ) -> None:
        """
        Initialize atomizer

        Args:
            rules: Rules to register (default: the built-in rule set)
            verbose: Warn about ambiguous class names
                     (default: appsettings.verbose)

        Raises:
            DuplicateRuleError: If two rules share a prefix
        """
        self.verbose = appsettings.verbose if verbose is None else verbose
        self.registry = RuleRegistry(RULES if rules is None else rules)
        self.warnings: List[str] = []

    @property
    def rules(self) -> List[Rule]:
        """Registered rules, in registration order"""
        return self.registry.rules

    def rules_add(self, rules: Iterable[Union[Rule, Mapping[str, Any]]]) -> None:
        """
        Register more rules; the grammar is recompiled on next use

        Raises:
            DuplicateRuleError: If a prefix is already registered
        """
        self.registry.rules_add(rules)

    def syntax_get(self) -> Grammar:
        """Return the compiled grammar of the current rules"""
        return self.registry.grammar_get()

    def classNames_find(self, text: str) -> List[str]:
        """
        Find atomic class names in arbitrary text

        Args:
            text: Markup, template or script source

        Returns:
            Class names in first-seen order, without duplicates
        """
        return self.syntax_get().classNames_find(text)

    def config_get(self, classNames: Optional[Iterable[str]] = None, config: ConfigLike = None) -> AtomizerConfig:
        """
        Merge class names into a config

        Args:
            classNames: Class names found in sources
            config: Existing config (its classNames are kept)

        Returns:
            New AtomizerConfig whose classNames are the union of both lists,
            found class names first

        Example:
            >>> Atomizer().config_get(["Op-1", "D-n"], {"classNames": ["D-n", "D-b"]}).classNames
            ['Op-1', 'D-n', 'D-b']
        """
        base = AtomizerConfig.config_fromDict(config)
        merged: Dict[str, None] = dict.fromkeys(classNames or [])
        merged.update(dict.fromkeys(base.classNames))
        return AtomizerConfig(
            classNames=list(merged),
            custom=base.custom,
            breakPoints=base.breakPoints,
        )

    def styleModel_build(self, config: ConfigLike, options: OptionsLike = None) -> StyleModel:
        """
        Resolve the config's class names into a style model

        Commas in generated selectors are masked (see commas_mask()).
        Unresolved class names are listed in self.warnings.

        Raises:
            TypeError: If config.breakPoints is not a mapping
            BreakPointError: If a breakpoint is not a media query
            HelperDeclarationError: If a used helper has no declaration
        """
        config = AtomizerConfig.config_fromDict(config)
        options = CssOptions.options_fromDict(options)
        config.config_validate()

        grammar = self.syntax_get()
        records, self.warnings = records_resolve(config.classNames, grammar, config)

        if self.verbose:
            for className in self.warnings:
                WARN(self.warning_make(className))

        return styleModel_build(records, grammar.rules, config.breakPoints, options)

    def css_get(
        self,
        config: ConfigLike,
        options: OptionsLike = None,
        compiler: Optional[StyleSheetCompiler] = None,
    ) -> str:
        """
        Generate the CSS for a config

        Args:
            config: Class names, custom values and breakpoints
            options: namespace, helpersNS, rtl, banner, minify
            compiler: Style-sheet compiler (default: CssCompiler)

        Returns:
            CSS text

        Raises:
            TypeError: If config.breakPoints is not a mapping
            BreakPointError: If a breakpoint is not a media query
            StyleSheetCompileError: If the style model cannot be compiled
        """
        options = CssOptions.options_fromDict(options)
        model = self.styleModel_build(config, options)

        if compiler is None:
            compiler = CssCompiler(minify=options.minify)

        try:
            content = compiler.compile(model, options.banner)
        except StyleSheetCompileError as e:
            raise StyleSheetCompileError(f"Failed to compile atomic css: {e}") from e

        content = commas_unmask(content)
        content = constants_replace(content, options.rtl)
        LOG(f"Generated {len(content)} characters of CSS", level=2)
        return content

    @staticmethod
    def warning_make(className: str) -> str:
        """Human readable warning for an ambiguous class name"""
        return "\n".join([
            f"Warning: Class `{className}` is ambiguous, and must be manually added to your config file:",
            '"custom": {',
            f'    "{className}": <YOUR-CUSTOM-VALUE>',
            '}',
        ])
