"""
Caller configuration models

AtomizerConfig carries the class names to generate and the values used to
resolve them. CssOptions carries the options that shape the CSS output.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

from ..lib.errors import BreakPointError


@dataclass
class AtomizerConfig:
    """
    Configuration for one CSS generation

    Attributes:
        classNames: Atomic class names to resolve (duplicates are ignored)
        custom: Values for named suffixes, keyed by "stem+named" or "named"
                (e.g. {"Fz-heading": "80px"} or {"heading": "80px"})
        breakPoints: Breakpoint key -> media query
                     (e.g. {"sm": "@media(min-width:500px)"})

    Example:
        AtomizerConfig(
            classNames=["D-n--sm", "Fz-heading"],
            custom={"heading": "80px"},
            breakPoints={"sm": "@media(min-width:500px)"},
        )
    """
    classNames: List[str] = field(default_factory=list)
    custom: Optional[Dict[str, str]] = None
    breakPoints: Optional[Dict[str, str]] = None

    @classmethod
    def config_fromDict(cls, data: Optional[Mapping]) -> "AtomizerConfig":
        """Build a config from a plain mapping, ignoring unknown keys"""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        classNames = data.get("classNames") or []
        if not isinstance(classNames, (list, tuple)):
            raise TypeError("`config.classNames` must be a list")
        return cls(
            classNames=list(classNames),
            custom=data.get("custom"),
            breakPoints=data.get("breakPoints"),
        )

    def config_validate(self) -> None:
        """
        Validate class names and breakpoints before generation

        Raises:
            TypeError: If classNames is not a list or breakPoints is present
                       but not a mapping
            BreakPointError: If a media query does not start with @media
        """
        if not isinstance(self.classNames, (list, tuple)):
            raise TypeError("`config.classNames` must be a list")
        if self.breakPoints is None:
            return
        if not isinstance(self.breakPoints, Mapping):
            raise TypeError("`config.breakPoints` must be a mapping")
        for key, query in self.breakPoints.items():
            if not isinstance(query, str) or not query.startswith("@media"):
                raise BreakPointError(f"Breakpoint `{key}` must start with `@media`.")


@dataclass
class CssOptions:
    """
    Options that shape the CSS output

    Attributes:
        namespace: Selector every pattern rule is nested under (e.g. "#atomic")
        helpersNS: Selector every helper rule is nested under
        rtl: Swap __start__/__end__ to right/left
        banner: Text prepended to the generated CSS
        minify: Emit compact CSS
    """
    namespace: Optional[str] = None
    helpersNS: Optional[str] = None
    rtl: bool = False
    banner: str = ""
    minify: bool = False

    @classmethod
    def options_fromDict(cls, data: Union["CssOptions", Mapping, None]) -> "CssOptions":
        """Build options from a plain mapping, ignoring unknown keys"""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {k: v for k, v in data.items() if k in known}
        return cls(**values)
