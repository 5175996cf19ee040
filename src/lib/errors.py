"""Atomizer error types."""


class AtomizerError(Exception):
    """Base class for errors raised while building atomic CSS."""


class DuplicateRuleError(AtomizerError, ValueError):
    """Raised when two rules share the same class-name stem."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Rule {prefix} already exists")


class HelperDeclarationError(AtomizerError, ValueError):
    """Raised when a helper rule without a declaration is emitted."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            f"Declaration key is expected in a helper class. Helper class: {prefix}"
        )


class BreakPointError(AtomizerError, ValueError):
    """Raised when a configured breakpoint is not a media query."""


class StyleSheetCompileError(AtomizerError):
    """Raised when a style model cannot be compiled to CSS text."""
