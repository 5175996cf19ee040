"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ATOMIZER_ prefix (e.g., ATOMIZER_VERBOSE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use ATOMIZER_ prefix.

    Examples:
        ATOMIZER_VERBOSE=true
        ATOMIZER_INDENT="    "
        ATOMIZER_COMMA_PLACEHOLDER=__C__
    """

    model_config = SettingsConfigDict(
        env_prefix="ATOMIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Selector configuration
    comma_placeholder: str = Field(
        default="__COMMA__",
        description="Token standing in for commas in selectors while the style sheet is compiled",
    )

    # Direction placeholders
    start_placeholder: str = Field(
        default="__start__",
        description="Placeholder replaced by 'left' (or 'right' in rtl mode)",
    )

    end_placeholder: str = Field(
        default="__end__",
        description="Placeholder replaced by 'right' (or 'left' in rtl mode)",
    )

    # Output configuration
    indent: str = Field(
        default="  ",
        description="Indentation used for declarations in non-minified CSS",
    )

    verbose: bool = Field(
        default=False,
        description="Warn about ambiguous class names by default",
    )

    def directions_get(self, rtl: bool = False) -> tuple[str, str]:
        """
        Return the concrete (start, end) directions for a writing mode.

        Args:
            rtl: Right-to-left mode

        Returns:
            ("left", "right") or ("right", "left")

        Example:
            >>> settings = AppSettings()
            >>> settings.directions_get(rtl=True)
            ('right', 'left')
        """
        if rtl:
            return "right", "left"
        return "left", "right"


# Singleton instance - import this in your code
appsettings = AppSettings()
