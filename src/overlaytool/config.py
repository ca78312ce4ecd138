"""overlaytool configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files. Per-overlay options (size, aspect ratio, flags) come from
the command line; these settings cover logging and rendering constants.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when a configuration value is present but unusable.

    Example:
        >>> Settings(BOX_THICKNESS=0, _env_file=None).require_valid()
        Traceback (most recent call last):
        ...
        ConfigError: BOX_THICKNESS must be >= 1, got 0.
    """

    def __init__(self, key_name: str, problem: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Name of the offending setting.
            problem: What is wrong with its value.
        """
        self.key_name = key_name
        self.problem = problem
        super().__init__(f"{key_name} {problem}.")


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Labels
    FONT_PATH: str = "DejaVuSans.ttf"
    FONT_SIZE: int = 12
    STRICT_FONT_CHECK: bool = False
    LABEL_MARGIN: float = 0.01  # Offset relative to the labelled box width

    # Guides
    BOX_THICKNESS: int = 2
    DOT_INTERVAL: int = 5  # Dash length of symmetry grid center lines
    CROSS_FRACTION: float = 0.05  # Center cross size vs frame long side

    def require_valid(self) -> "Settings":
        """Check rendering constants, raising ConfigError on the first bad one.

        Returns:
            This settings instance, for chaining.

        Raises:
            ConfigError: If a rendering constant is out of range.
        """
        if self.BOX_THICKNESS < 1:
            raise ConfigError("BOX_THICKNESS", f"must be >= 1, got {self.BOX_THICKNESS}")
        if self.DOT_INTERVAL < 1:
            raise ConfigError("DOT_INTERVAL", f"must be >= 1, got {self.DOT_INTERVAL}")
        if self.FONT_SIZE < 1:
            raise ConfigError("FONT_SIZE", f"must be >= 1, got {self.FONT_SIZE}")
        if not 0 < self.CROSS_FRACTION <= 1:
            raise ConfigError(
                "CROSS_FRACTION", f"must be in (0, 1], got {self.CROSS_FRACTION}"
            )
        if self.LOG_FORMAT not in ("console", "json"):
            raise ConfigError(
                "LOG_FORMAT", f"must be 'console' or 'json', got {self.LOG_FORMAT!r}"
            )
        return self


# Singleton instance for import convenience
settings = Settings()
