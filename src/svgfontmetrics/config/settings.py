"""Configuration settings for svgfontmetrics."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class RepeatMode(str, Enum):
    """How repeated argument tuples after one command letter are replayed."""

    FIRST = "first"
    EXPAND = "expand"


class ParsingConfig(BaseModel):
    """Configuration for path interpretation."""

    repeat_mode: RepeatMode = Field(
        default=RepeatMode.FIRST,
        description="Replay only the first argument tuple of a command, or every tuple",
    )


class CharacterSetConfig(BaseModel):
    """Configuration for filtering glyphs by character."""

    allowed_characters: str | None = Field(
        default=None,
        description="Characters to keep when reading a font (None = keep all)",
    )

    def as_set(self) -> frozenset[str] | None:
        """Get the allowed characters as a set.

        Returns:
            Set of allowed characters, or None when every character is allowed
        """
        if self.allowed_characters is None:
            return None
        return frozenset(self.allowed_characters)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SvgFontMetricsSettings(BaseModel):
    """Main application settings."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    charset: CharacterSetConfig = Field(default_factory=CharacterSetConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SvgFontMetricsSettings:
    """Get default application settings."""
    return SvgFontMetricsSettings()
