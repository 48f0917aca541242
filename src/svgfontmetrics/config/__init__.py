"""Configuration management for svgfontmetrics.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ParsingConfig: Path interpretation settings
- CharacterSetConfig: Glyph filtering settings
- LoggingConfig: Logging settings
- SvgFontMetricsSettings: Main application settings
"""

from svgfontmetrics.config.settings import (
    CharacterSetConfig,
    LoggingConfig,
    ParsingConfig,
    RepeatMode,
    SvgFontMetricsSettings,
    get_default_settings,
)

__all__ = [
    "CharacterSetConfig",
    "LoggingConfig",
    "ParsingConfig",
    "RepeatMode",
    "SvgFontMetricsSettings",
    "get_default_settings",
]
