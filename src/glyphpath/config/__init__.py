"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SerializerConfig: Path serialization settings
- FontConfig: Font outline extraction settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    LOG_LEVELS,
    FontConfig,
    GlyphPathSettings,
    LoggingConfig,
    SerializerConfig,
    UnknownCommandPolicy,
    get_default_settings,
)

__all__ = [
    "LOG_LEVELS",
    "FontConfig",
    "GlyphPathSettings",
    "LoggingConfig",
    "SerializerConfig",
    "UnknownCommandPolicy",
    "get_default_settings",
]
