"""Configuration settings for glyphpath."""

from enum import Enum
from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class UnknownCommandPolicy(str, Enum):
    """How the serializer treats a command that is not a known drawing variant."""

    EMPTY = "empty"
    ERROR = "error"


class SerializerConfig(BaseModel):
    """Configuration for path serialization."""

    unknown_commands: UnknownCommandPolicy = Field(
        default=UnknownCommandPolicy.EMPTY,
        description="Emit an empty segment for unknown commands, or raise",
    )


class FontConfig(BaseModel):
    """Configuration for reading outlines from font files."""

    decompose_components: bool = Field(
        default=True,
        description="Draw composite glyphs through their component outlines",
    )
    skip_missing_components: bool = Field(
        default=True,
        description="Ignore component references to glyphs absent from the font",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    serializer: SerializerConfig = Field(default_factory=SerializerConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
