"""Domain models for glyphpath.

This module contains the drawing command types that make up a glyph
outline. All command types are:

- Immutable (frozen dataclasses)
- Serializable to and from plain dictionaries (JSON input)
- Independent of fontTools implementation details

Key types:
- MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath: drawing variants
- DrawCommand: union of the five drawing variants
- RawCommand: an entry with an unknown tag
"""

from glyphpath.domain.commands import (
    COMMAND_TYPES,
    ClosePath,
    CubicCurveTo,
    DrawCommand,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    RawCommand,
    command_from_dict,
    commands_from_dicts,
)

__all__: list[str] = [
    # Drawing variants
    "MoveTo",
    "LineTo",
    "CubicCurveTo",
    "QuadraticCurveTo",
    "ClosePath",
    "DrawCommand",
    "RawCommand",
    "COMMAND_TYPES",
    # Codec
    "command_from_dict",
    "commands_from_dicts",
]
