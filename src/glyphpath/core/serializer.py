"""Serialization of drawing commands to SVG path data.

The serializer is a pure reduction over a command sequence: each command
renders to exactly one segment and the segments are joined by single
spaces, in input order. Coordinates are written with ``str()`` and are
never rounded, reordered or transformed.
"""

import logging
from collections.abc import Sequence
from typing import Any

from typing_extensions import assert_never

from glyphpath.config import SerializerConfig, UnknownCommandPolicy
from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    DrawCommand,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    RawCommand,
)
from glyphpath.exceptions import UnrecognizedCommandError

logger = logging.getLogger(__name__)

SEPARATOR = " "


def _segment(command: DrawCommand) -> str:
    match command:
        case MoveTo(x=x, y=y):
            return f"M {x} {y}"
        case LineTo(x=x, y=y):
            return f"L {x} {y}"
        case CubicCurveTo(x1=x1, y1=y1, x2=x2, y2=y2, x=x, y=y):
            return f"C {x1} {y1} {x2} {y2} {x} {y}"
        case QuadraticCurveTo(x1=x1, y1=y1, x=x, y=y):
            return f"Q {x1} {y1} {x} {y}"
        case ClosePath():
            return "Z"
        case _:
            assert_never(command)


def format_command(command: Any) -> str | None:
    """Render a single drawing command as a path segment.

    Args:
        command: One of the five drawing variants

    Returns:
        The segment text, or None if the command is not a known variant
    """
    if not isinstance(command, DrawCommand):
        return None
    return _segment(command)


class PathSerializer:
    """Converts a sequence of drawing commands into one path string.

    Holds only its configuration, so one instance can be shared between
    callers and threads.

    Example:
        serializer = PathSerializer(SerializerConfig(unknown_commands="error"))
        d = serializer.serialize(commands)
    """

    def __init__(self, config: SerializerConfig | None = None) -> None:
        """Initialize the serializer.

        Args:
            config: Serializer configuration (defaults if None)
        """
        self.config = config or SerializerConfig()

    def serialize(self, commands: Sequence[DrawCommand | RawCommand]) -> str:
        """Serialize commands to a space-separated path string.

        Args:
            commands: Drawing commands in draw order (not modified)

        Returns:
            Path data string; empty for an empty sequence

        Raises:
            UnrecognizedCommandError: If a command is not a known variant and
                the policy is ``UnknownCommandPolicy.ERROR``
        """
        segments: list[str] = []

        for index, command in enumerate(commands):
            segment = format_command(command)
            if segment is None:
                segment = self._unknown_segment(index, command)
            segments.append(segment)

        return SEPARATOR.join(segments)

    def _unknown_segment(self, index: int, command: Any) -> str:
        if self.config.unknown_commands == UnknownCommandPolicy.ERROR:
            raise UnrecognizedCommandError(index, command)

        logger.debug(
            "Unrecognized draw command rendered as empty segment: index=%d type=%s",
            index,
            type(command).__name__,
        )
        return ""


def serialize(
    commands: Sequence[DrawCommand | RawCommand],
    config: SerializerConfig | None = None,
) -> str:
    """Serialize drawing commands to SVG path data.

    Convenience wrapper around PathSerializer.

    Args:
        commands: Drawing commands in draw order
        config: Serializer configuration (defaults if None)

    Returns:
        Path data string
    """
    return PathSerializer(config).serialize(commands)
