"""Drawing command types for glyph outlines.

A glyph outline is an ordered sequence of drawing commands. This module
defines the five drawing variants and a dictionary codec matching the
``{"type": "M", "x": ..., "y": ...}`` command objects produced by
JavaScript font libraries:

- MoveTo: start a new subpath
- LineTo: straight segment
- CubicCurveTo: cubic Bezier segment with two control points
- QuadraticCurveTo: quadratic Bezier segment with one control point
- ClosePath: close the current subpath

RawCommand carries entries whose tag is none of the above.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from glyphpath.exceptions import CommandFormatError


def _read_coordinates(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Pull the coordinate fields of ``cls`` out of ``data``.

    Raises:
        CommandFormatError: If a field is missing or not a number
    """
    values: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            raise CommandFormatError(f"'{cls.TAG}' command is missing field '{f.name}'")
        value = data[f.name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CommandFormatError(
                f"'{cls.TAG}' command field '{f.name}' must be a number, got {value!r}"
            )
        values[f.name] = value
    return values


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y).

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    TAG: ClassVar[str] = "M"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a command dictionary."""
        return {"type": self.TAG, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MoveTo":
        """Deserialize from a command dictionary."""
        return cls(**_read_coordinates(cls, data))


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to (x, y)."""

    TAG: ClassVar[str] = "L"

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a command dictionary."""
        return {"type": self.TAG, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineTo":
        """Deserialize from a command dictionary."""
        return cls(**_read_coordinates(cls, data))


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier segment ending at (x, y).

    Attributes:
        x1: First control point X
        y1: First control point Y
        x2: Second control point X
        y2: Second control point Y
        x: End point X
        y: End point Y
    """

    TAG: ClassVar[str] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a command dictionary."""
        return {
            "type": self.TAG,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "x": self.x,
            "y": self.y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicCurveTo":
        """Deserialize from a command dictionary."""
        return cls(**_read_coordinates(cls, data))


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """Quadratic Bezier segment with control point (x1, y1) ending at (x, y)."""

    TAG: ClassVar[str] = "Q"

    x1: float
    y1: float
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a command dictionary."""
        return {"type": self.TAG, "x1": self.x1, "y1": self.y1, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuadraticCurveTo":
        """Deserialize from a command dictionary."""
        return cls(**_read_coordinates(cls, data))


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its start point."""

    TAG: ClassVar[str] = "Z"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a command dictionary."""
        return {"type": self.TAG}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClosePath":  # noqa: ARG003
        """Deserialize from a command dictionary."""
        return cls()


@dataclass(frozen=True)
class RawCommand:
    """A command entry whose tag is not a known drawing variant.

    Attributes:
        type: The tag as it appeared in the input
        data: Remaining fields of the entry
    """

    type: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the original dictionary shape."""
        return {"type": self.type, **self.data}


DrawCommand = MoveTo | LineTo | CubicCurveTo | QuadraticCurveTo | ClosePath

COMMAND_TYPES: dict[str, type] = {
    cls.TAG: cls for cls in (MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath)
}


def command_from_dict(data: Any) -> DrawCommand | RawCommand:
    """Deserialize one command dictionary.

    Unknown tags are kept as RawCommand so the serializer decides how to
    treat them.

    Args:
        data: Dictionary with a ``type`` field and the variant's coordinates

    Returns:
        The matching command, or RawCommand for an unknown tag

    Raises:
        CommandFormatError: If the entry is not a dictionary, has no type,
            or a known variant is missing coordinates
    """
    if not isinstance(data, dict):
        raise CommandFormatError(f"expected an object, got {type(data).__name__}")
    if "type" not in data:
        raise CommandFormatError("missing 'type' field")

    tag = data["type"]
    command_cls = COMMAND_TYPES.get(tag) if isinstance(tag, str) else None
    if command_cls is None:
        rest = {key: value for key, value in data.items() if key != "type"}
        return RawCommand(type=str(tag), data=rest)

    return command_cls.from_dict(data)


def commands_from_dicts(items: Iterable[Any]) -> list[DrawCommand | RawCommand]:
    """Deserialize a sequence of command dictionaries, preserving order."""
    return [command_from_dict(item) for item in items]
