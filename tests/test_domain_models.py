"""Tests for domain models to verify they work correctly."""

import pytest

from glyphpath.domain import (
    COMMAND_TYPES,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    RawCommand,
    command_from_dict,
    commands_from_dicts,
)
from glyphpath.exceptions import CommandFormatError


class TestCommandTypes:
    """Tests for the drawing command variants."""

    def test_tags(self) -> None:
        """Each variant carries its path letter."""
        assert MoveTo.TAG == "M"
        assert LineTo.TAG == "L"
        assert CubicCurveTo.TAG == "C"
        assert QuadraticCurveTo.TAG == "Q"
        assert ClosePath.TAG == "Z"
        assert set(COMMAND_TYPES) == {"M", "L", "C", "Q", "Z"}

    def test_move_to_fields(self) -> None:
        """Test basic command creation."""
        cmd = MoveTo(3, 4)
        assert cmd.x == 3
        assert cmd.y == 4

    def test_cubic_field_order(self) -> None:
        """Positional arguments follow control points then end point."""
        cmd = CubicCurveTo(1, 2, 3, 4, 5, 6)
        assert (cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y) == (1, 2, 3, 4, 5, 6)

    def test_command_immutable(self) -> None:
        """Test that commands are immutable."""
        cmd = LineTo(1, 2)
        with pytest.raises(AttributeError):
            cmd.x = 5  # type: ignore

    def test_commands_hashable_and_equal(self) -> None:
        """Equal coordinates make equal commands."""
        assert MoveTo(1, 2) == MoveTo(1, 2)
        assert MoveTo(1, 2) != LineTo(1, 2)
        assert len({ClosePath(), ClosePath()}) == 1

    def test_coordinates_not_coerced(self) -> None:
        """Integers stay integers and floats stay floats."""
        assert isinstance(MoveTo(1, 2.5).x, int)
        assert isinstance(MoveTo(1, 2.5).y, float)


class TestCommandDicts:
    """Tests for the dictionary codec."""

    def test_to_dict(self) -> None:
        """Test command serialization to dictionaries."""
        assert MoveTo(1, 2).to_dict() == {"type": "M", "x": 1, "y": 2}
        assert QuadraticCurveTo(1, 2, 3, 4).to_dict() == {
            "type": "Q",
            "x1": 1,
            "y1": 2,
            "x": 3,
            "y": 4,
        }
        assert ClosePath().to_dict() == {"type": "Z"}

    def test_from_dict_each_variant(self) -> None:
        """Every variant deserializes back from its dictionary."""
        commands = [
            MoveTo(0, 0),
            LineTo(10, 0),
            CubicCurveTo(1, 1, 2, 2, 3, 3),
            QuadraticCurveTo(1.5, 1, 2, 2),
            ClosePath(),
        ]
        for cmd in commands:
            assert command_from_dict(cmd.to_dict()) == cmd

    def test_from_dict_ignores_extra_fields(self) -> None:
        """Extra keys on a known variant are dropped."""
        assert command_from_dict({"type": "L", "x": 1, "y": 2, "x1": 9}) == LineTo(1, 2)

    def test_unknown_type_becomes_raw_command(self) -> None:
        """Unknown tags are preserved instead of rejected."""
        cmd = command_from_dict({"type": "A", "rx": 5, "ry": 5})
        assert cmd == RawCommand(type="A", data={"rx": 5, "ry": 5})
        assert cmd.to_dict() == {"type": "A", "rx": 5, "ry": 5}

    def test_missing_type(self) -> None:
        """Test entry without a type raises CommandFormatError."""
        with pytest.raises(CommandFormatError, match="missing 'type'"):
            command_from_dict({"x": 1, "y": 2})

    def test_missing_coordinate(self) -> None:
        """Test known variant without its coordinates raises."""
        with pytest.raises(CommandFormatError, match="missing field 'x2'"):
            command_from_dict({"type": "C", "x1": 0, "y1": 0, "y2": 0, "x": 0, "y": 0})

    def test_non_numeric_coordinate(self) -> None:
        """Strings and booleans are not coordinates."""
        with pytest.raises(CommandFormatError, match="must be a number"):
            command_from_dict({"type": "M", "x": "1", "y": 2})
        with pytest.raises(CommandFormatError, match="must be a number"):
            command_from_dict({"type": "M", "x": True, "y": 2})

    def test_non_dict_entry(self) -> None:
        """Test entries that are not objects raise."""
        with pytest.raises(CommandFormatError, match="expected an object"):
            command_from_dict(["M", 0, 0])

    def test_commands_from_dicts_preserves_order(self) -> None:
        """Test list deserialization keeps draw order."""
        commands = commands_from_dicts(
            [{"type": "Z"}, {"type": "M", "x": 1, "y": 1}, {"type": "Z"}]
        )
        assert commands == [ClosePath(), MoveTo(1, 1), ClosePath()]
