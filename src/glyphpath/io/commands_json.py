"""Loading drawing commands from JSON files."""

import json
from pathlib import Path

from glyphpath.domain.commands import DrawCommand, RawCommand, commands_from_dicts
from glyphpath.exceptions import CommandFormatError


def load_commands_json(path: Path) -> list[DrawCommand | RawCommand]:
    """Read a JSON array of command objects.

    Each entry has the form ``{"type": "M", "x": 0, "y": 0}``.

    Args:
        path: Path to the JSON file

    Returns:
        Commands in file order

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read (e.g. it is a directory)
        CommandFormatError: If the file is not a UTF-8 JSON array of
            command objects
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise CommandFormatError(
            f"{path} is not valid UTF-8: byte {e.start} cannot be decoded"
        ) from e
    except json.JSONDecodeError as e:
        raise CommandFormatError(f"{path} is not valid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise CommandFormatError(
            f"{path} must contain a JSON array, got {type(data).__name__}"
        )

    return commands_from_dicts(data)
