"""Tokenizer for serialized path data.

Reads back the output of the serializer: whitespace-separated tokens,
where each command letter is followed by exactly its number of
coordinates. Only the five absolute commands the serializer writes are
accepted.
"""

import re

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    DrawCommand,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)
from glyphpath.exceptions import PathSyntaxError

_ARITY: dict[str, tuple[type, int]] = {
    "M": (MoveTo, 2),
    "L": (LineTo, 2),
    "C": (CubicCurveTo, 6),
    "Q": (QuadraticCurveTo, 4),
    "Z": (ClosePath, 0),
}


# SVG path grammar numbers: ASCII digits only, no digit separators, no nan/inf.
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_number(token: str, position: int) -> int | float:
    if _INTEGER.fullmatch(token):
        return int(token)
    if _NUMBER.fullmatch(token):
        return float(token)
    raise PathSyntaxError(position, token, "expected a number")


def parse_path(path: str) -> list[DrawCommand]:
    """Parse path data back into drawing commands.

    Args:
        path: Path string as produced by ``serialize``

    Returns:
        Commands in the order they appear

    Raises:
        PathSyntaxError: On an unknown command letter, a misplaced number,
            or a command with too few coordinates
    """
    tokens = path.split()
    commands: list[DrawCommand] = []
    position = 0

    while position < len(tokens):
        token = tokens[position]
        if token not in _ARITY:
            if _NUMBER.fullmatch(token):
                raise PathSyntaxError(position, token, "number outside of a command")
            raise PathSyntaxError(position, token, "unknown command")

        command_cls, arity = _ARITY[token]
        args = tokens[position + 1 : position + 1 + arity]
        if len(args) < arity:
            raise PathSyntaxError(
                position, token, f"expected {arity} coordinates, got {len(args)}"
            )

        values = [
            _parse_number(arg, position + 1 + offset) for offset, arg in enumerate(args)
        ]
        commands.append(command_cls(*values))
        position += 1 + arity

    return commands
