"""Exception hierarchy for glyphpath."""

from typing import Any


class GlyphPathError(Exception):
    """Base exception for all glyphpath errors."""

    pass


class CommandError(GlyphPathError):
    """Errors related to drawing commands and path data."""

    pass


class UnrecognizedCommandError(CommandError):
    """A command in the sequence is not one of the known drawing variants."""

    def __init__(self, index: int, command: Any) -> None:
        self.index = index
        self.command = command
        super().__init__(
            f"Unrecognized draw command at index {index}: {command!r}"
        )


class CommandFormatError(CommandError):
    """Serialized command data is malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid command data: {reason}")


class PathSyntaxError(CommandError):
    """Path string could not be tokenized."""

    def __init__(self, position: int, token: str | None, reason: str) -> None:
        self.position = position
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid path data at token {position} ({token!r}): {reason}")


class FontError(GlyphPathError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(GlyphPathError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
