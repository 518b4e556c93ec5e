"""Font and file I/O layer for glyphpath.

This module handles reading glyph outlines from font files using
fonttools, loading command lists from JSON, and wrapping path data
in SVG documents.

Key classes:
- FontReader: Load fonts and draw glyphs into commands
- CommandPen: fontTools pen recording DrawCommand objects

Key functions:
- load_commands_json: Read a JSON command list
- svg_document: Build a standalone SVG document for a path
"""

from glyphpath.io.commands_json import load_commands_json
from glyphpath.io.pen import CommandPen
from glyphpath.io.reader import FontReader
from glyphpath.io.svg import svg_document

__all__ = [
    "CommandPen",
    "FontReader",
    "load_commands_json",
    "svg_document",
]
