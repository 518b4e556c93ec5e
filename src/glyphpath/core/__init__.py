"""Core path algorithms for glyphpath.

All functions here are:
- Stateless (safe to share between threads)
- Pure (input sequences are never modified)

Key functions:
- serialize: Render drawing commands as path data
- format_command: Render one command as a path segment
- parse_path: Read path data back into drawing commands

Key classes:
- PathSerializer: Configurable serializer
"""

from glyphpath.core.serializer import PathSerializer, format_command, serialize
from glyphpath.core.tokenizer import parse_path

__all__ = [
    "PathSerializer",
    "format_command",
    "parse_path",
    "serialize",
]
