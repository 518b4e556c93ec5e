"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Commands:
- path: Serialize glyphs from a font file
- serialize: Serialize a JSON command list
- check: Validate path data
"""

from glyphpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
