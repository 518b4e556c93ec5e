"""Utility functions for glyphpath.

- Logging setup and configuration
- Per-glyph structured events
"""

from glyphpath.utils.logging import GlyphLogger, configure_logging

__all__ = ["GlyphLogger", "configure_logging"]
