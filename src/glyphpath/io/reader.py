"""Font reader for extracting glyph outlines as drawing commands.

This module provides the FontReader class for loading font files
and drawing glyphs into DrawCommand sequences.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from glyphpath.config import FontConfig
from glyphpath.domain.commands import DrawCommand
from glyphpath.exceptions import FontLoadError, GlyphNotFoundError
from glyphpath.io.pen import CommandPen

logger = logging.getLogger(__name__)


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    Outlines are returned in font units, exactly as the font stores them.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for name, commands in reader.iter_commands():
                print(name, len(commands))
    """

    def __init__(self, font_path: Path, config: FontConfig | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
            config: Outline extraction settings (defaults if None)
        """
        self._font_path = font_path
        self._config = config or FontConfig()
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file is not a readable font
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except (TTLibError, OSError) as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavoured fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    def glyph_names(self) -> list[str]:
        """Return glyph names in font order."""
        return list(self._require_font().getGlyphOrder())

    def glyph_for_char(self, char: str) -> str:
        """Map a character to its glyph name through the font's cmap.

        Args:
            char: A single character

        Returns:
            Glyph name

        Raises:
            ValueError: If ``char`` is not exactly one character
            GlyphNotFoundError: If the font does not map the character
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

        cmap = self._require_font().getBestCmap() or {}
        name = cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(f"U+{ord(char):04X}")
        return name

    def get_commands(self, name: str) -> list[DrawCommand]:
        """Draw a glyph into a list of drawing commands.

        Args:
            name: Glyph name

        Returns:
            Drawing commands in draw order (empty for blank glyphs)

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the glyph is not in the font
        """
        font = self._require_font()

        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyph_set = font.getGlyphSet()
        pen = CommandPen(
            glyph_set,
            decompose_components=self._config.decompose_components,
            skip_missing_components=self._config.skip_missing_components,
        )
        glyph_set[name].draw(pen)

        logger.debug("Glyph drawn: name=%s commands=%d", name, len(pen.commands))
        return pen.commands

    def iter_commands(self) -> Iterator[tuple[str, list[DrawCommand]]]:
        """Iterate over all glyphs in font order.

        Yields:
            Tuples of (glyph name, drawing commands)

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        for name in self.glyph_names():
            yield name, self.get_commands(name)

    def glyph_view_box(self, name: str) -> tuple[float, float, float, float]:
        """Return an SVG view box covering the glyph's advance and line height.

        The box is expressed in y-down coordinates, i.e. for an outline
        drawn with a vertical flip: ``(0, -ascender, advance, ascender - descender)``.

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the glyph is not in the font
        """
        font = self._require_font()

        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        advance_width, _ = font["hmtx"].metrics[name]  # type: ignore[attr-defined]
        hhea = font["hhea"]
        ascender = hhea.ascent  # type: ignore[attr-defined]
        descender = hhea.descent  # type: ignore[attr-defined]

        return (0, -ascender, advance_width, ascender - descender)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
