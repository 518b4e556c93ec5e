"""Fixture fonts built on the fly with fontTools.FontBuilder."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
ASCENT = 800
DESCENT = -200


def _name_strings(family: str) -> dict:
    return {
        "familyName": family,
        "styleName": "Regular",
        "uniqueFontIdentifier": f"glyphpath: {family}",
        "fullName": f"{family} Regular",
        "psName": f"{family}-Regular",
        "version": "Version 1.0",
    }


def draw_square(pen) -> None:
    """Closed square from (100, 0) to (400, 500)."""
    pen.moveTo((100, 0))
    pen.lineTo((100, 500))
    pen.lineTo((400, 500))
    pen.lineTo((400, 0))
    pen.closePath()


def draw_spline(pen) -> None:
    """Contour with a two off-curve TrueType spline."""
    pen.moveTo((0, 0))
    pen.lineTo((0, 500))
    pen.qCurveTo((300, 500), (500, 300), (500, 0))
    pen.closePath()


def draw_cubic(pen) -> None:
    """Contour with a single cubic segment."""
    pen.moveTo((0, 0))
    pen.curveTo((0, 100), (100, 200), (200, 200))
    pen.lineTo((200, 0))
    pen.closePath()


def _finish(fb: FontBuilder, family: str, lsb: dict[str, int], path: Path) -> Path:
    advance = {name: 600 for name in lsb}
    fb.setupHorizontalMetrics({name: (advance[name], lsb[name]) for name in lsb})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable(_name_strings(family))
    fb.setupOS2(sTypoAscender=ASCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def ttf_path(tmp_path_factory) -> Path:
    """TrueType font with a square, a quadratic spline, a composite and a space."""
    glyph_order = [".notdef", "space", "square", "spline", "shifted"]

    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(" "): "space", ord("S"): "square", ord("D"): "spline"})

    glyphs = {}
    for name in (".notdef", "space"):
        glyphs[name] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    draw_square(pen)
    glyphs["square"] = pen.glyph()

    pen = TTGlyphPen(None)
    draw_spline(pen)
    glyphs["spline"] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("square", (1, 0, 0, 1, 500, 0))
    glyphs["shifted"] = pen.glyph()

    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    lsb = {name: getattr(glyf[name], "xMin", 0) for name in glyph_order}

    path = tmp_path_factory.mktemp("fonts") / "Fixture-Regular.ttf"
    return _finish(fb, "Fixture", lsb, path)


@pytest.fixture(scope="session")
def otf_path(tmp_path_factory) -> Path:
    """CFF-flavoured OpenType font with a cubic glyph."""
    glyph_order = [".notdef", "cubic"]

    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord("C"): "cubic"})

    charstrings = {".notdef": T2CharStringPen(600, None).getCharString()}
    pen = T2CharStringPen(600, None)
    draw_cubic(pen)
    charstrings["cubic"] = pen.getCharString()

    fb.setupCFF("FixtureCFF-Regular", {"FullName": "FixtureCFF Regular"}, charstrings, {})

    lsb = {}
    for name, charstring in charstrings.items():
        bounds = charstring.calcBounds(None)
        lsb[name] = bounds[0] if bounds else 0

    path = tmp_path_factory.mktemp("fonts") / "FixtureCFF-Regular.otf"
    return _finish(fb, "FixtureCFF", lsb, path)
