"""glyphpath - Serialize glyph outlines as SVG path data.

glyphpath turns the ordered drawing commands of a glyph outline (move, line,
cubic curve, quadratic curve, close) into a single path-description string
suitable for the ``d`` attribute of an SVG ``<path>`` element.

Example:
    >>> from glyphpath import serialize
    >>> from glyphpath.domain import LineTo, MoveTo, ClosePath
    >>> serialize([MoveTo(0, 0), LineTo(10, 0), ClosePath()])
    'M 0 0 L 10 0 Z'
"""

from glyphpath.core.serializer import PathSerializer, serialize

__version__ = "0.1.0"

__all__ = ["PathSerializer", "__version__", "serialize"]
