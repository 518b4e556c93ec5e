"""fontTools pen that records drawing commands.

fontTools exposes glyph outlines through the pen protocol. CommandPen
records each call as a DrawCommand so outlines read from a font can be
serialized directly.
"""

import logging
from typing import Any

from fontTools.pens.basePen import BasePen

from glyphpath.domain.commands import (
    ClosePath,
    CubicCurveTo,
    DrawCommand,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)

logger = logging.getLogger(__name__)


# NOTE: the fontTools pen API uses camelCase for the method names


class CommandPen(BasePen):
    """A fontTools pen that records DrawCommand objects.

    BasePen splits TrueType quadratic splines at their implied on-curve
    points and cubic super-Beziers into single segments, so every
    recorded curve is one QuadraticCurveTo or CubicCurveTo. Open contours
    (``endPath``) are recorded without a ClosePath.

    Args:
        glyphSet: mapping of {glyph_name: glyph} used to resolve component
            references. May be None when drawing simple contours.
        decompose_components: draw components through the glyph set; when
            False, component references are ignored.
        skip_missing_components: ignore components whose base glyph is not
            in the glyph set instead of raising.
    """

    def __init__(
        self,
        glyphSet: Any = None,
        decompose_components: bool = True,
        skip_missing_components: bool = True,
    ) -> None:
        super().__init__(glyphSet)
        self.skipMissingComponents = skip_missing_components
        self.decompose_components = decompose_components
        self.commands: list[DrawCommand] = []

    def _moveTo(self, pt):
        self.commands.append(MoveTo(*pt))

    def _lineTo(self, pt):
        self.commands.append(LineTo(*pt))

    def _curveToOne(self, pt1, pt2, pt3):
        self.commands.append(CubicCurveTo(*pt1, *pt2, *pt3))

    def _qCurveToOne(self, pt1, pt2):
        self.commands.append(QuadraticCurveTo(*pt1, *pt2))

    def _closePath(self):
        self.commands.append(ClosePath())

    def _endPath(self):
        pass

    def addComponent(self, glyphName, transformation):
        if not self.decompose_components:
            logger.debug("Skipping component reference: base=%s", glyphName)
            return
        super().addComponent(glyphName, transformation)
