"""Converters from fonttools drawing calls to domain paths.

This module handles the conversion between fonttools pen protocol and our
domain OutlinePath model, and the placement of shaped glyphs on a common baseline.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.pens.transformPen import TransformPen

from signcalc.domain import ClosePath, CubicCurveTo, LineTo, MoveTo, OutlinePath, QuadCurveTo


class PathPen(BasePen):
    """Pen that records an outline as domain path commands.

    BasePen does the normalization work: composite glyphs are decomposed
    through the glyph set, TrueType runs of off-curve points are split into
    single quadratic segments with implied on-curve points, and contours
    without any on-curve point get an implied start point.

    Example:
        pen = PathPen(font.getGlyphSet())
        font.getGlyphSet()["H"].draw(pen)
        path = pen.path
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.path = OutlinePath()

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.path.append(MoveTo(pt[0], pt[1]))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.append(LineTo(pt[0], pt[1]))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.append(QuadCurveTo(pt1[0], pt1[1], pt2[0], pt2[1]))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.append(CubicCurveTo(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1]))

    def _closePath(self) -> None:
        self.path.append(ClosePath())

    def _endPath(self) -> None:
        # Open contour: nothing to close
        pass


def glyph_transform(
    scale: float,
    x: float,
    y: float,
) -> tuple[float, float, float, float, float, float]:
    """Build the affine transform that places a glyph.

    Args:
        scale: Output units per font unit
        x: Pen x position in font units
        y: Pen y position in font units

    Returns:
        Affine transformation (xx, xy, yx, yy, dx, dy)
    """
    return (scale, 0.0, 0.0, scale, x * scale, y * scale)


def draw_glyph(
    glyph_set: Any,
    glyph_name: str,
    pen: PathPen,
    transform: tuple[float, float, float, float, float, float],
) -> None:
    """Draw one glyph from a glyph set into a PathPen.

    Args:
        glyph_set: fonttools glyph set
        glyph_name: Name of the glyph to draw
        pen: Pen receiving the transformed outline
        transform: Affine transform applied to every point
    """
    glyph_set[glyph_name].draw(TransformPen(pen, transform))
