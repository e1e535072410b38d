from __future__ import annotations

from typing import Union

from PyQt6 import QtCore, QtGui

from ..shared.math3d import Vector3

# Pixels per world unit.
VISUAL_SCALE = 20.0

ColorLike = Union[QtGui.QColor, QtCore.Qt.GlobalColor, str]


def create_surface(width: int = 400, height: int = 400) -> QtGui.QImage:
    """Allocate an offscreen drawing surface."""
    return QtGui.QImage(max(1, int(width)), max(1, int(height)), QtGui.QImage.Format.Format_ARGB32)


def _as_color(color: ColorLike) -> QtGui.QColor:
    if isinstance(color, QtGui.QColor):
        return color
    return QtGui.QColor(color)


def surface_center(surface: QtGui.QImage) -> QtCore.QPointF:
    return QtCore.QPointF(surface.width() / 2.0, surface.height() / 2.0)


def vector_endpoint(surface: QtGui.QImage, v: Vector3, scale: float = VISUAL_SCALE) -> QtCore.QPointF:
    """Screen point for the tip of v; screen y grows downward so v.y is negated."""
    center = surface_center(surface)
    return QtCore.QPointF(center.x() + v.x * scale, center.y() - v.y * scale)


def clear(surface: QtGui.QImage, color: ColorLike) -> None:
    """Fill the whole surface with a flat colour, discarding prior content."""
    surface.fill(_as_color(color))


def draw_vector(
    surface: QtGui.QImage,
    v: Vector3,
    color: ColorLike,
    *,
    scale: float = VISUAL_SCALE,
    width: float = 1.0,
) -> None:
    """Draw v as a line from the surface centre."""
    painter = QtGui.QPainter(surface)
    try:
        pen = QtGui.QPen(_as_color(color))
        pen.setWidthF(width)
        painter.setPen(pen)
        painter.drawLine(surface_center(surface), vector_endpoint(surface, v, scale))
    finally:
        painter.end()
