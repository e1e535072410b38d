from __future__ import annotations

from typing import Optional

from PyQt6 import QtGui, QtWidgets

from . import primitives


class SurfaceCanvas(QtWidgets.QWidget):
    """Fixed-size widget that shows one offscreen QImage surface.

    Draw cycles paint into ``surface``; the widget only blits it.
    """

    def __init__(
        self,
        width: int = 400,
        height: int = 400,
        background: primitives.ColorLike = "black",
        parent: Optional[QtWidgets.QWidget] = None,
    ):
        super().__init__(parent)
        self.surface = primitives.create_surface(width, height)
        primitives.clear(self.surface, background)
        self.setFixedSize(self.surface.width(), self.surface.height())

    def paintEvent(self, _: QtGui.QPaintEvent) -> None:  # type: ignore[override]
        painter = QtGui.QPainter(self)
        painter.drawImage(0, 0, self.surface)
        painter.end()
