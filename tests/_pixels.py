from PyQt6 import QtGui


def color_near(surface: QtGui.QImage, x: int, y: int, color: str) -> bool:
    """True when ``color`` appears within one pixel of (x, y)."""
    wanted = QtGui.QColor(color).name()
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if surface.pixelColor(x + dx, y + dy).name() == wanted:
                return True
    return False
