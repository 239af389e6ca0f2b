"""
QPainter Drawing Surface
Adapts a QPainter to the DrawingSurface interface used by the Renderer.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen

from swipescale.config import BACKGROUND_COLOR, FONT_FAMILY

_CAPS = {
    "butt": Qt.FlatCap,
    "round": Qt.RoundCap,
    "square": Qt.SquareCap,
}


class QPainterSurface:
    """
    Thin wrapper around an active QPainter.

    Coordinates are logical pixels; Qt applies the device pixel ratio of the
    paint device itself, so no manual scaling is needed here.
    """
    def __init__(self, painter: QPainter, width: float, height: float,
                 background: str = BACKGROUND_COLOR) -> None:
        self.painter = painter
        self.width = float(width)
        self.height = float(height)
        self._background = QColor(background)
        self.painter.setRenderHint(QPainter.Antialiasing, True)

    def clear(self) -> None:
        self.painter.fillRect(0, 0, int(self.width) + 1, int(self.height) + 1, self._background)

    def line(self, x0: float, y0: float, x1: float, y1: float, color: str,
             width: float = 1.0, cap: str = "butt", alpha: float = 1.0) -> None:
        pen = QPen(QColor(color))
        pen.setWidthF(width)
        pen.setCapStyle(_CAPS.get(cap, Qt.FlatCap))

        self.painter.save()
        self.painter.setOpacity(alpha)
        self.painter.setPen(pen)
        self.painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))
        self.painter.restore()

    def text(self, x: float, y: float, text: str, color: str, font_px: int) -> None:
        font = QFont(FONT_FAMILY)
        font.setPixelSize(font_px)

        self.painter.save()
        self.painter.setFont(font)
        self.painter.setPen(QColor(color))
        # (x, y) is the text baseline, as on an HTML canvas
        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()
