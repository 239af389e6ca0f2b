"""
Stage Widget
The drawing area that hosts the swipe visualisation.
"""
from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from swipescale.config import CANVAS_MIN_SIZE
from swipescale.model.scale import DrawGeometry
from swipescale.model.state import State
from swipescale.view.renderer import Renderer
from swipescale.view.surface import QPainterSurface


class StageWidget(QWidget):
    """
    Holds the most recent frame request and paints it on the next paintEvent.

    draw_frame() may be called many times between paints (slider drags, animation
    frames); only the latest request is drawn.
    """
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(*CANVAS_MIN_SIZE)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self.renderer = Renderer()
        self._state: Optional[State] = None
        self._trail: tuple[float, ...] = ()

    def geometry_now(self) -> DrawGeometry:
        """Layout for the current widget size (logical pixels)."""
        return DrawGeometry(width=self.width(), height=self.height())
    def draw_frame(self, state: State, trail: Optional[Sequence[float]] = None) -> None:
        self._state = state
        self._trail = tuple(trail) if trail else ()
        self.update()

    @property
    def trail(self) -> tuple[float, ...]:
        """Trail positions the next paint will draw (absolute x, current width)."""
        return self._trail

    def paintEvent(self, event) -> None:
        if self._state is None:
            return
        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter, self.width(), self.height())
            self.renderer.render(surface, self._state, self._trail)
        finally:
            painter.end()

    def resizeEvent(self, event) -> None:
        # Trail x positions belong to the old width; a running animation
        # supplies a fresh one on its next frame.
        self._trail = ()
        self.update()
        super().resizeEvent(event)
