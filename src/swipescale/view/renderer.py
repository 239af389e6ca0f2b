"""
Frame Renderer
==============
Draws one complete frame of the swipe visualisation.

Why is this file needed?
------------------------
1. Layering: The draw order (title, baseline, crosshairs, trail, ruler) is
   defined once, back to front.
2. Decoupling: The renderer only talks to a DrawingSurface, so it has no Qt
   dependency and can be exercised with a recording fake in tests.
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

import numpy as np

from swipescale import config
from swipescale.model.scale import DrawGeometry, edpi_to_length
from swipescale.model.state import State


class DrawingSurface(Protocol):
    """2D drawing capability the renderer calls into."""
    width: float
    height: float

    def clear(self) -> None: ...
    def line(self, x0: float, y0: float, x1: float, y1: float, color: str,
             width: float = 1.0, cap: str = "butt", alpha: float = 1.0) -> None: ...
    def text(self, x: float, y: float, text: str, color: str, font_px: int) -> None: ...


def trail_alphas(n: int) -> np.ndarray:
    """Opacity per trail sample, oldest first. Linear in recency."""
    span = config.TRAIL_ALPHA_MAX - config.TRAIL_ALPHA_MIN
    return config.TRAIL_ALPHA_MIN + np.arange(n, dtype=float) / max(n, 1) * span


class Renderer:
    def render(self, surface: DrawingSurface, state: State,
               trail: Optional[Sequence[float]] = None) -> None:
        """Draw one frame for `state`, plus the fading `trail` if given."""
        geom = DrawGeometry(width=surface.width, height=surface.height)
        origin = geom.origin_x

        surface.clear()

        surface.text(origin, config.TITLE_Y, state.title(), config.TITLE_COLOR, config.TITLE_FONT_PX)

        y = geom.mid_y
        end_len = edpi_to_length(state.edpi, state.inches, geom.drawable_width)

        # The baseline stays visible even for a zero-length swipe
        surface.line(
            origin, y, origin + max(config.MIN_BASELINE_LENGTH, end_len), y,
            config.BASELINE_COLOR, width=config.BASELINE_WIDTH, cap="round",
        )

        self._crosshair(surface, origin, y, config.START_COLOR)
        self._crosshair(surface, origin + end_len, y, config.END_COLOR)

        if trail:
            for x, alpha in zip(trail, trail_alphas(len(trail))):
                self._crosshair(surface, x, y, config.END_COLOR, alpha=float(alpha))

        self._ruler(surface, geom)

    @staticmethod
    def _crosshair(surface: DrawingSurface, x: float, y: float, color: str,
                   alpha: float = config.CROSSHAIR_ALPHA) -> None:
        arm = config.CROSSHAIR_ARM
        surface.line(x - arm, y, x + arm, y, color, width=config.CROSSHAIR_WIDTH, alpha=alpha)
        surface.line(x, y - arm, x, y + arm, color, width=config.CROSSHAIR_WIDTH, alpha=alpha)

    @staticmethod
    def _ruler(surface: DrawingSurface, geom: DrawGeometry) -> None:
        """Reference ticks for a few common eDPI values at exactly 1 inch."""
        y = geom.mid_y + config.RULER_OFFSET_Y
        w = geom.drawable_width
        origin = geom.origin_x
        half = config.RULER_TICK_HALF

        surface.line(origin, y, origin + w, y, config.RULER_COLOR, width=config.RULER_WIDTH)

        for mark in config.RULER_MARKS:
            lx = origin + edpi_to_length(mark, 1.0, w)
            surface.line(lx, y - half, lx, y + half, config.TICK_COLOR, width=config.RULER_WIDTH)
            surface.text(
                lx + config.RULER_LABEL_DX, y + config.RULER_LABEL_DY,
                str(mark), config.TICK_LABEL_COLOR, config.LABEL_FONT_PX,
            )
