"""
Swipe Animation Controller
==========================
Drives the eased one-inch swipe animation.

Why is this file needed?
------------------------
1. Timing: Each frame recomputes progress from the elapsed time, so a slow
   frame skips ahead instead of stretching the animation.
2. Cancellation: Only one run may be active. Every run carries an identity
   token; a frame callback from a replaced or cancelled run is ignored.
3. Decoupling: Frames come from an injected FrameScheduler and are drawn
   through an injected render callback, so the controller runs without Qt
   in tests.

Classes:
    AnimationRun: One in-flight animation (frozen dpi/sens, trail, start time).
    AnimationController: Owns the active run; Idle -> Running -> Idle.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
import logging
import uuid
from typing import Callable, Deque, Optional, Protocol, Sequence

from swipescale.config import ANIMATION_DURATION_MS, ANIMATION_TARGET_INCHES, TRAIL_LENGTH
from swipescale.model.scale import DrawGeometry, edpi_to_length
from swipescale.model.state import State
from swipescale.utils import clamp, ease_out_cubic

logger = logging.getLogger(__name__)

RenderCallback = Callable[[State, Sequence[float]], None]


class FrameScheduler(Protocol):
    """Host frame-callback mechanism (display-synchronised timer)."""
    def now(self) -> float: ...
    def request_frame(self, callback: Callable[[float], None]) -> None: ...


@dataclass
class AnimationRun:
    """A single animation run. dpi/sens are frozen for its whole duration."""
    base: State
    start: float
    duration: float = ANIMATION_DURATION_MS
    target_inches: float = ANIMATION_TARGET_INCHES
    token: str = field(default_factory=lambda: uuid.uuid4().hex)
    trail: Deque[float] = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return clamp((now - self.start) / self.duration, 0.0, 1.0)

    def step(self, now: float, geometry: DrawGeometry) -> tuple[State, bool]:
        """
        Advance the run to time `now`.

        Returns:
            The state to draw and whether another frame is needed.
        """
        dt = self.progress(now)
        cur_inches = self.target_inches * ease_out_cubic(dt)
        state = self.base.with_inches(cur_inches)

        length = edpi_to_length(state.edpi, cur_inches, geometry.drawable_width)
        self.trail.append(geometry.origin_x + length)

        return state, dt < 1.0


class AnimationController:
    def __init__(
        self,
        state_source: Callable[[], State],
        geometry_source: Callable[[], DrawGeometry],
        render: RenderCallback,
        scheduler: FrameScheduler,
        on_inches_changed: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._state_source = state_source
        self._geometry_source = geometry_source
        self._render = render
        self._scheduler = scheduler
        self._on_inches_changed = on_inches_changed

        self._active: Optional[AnimationRun] = None

    @property
    def is_running(self) -> bool:
        return self._active is not None

    @property
    def active_token(self) -> Optional[str]:
        return self._active.token if self._active else None

    def start(self) -> AnimationRun:
        """Cancel any active run and start a new one-inch swipe."""
        self.cancel()

        current = self._state_source()
        run = AnimationRun(base=current.with_inches(0.0), start=self._scheduler.now())
        self._active = run
        logger.debug(f"Animation {run.token[:8]} started (eDPI {run.base.edpi:g}).")

        self._schedule(run)
        return run

    def cancel(self) -> None:
        """Invalidate the active run. Its pending frame, if any, becomes a no-op."""
        if self._active is not None:
            logger.debug(f"Animation {self._active.token[:8]} cancelled.")
            self._active = None

    def _schedule(self, run: AnimationRun) -> None:
        token = run.token
        self._scheduler.request_frame(lambda now: self._on_frame(token, now))

    def _on_frame(self, token: str, now: float) -> None:
        run = self._active
        if run is None or run.token != token:
            # Stale continuation of a replaced or cancelled run
            return

        state, more = run.step(now, self._geometry_source())

        if self._on_inches_changed is not None:
            self._on_inches_changed(state.inches)
        self._render(state, tuple(run.trail))

        if more:
            self._schedule(run)
        else:
            self._active = None
            logger.debug(f"Animation {token[:8]} finished at {state.inches:.2f} in.")
