"""
Qt Frame Scheduler
Provides the frame-callback mechanism for the animation controller on the
GUI thread.
"""
from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QElapsedTimer, QObject, QTimer

from swipescale.config import FRAME_INTERVAL_MS


class QtFrameScheduler(QObject):
    """
    Single-shot QTimer per frame, with a monotonic millisecond clock.
    Runs on the thread that owns it, so callbacks never overlap.
    """
    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.interval_ms = interval_ms
        self._clock = QElapsedTimer()
        self._clock.start()

    def now(self) -> float:
        return self._clock.nsecsElapsed() / 1e6

    def request_frame(self, callback: Callable[[float], None]) -> None:
        QTimer.singleShot(self.interval_ms, lambda: callback(self.now()))
