import os

# Qt tests draw into off-screen buffers only
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable, List

import pytest


class RecordingSurface:
    """DrawingSurface fake that records every call in order."""
    def __init__(self, width: float = 1096.0, height: float = 400.0) -> None:
        self.width = width
        self.height = height
        self.calls: List[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def line(self, x0, y0, x1, y1, color, width=1.0, cap="butt", alpha=1.0) -> None:
        self.calls.append(("line", x0, y0, x1, y1, color, width, cap, alpha))

    def text(self, x, y, text, color, font_px) -> None:
        self.calls.append(("text", x, y, text, color, font_px))

    def lines(self, color: str | None = None) -> List[tuple]:
        return [c for c in self.calls if c[0] == "line" and (color is None or c[5] == color)]

    def texts(self) -> List[tuple]:
        return [c for c in self.calls if c[0] == "text"]


class ManualScheduler:
    """FrameScheduler fake: frames fire only when the test advances time."""
    def __init__(self) -> None:
        self.time = 0.0
        self.pending: List[Callable[[float], None]] = []

    def now(self) -> float:
        return self.time

    def request_frame(self, callback: Callable[[float], None]) -> None:
        self.pending.append(callback)

    def advance(self, ms: float = 16.0) -> None:
        self.time += ms
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback(self.time)

    def run_until_idle(self, ms: float = 16.0, limit: int = 1000) -> int:
        frames = 0
        while self.pending and frames < limit:
            self.advance(ms)
            frames += 1
        return frames


@pytest.fixture
def surface() -> RecordingSurface:
    # drawable width = 1096 - 2 * 28 - 40 = 1000
    return RecordingSurface()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
