import pytest

from swipescale import config
from swipescale.model.state import State
from swipescale.view.renderer import Renderer

QtGui = pytest.importorskip("PySide6.QtGui")


def test_painter_surface_draws_baseline(qapp):
    from swipescale.view.surface import QPainterSurface

    image = QtGui.QImage(1096, 400, QtGui.QImage.Format_ARGB32)
    painter = QtGui.QPainter(image)
    try:
        surface = QPainterSurface(painter, image.width(), image.height())
        Renderer().render(surface, State.from_raw(800, 1, 1))
    finally:
        painter.end()

    # Well inside the baseline, away from both crosshairs
    assert QtGui.QColor(image.pixel(48 + 100, 200)).name() == config.BASELINE_COLOR
    # Cleared background in an empty corner
    assert QtGui.QColor(image.pixel(1090, 395)).name() == config.BACKGROUND_COLOR


def test_scheduler_clock_is_monotonic(qapp):
    from swipescale.controller.scheduler import QtFrameScheduler

    scheduler = QtFrameScheduler()
    first = scheduler.now()
    assert scheduler.now() >= first >= 0.0


class TestMainWindow:
    @pytest.fixture
    def window(self, qapp):
        from swipescale.view.main_window import MainWindow

        win = MainWindow()
        yield win
        win.close()
        win.deleteLater()

    def test_initial_state(self, window):
        state = window.current_state()
        assert (state.dpi, state.sens, state.inches) == (800.0, 1.0, 1.0)
        assert window.lbl_edpi.text() == "800"
        assert window.lbl_inches.text() == "1.0"

    def test_preset_updates_state_and_readouts(self, window):
        window.apply_preset(800, 2)
        assert window.current_state().edpi == 1600
        assert window.lbl_edpi.text() == "1600"

    def test_bad_text_is_clamped(self, window):
        window.edit_dpi.setText("lots")
        assert window.current_state().dpi == config.DPI_MIN
        assert window.lbl_edpi.text() == "100"

    def test_reset_cancels_animation(self, window):
        window.slider_inches.setValue(250)
        window.animation.start()
        assert window.animation.is_running

        window.on_reset_clicked()
        assert not window.animation.is_running
        assert window.current_state().inches == 1.0


class TestStageWidget:
    @pytest.fixture
    def stage(self, qapp):
        from swipescale.view.widgets.stage import StageWidget

        widget = StageWidget()
        widget.resize(1096, 400)
        widget.grab()  # flush the pending resize
        yield widget
        widget.deleteLater()

    def test_draw_frame_keeps_trail_until_resize(self, stage):
        stage.draw_frame(State.from_raw(800, 1, 1.0), [248.0, 260.5])
        assert stage.trail == (248.0, 260.5)

        stage.resize(600, 400)
        stage.grab()

        # Old-width positions would land past the new end marker
        assert stage.trail == ()
        assert stage.geometry_now().drawable_width == 600 - 56 - 40

    def test_geometry_follows_size(self, stage):
        geom = stage.geometry_now()
        assert (geom.width, geom.height, geom.drawable_width) == (1096, 400, 1000)
