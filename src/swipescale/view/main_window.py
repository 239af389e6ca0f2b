"""
Main Application Window
=======================
The primary GUI container: input controls on the left, the stage on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It turns control changes into State snapshots and hands them to
   the stage, and wires the Animate/Reset actions to the controller.
"""
import logging
from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QGroupBox,
    QFormLayout, QLineEdit, QSlider, QLabel, QPushButton, QGridLayout
)

from swipescale import config
from swipescale.controller.animation import AnimationController
from swipescale.controller.scheduler import QtFrameScheduler
from swipescale.model.state import State, round_half_up
from swipescale.view.widgets.stage import StageWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "SwipeScale: DPI × Sensitivity"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*config.WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        controls = QWidget()
        layout = QVBoxLayout(controls)

        grp_input = QGroupBox("Mouse")
        form = QFormLayout(grp_input)

        self.edit_dpi = QLineEdit(f"{config.DEFAULT_DPI:g}")
        self.edit_dpi.setToolTip(f"{config.DPI_MIN:g} – {config.DPI_MAX:g}")
        self.edit_dpi.textChanged.connect(self.on_input_changed)
        form.addRow("DPI:", self.edit_dpi)

        self.edit_sens = QLineEdit(f"{config.DEFAULT_SENS:g}")
        self.edit_sens.setToolTip(f"{config.SENS_MIN:g} – {config.SENS_MAX:g}")
        self.edit_sens.textChanged.connect(self.on_input_changed)
        form.addRow("Sensitivity:", self.edit_sens)

        self.lbl_edpi = QLabel("-")
        form.addRow("eDPI:", self.lbl_edpi)

        self.slider_inches = QSlider(Qt.Horizontal)
        self.slider_inches.setRange(0, int(config.INCHES_MAX * config.INCHES_SLIDER_STEPS))
        self.slider_inches.valueChanged.connect(self.on_input_changed)
        self.lbl_inches = QLabel("-")
        hbox_inches = QHBoxLayout()
        hbox_inches.addWidget(self.slider_inches)
        hbox_inches.addWidget(self.lbl_inches)
        form.addRow("Inches:", hbox_inches)

        layout.addWidget(grp_input)

        # --- Presets ---
        grp_presets = QGroupBox("Presets")
        grid = QGridLayout(grp_presets)
        for i, (label, dpi, sens) in enumerate(config.PRESETS):
            btn = QPushButton(label)
            btn.clicked.connect(lambda _=False, d=dpi, s=sens: self.apply_preset(d, s))
            grid.addWidget(btn, i // 2, i % 2)
        layout.addWidget(grp_presets)

        # --- Animation ---
        grp_anim = QGroupBox("Swipe")
        hbox_anim = QHBoxLayout(grp_anim)
        self.btn_animate = QPushButton("Animate 1 inch")
        self.btn_animate.clicked.connect(self.on_animate_clicked)
        hbox_anim.addWidget(self.btn_animate)
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        hbox_anim.addWidget(self.btn_reset)
        layout.addWidget(grp_anim)

        layout.addStretch()
        splitter.addWidget(controls)

        # --- RIGHT SIDE: Stage ---
        self.stage = StageWidget()
        splitter.addWidget(self.stage)
        splitter.setSizes([280, 820])

        # --- ANIMATION ---
        self.scheduler = QtFrameScheduler(parent=self)
        self.animation = AnimationController(
            state_source=self.current_state,
            geometry_source=self.stage.geometry_now,
            render=self.render_frame,
            scheduler=self.scheduler,
            on_inches_changed=self.set_inches_quietly,
        )

        # Initial Render
        self.set_inches_quietly(config.DEFAULT_INCHES)
        self.render_frame()

    # --- HELPER METHODS ---
    def current_state(self) -> State:
        """Snapshot of the controls, validated."""
        inches = self.slider_inches.value() / config.INCHES_SLIDER_STEPS
        return State.from_raw(self.edit_dpi.text(), self.edit_sens.text(), inches)

    def set_inches_quietly(self, inches: float) -> None:
        """Move the slider without triggering another render."""
        self.slider_inches.blockSignals(True)
        try:
            self.slider_inches.setValue(round(inches * config.INCHES_SLIDER_STEPS))
        finally:
            self.slider_inches.blockSignals(False)

    def render_frame(self, state: Optional[State] = None, trail: Optional[Sequence[float]] = None) -> None:
        """Render entry point: draw `state` (or the controls' state) with an optional trail."""
        if state is None:
            state = self.current_state()
        self.lbl_edpi.setText(str(round_half_up(state.edpi)))
        self.lbl_inches.setText(f"{state.inches:.1f}")
        self.stage.draw_frame(state, trail)

    # --- SLOTS ---
    def on_input_changed(self, *_args) -> None:
        self.render_frame()

    def apply_preset(self, dpi: float, sens: float) -> None:
        logger.info(f"Preset applied: DPI {dpi:g}, sens {sens:g}")
        for edit, value in ((self.edit_dpi, dpi), (self.edit_sens, sens)):
            edit.blockSignals(True)
            try:
                edit.setText(f"{value:g}")
            finally:
                edit.blockSignals(False)
        self.render_frame()

    def on_animate_clicked(self) -> None:
        self.animation.start()

    def on_reset_clicked(self) -> None:
        self.animation.cancel()
        self.set_inches_quietly(config.DEFAULT_INCHES)
        self.render_frame()
