"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (paddings, colours, timings)
   scattered throughout the model, view and controller layers.
2. Calibration: The scale reference point and clamp bounds live in one place,
   so the renderer and the animation always agree on them.

Exports:
    DPI_MIN, DPI_MAX, SENS_MIN, SENS_MAX: Input clamp bounds.
    REFERENCE_EDPI, REFERENCE_INCHES, FILL_RATIO: Scale calibration.
    PRESETS: (label, dpi, sens) tuples offered by the host window.
"""
from typing import List, Tuple

# --- Input bounds ---
DPI_MIN: float = 100.0
DPI_MAX: float = 6400.0
SENS_MIN: float = 0.01
SENS_MAX: float = 5.0

DEFAULT_DPI: float = 800.0
DEFAULT_SENS: float = 1.0
DEFAULT_INCHES: float = 1.0

# Inches slider range; the slider works in hundredths of an inch
INCHES_MAX: float = 4.0
INCHES_SLIDER_STEPS: int = 100

# --- Scale calibration ---
# 1600 eDPI moved over 2 inches fills FILL_RATIO of the drawable width
REFERENCE_EDPI: float = 1600.0
REFERENCE_INCHES: float = 2.0
FILL_RATIO: float = 0.85

# --- Geometry (logical pixels) ---
PADDING: float = 28.0
ORIGIN_OFFSET: float = 20.0
RIGHT_RESERVE: float = 40.0
TITLE_Y: float = 28.0
MIN_BASELINE_LENGTH: float = 40.0
CROSSHAIR_ARM: float = 10.0
RULER_OFFSET_Y: float = 70.0
RULER_TICK_HALF: float = 8.0
RULER_LABEL_DX: float = -12.0
RULER_LABEL_DY: float = 20.0
RULER_MARKS: Tuple[int, ...] = (400, 800, 1600)

# --- Colours ---
BACKGROUND_COLOR: str = "#0b1020"
TITLE_COLOR: str = "#cfd6ff"
BASELINE_COLOR: str = "#223059"
START_COLOR: str = "#6ee7ff"
END_COLOR: str = "#8b80ff"
RULER_COLOR: str = "#27305a"
TICK_COLOR: str = "#ff6b6b"
TICK_LABEL_COLOR: str = "#ffb4b4"

# --- Strokes & fonts ---
BASELINE_WIDTH: float = 8.0
CROSSHAIR_WIDTH: float = 2.0
CROSSHAIR_ALPHA: float = 0.95
RULER_WIDTH: float = 1.5
TITLE_FONT_PX: int = 14
LABEL_FONT_PX: int = 12
FONT_FAMILY: str = "system-ui"

# Trail crosshairs fade from TRAIL_ALPHA_MIN (oldest) towards TRAIL_ALPHA_MAX
TRAIL_ALPHA_MIN: float = 0.15
TRAIL_ALPHA_MAX: float = 0.50
TRAIL_LENGTH: int = 20

# --- Animation ---
ANIMATION_DURATION_MS: float = 900.0
ANIMATION_TARGET_INCHES: float = 1.0
FRAME_INTERVAL_MS: int = 16

# --- Host window ---
PRESETS: List[Tuple[str, float, float]] = [
    ("400 × 2.0", 400.0, 2.0),
    ("800 × 1.0", 800.0, 1.0),
    ("800 × 2.0", 800.0, 2.0),
    ("1600 × 0.5", 1600.0, 0.5),
    ("1600 × 1.0", 1600.0, 1.0),
    ("3200 × 0.25", 3200.0, 0.25),
]
WINDOW_SIZE: Tuple[int, int] = (1100, 560)
CANVAS_MIN_SIZE: Tuple[int, int] = (480, 300)
