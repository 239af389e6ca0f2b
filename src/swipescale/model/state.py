"""
Swipe State (Data Model)
========================
This module defines the immutable snapshot the rest of the application draws
and animates from.

Why is this file needed?
------------------------
1. Validation: Raw values coming from the host controls (text fields, slider)
   are coerced here and nowhere else. Nothing downstream re-checks them.
2. Derivation: eDPI is always computed from DPI and sensitivity, it is never
   stored on its own.

Classes:
    State: Validated (dpi, sens, inches) triple with derived eDPI.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Any

from swipescale.config import DPI_MIN, DPI_MAX, SENS_MIN, SENS_MAX
from swipescale.utils import clamp

logger = logging.getLogger(__name__)


def parse_real(raw: Any) -> float:
    """
    Parse a raw control value as a real number.

    Anything that is not a number (empty field, garbage text, None, NaN)
    degrades to 0.0. Numeric infinities are kept so that clamping can pin
    them, but "inf"/"nan" typed as text are not numbers to a form field.
    """
    from_text = isinstance(raw, str)
    if from_text:
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"Could not parse {raw!r} as a number, using 0.")
        return 0.0
    if math.isnan(value) or (from_text and math.isinf(value)):
        logger.debug(f"Non-finite input {raw!r}, using 0.")
        return 0.0
    return value


def format_plain(value: float) -> str:
    """Shortest exact text for a number, without a trailing '.0' (800.0 -> '800')."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def round_half_up(value: float) -> int:
    """Round like a browser does (x.5 goes up), not like round() does."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class State:
    """
    Validated snapshot of the visualised quantities.

    Build instances with State.from_raw(); the plain constructor assumes the
    values are already in range.
    """
    dpi: float
    sens: float
    inches: float

    @property
    def edpi(self) -> float:
        return self.dpi * self.sens

    @classmethod
    def from_raw(cls, dpi: Any, sens: Any, inches: Any) -> State:
        """Coerce raw host values into a valid State. Never raises."""
        parsed_dpi = parse_real(dpi)
        parsed_sens = parse_real(sens)
        return cls(
            dpi=clamp(parsed_dpi, DPI_MIN, DPI_MAX),
            sens=clamp(parsed_sens, SENS_MIN, SENS_MAX),
            inches=max(0.0, parse_real(inches)),
        )

    def with_inches(self, inches: float) -> State:
        return replace(self, inches=max(0.0, parse_real(inches)))

    def title(self) -> str:
        return (
            f"DPI {format_plain(self.dpi)} × Sens {format_plain(self.sens)} → "
            f"eDPI {round_half_up(self.edpi)} | Inches {self.inches:.1f}"
        )
