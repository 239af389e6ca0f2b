import dataclasses
import logging

import pytest

from swipescale.model.state import State, format_plain, parse_real, round_half_up


class TestFromRaw:
    @pytest.mark.parametrize("raw, expected", [
        (-5, 100.0),
        (99999, 6400.0),
        (100, 100.0),
        (6400, 6400.0),
        ("1600", 1600.0),
        (" 800 ", 800.0),
        ("abc", 100.0),
        ("", 100.0),
        (None, 100.0),
        (float("nan"), 100.0),
        (float("inf"), 6400.0),
        ("inf", 100.0),
        ("-Infinity", 100.0),
        (" nan ", 100.0),
    ])
    def test_dpi_is_clamped(self, raw, expected):
        assert State.from_raw(raw, 1, 1).dpi == expected

    @pytest.mark.parametrize("raw, expected", [
        (0, 0.01),
        ("junk", 0.01),
        (-1, 0.01),
        (0.5, 0.5),
        (7, 5.0),
    ])
    def test_sens_is_clamped(self, raw, expected):
        assert State.from_raw(800, raw, 1).sens == expected

    def test_inches_has_no_upper_bound(self):
        assert State.from_raw(800, 1, 250).inches == 250.0
        assert State.from_raw(800, 1, -3).inches == 0.0
        assert State.from_raw(800, 1, "x").inches == 0.0

    def test_parse_failure_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="swipescale"):
            State.from_raw("twelve", "1", "1")
        assert "twelve" in caplog.text


class TestEdpi:
    @pytest.mark.parametrize("dpi, sens", [(100, 0.01), (400, 2), (800, 1.5), (6400, 5), (1234, 0.37)])
    def test_edpi_is_product(self, dpi, sens):
        state = State.from_raw(dpi, sens, 1)
        assert state.edpi == dpi * sens

    def test_edpi_cannot_be_set(self):
        state = State.from_raw(800, 2, 1)
        with pytest.raises(AttributeError):
            state.edpi = 5  # type: ignore[misc]

    def test_state_is_immutable(self):
        state = State.from_raw(800, 2, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.dpi = 400  # type: ignore[misc]

    def test_with_inches_keeps_dpi_and_sens(self):
        state = State.from_raw(800, 2, 1).with_inches(0.25)
        assert (state.dpi, state.sens, state.inches) == (800, 2, 0.25)
        assert state.edpi == 1600


def test_title():
    state = State.from_raw(800, 0.5, 1.34)
    assert state.title() == "DPI 800 × Sens 0.5 → eDPI 400 | Inches 1.3"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2


def test_parse_real_accepts_numbers_and_text():
    assert parse_real(3) == 3.0
    assert parse_real("2.5") == 2.5
    assert parse_real(object()) == 0.0


@pytest.mark.parametrize("dpi, sens, expected", [
    (1234.5678, 0.375, "DPI 1234.5678 × Sens 0.375"),
    (800, 1, "DPI 800 × Sens 1"),
    (6400, 0.01, "DPI 6400 × Sens 0.01"),
])
def test_title_keeps_full_precision(dpi, sens, expected):
    assert State.from_raw(dpi, sens, 1).title().startswith(expected + " → ")


def test_format_plain():
    assert format_plain(800.0) == "800"
    assert format_plain(0.5) == "0.5"
    assert format_plain(1234.5678) == "1234.5678"
