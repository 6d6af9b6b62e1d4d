"""Tests for the per-cell state machine."""

import logging

from glyphfield.animation.color import Color, interpolate_color
from glyphfield.animation.easing import Easing, linear
from glyphfield.grid.cell import Cell, CellState, VALID_TRANSITIONS

BASE = Color.from_hex("#e0e0e0")
HOVER = Color.from_hex("#888888")


def make_cell(symbol: str = "@") -> Cell:
    return Cell(symbol=symbol, color=BASE)


class TestTransitions:
    """Tests for transition validation."""

    def test_valid_cycle(self):
        cell = make_cell()
        assert cell.transition(CellState.SCRAMBLING)
        assert cell.transition(CellState.SETTLING)
        assert cell.transition(CellState.IDLE)
        assert cell.is_idle

    def test_invalid_transition_is_rejected(self, caplog):
        cell = make_cell()
        with caplog.at_level(logging.WARNING):
            assert not cell.transition(CellState.SETTLING)
        assert cell.state is CellState.IDLE
        assert "IDLE -> SETTLING" in caplog.text

    def test_no_self_transitions(self):
        for state in CellState:
            assert (state, state) not in VALID_TRANSITIONS


class TestScramble:
    """Tests for activation and scramble ticks."""

    def test_begin_scramble(self):
        cell = make_cell("#")
        assert cell.begin_scramble(6, HOVER)
        assert cell.state is CellState.SCRAMBLING
        assert cell.original_symbol == "#"
        assert cell.remaining_scramble_ticks == 6
        assert cell.color == HOVER

    def test_begin_scramble_ignored_when_animating(self):
        cell = make_cell("#")
        cell.begin_scramble(6, HOVER)
        cell.scramble_tick("%", HOVER, 10.0)

        assert not cell.begin_scramble(9, HOVER)
        assert cell.remaining_scramble_ticks == 5
        assert cell.original_symbol == "#"

    def test_tick_swaps_symbol(self):
        cell = make_cell("#")
        cell.begin_scramble(3, HOVER)
        assert not cell.scramble_tick("%", HOVER, 50.0)
        assert cell.symbol == "%"
        assert cell.remaining_scramble_ticks == 2

    def test_last_tick_restores_original(self):
        cell = make_cell("#")
        cell.begin_scramble(1, HOVER)
        assert cell.scramble_tick("%", HOVER, 120.0)
        assert cell.state is CellState.SETTLING
        assert cell.symbol == "#"
        assert cell.settle_start == 120.0

    def test_exactly_n_ticks(self):
        cell = make_cell("#")
        cell.begin_scramble(4, HOVER)
        results = [cell.scramble_tick("!", HOVER, float(i)) for i in range(4)]
        assert results == [False, False, False, True]

    def test_zero_ticks_settles_on_first_tick(self):
        cell = make_cell("#")
        cell.begin_scramble(0, HOVER)
        assert cell.scramble_tick("!", HOVER, 0.0)
        assert cell.symbol == "#"


class TestSettle:
    """Tests for the colour fade."""

    def _settling_cell(self, start: float = 1000.0) -> Cell:
        cell = make_cell("#")
        cell.begin_scramble(1, HOVER)
        cell.scramble_tick("%", HOVER, start)
        return cell

    def test_midway(self):
        cell = self._settling_cell()
        assert not cell.settle(1200.0, 400.0, HOVER, BASE, linear)
        assert cell.color == Color(180, 180, 180)
        assert cell.state is CellState.SETTLING

    def test_default_easing_is_ease_out_cubic(self):
        cell = self._settling_cell()
        cell.settle(1200.0, 400.0, HOVER, BASE)
        assert cell.color == Color(213, 213, 213)

    def test_matches_colour_interpolator(self):
        for elapsed in (0.0, 60.0, 130.0, 275.0, 399.0):
            cell = self._settling_cell(start=0.0)
            cell.settle(elapsed, 400.0, HOVER, BASE, linear)
            assert cell.color == interpolate_color(HOVER, BASE, elapsed / 400.0, Easing.LINEAR)

    def test_easing_by_name(self):
        cell = self._settling_cell()
        cell.settle(1200.0, 400.0, HOVER, BASE, "ease_out_cubic")
        assert cell.color == Color(213, 213, 213)

    def test_completes(self):
        cell = self._settling_cell()
        assert cell.settle(1400.0, 400.0, HOVER, BASE)
        assert cell.is_idle
        assert cell.color == BASE
        assert cell.original_symbol is None
        assert cell.symbol == "#"

    def test_overshoot_clamped(self):
        cell = self._settling_cell()
        assert cell.settle(99999.0, 400.0, HOVER, BASE)
        assert cell.color == BASE

    def test_colour_monotonic(self):
        cell = self._settling_cell(start=0.0)
        reds = []
        for now in range(0, 401, 16):
            cell.settle(float(now), 400.0, HOVER, BASE)
            reds.append(cell.color.r)
        assert reds == sorted(reds)
        assert HOVER.r <= reds[0] and reds[-1] <= BASE.r
