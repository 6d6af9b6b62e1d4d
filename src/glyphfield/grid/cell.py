"""
Per-cell animation state machine.

States:
    IDLE: Static glyph in the base colour; waiting for pointer proximity
    SCRAMBLING: Glyph flips through random symbols on each scramble tick
    SETTLING: Original glyph restored; colour fades from hover to base
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional
import logging

from glyphfield.animation.color import Color, interpolate_color
from glyphfield.animation.easing import EasingFunc, ease_out_cubic

logger = logging.getLogger(__name__)


class CellState(Enum):
    """Cell animation states."""
    IDLE = auto()
    SCRAMBLING = auto()
    SETTLING = auto()


# Valid state transitions
VALID_TRANSITIONS: frozenset[tuple[CellState, CellState]] = frozenset({
    (CellState.IDLE, CellState.SCRAMBLING),
    (CellState.SCRAMBLING, CellState.SETTLING),
    (CellState.SETTLING, CellState.IDLE),
})


@dataclass
class Cell:
    """
    One grid position.

    Attributes:
        symbol: Currently displayed glyph
        color: Currently displayed colour
        state: Animation state
        original_symbol: Glyph to restore after scrambling; set only while animating
        remaining_scramble_ticks: Countdown while scrambling
        settle_start: Timestamp (ms) at which settling began
    """
    symbol: str
    color: Color
    state: CellState = CellState.IDLE
    original_symbol: Optional[str] = None
    remaining_scramble_ticks: int = 0
    settle_start: float = 0.0

    @property
    def is_idle(self) -> bool:
        return self.state is CellState.IDLE

    def can_transition(self, to_state: CellState) -> bool:
        """Check if transition to given state is valid."""
        return (self.state, to_state) in VALID_TRANSITIONS

    def transition(self, to_state: CellState) -> bool:
        """
        Attempt to move to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid cell transition: {self.state.name} -> {to_state.name}"
            )
            return False
        self.state = to_state
        return True

    def begin_scramble(self, ticks: int, hover: Color) -> bool:
        """
        Arm the scramble countdown.

        Only idle cells accept activation; a cell that is already animating
        keeps its countdown and timers untouched.

        Returns:
            True if the cell was activated
        """
        if not self.is_idle:
            return False
        self.transition(CellState.SCRAMBLING)
        self.original_symbol = self.symbol
        self.remaining_scramble_ticks = ticks
        self.color = hover
        return True

    def scramble_tick(self, symbol: str, hover: Color, now: float) -> bool:
        """
        Advance one scramble tick.

        Args:
            symbol: Freshly drawn random glyph
            hover: Hover colour
            now: Timestamp of this tick in milliseconds

        Returns:
            True if the countdown ran out and the cell started settling
        """
        self.symbol = symbol
        self.color = hover
        self.remaining_scramble_ticks -= 1
        if self.remaining_scramble_ticks > 0:
            return False

        self.symbol = self.original_symbol
        self.settle_start = now
        return self.transition(CellState.SETTLING)

    def settle(
        self,
        now: float,
        duration_ms: float,
        hover: Color,
        base: Color,
        easing: EasingFunc | str = ease_out_cubic,
    ) -> bool:
        """
        Advance the colour fade.

        Returns:
            True if the fade completed and the cell is idle again
        """
        if duration_ms <= 0:
            t = 1.0
        else:
            t = (now - self.settle_start) / duration_ms
        self.color = interpolate_color(hover, base, t, easing)

        if t < 1:
            return False

        self.color = base
        self.original_symbol = None
        return self.transition(CellState.IDLE)
