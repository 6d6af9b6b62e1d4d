"""Random glyph source for scrambling cells."""

import random
from typing import Optional

DEFAULT_SYMBOLS = "@#%^&*[]{}~<>|/\\+-=.:;!?$"


class GlyphSource:
    """Draws symbols uniformly from a fixed alphabet.

    Holds no state besides the random generator, so sharing one source
    across the whole grid is safe. Pass a seeded ``random.Random`` for
    reproducible sequences.
    """

    def __init__(self, symbols: str = DEFAULT_SYMBOLS, rng: Optional[random.Random] = None) -> None:
        if not symbols:
            raise ValueError("symbol alphabet must not be empty")
        self._symbols = tuple(symbols)
        self._rng = rng or random.Random()

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    def next(self) -> str:
        """Return a random symbol."""
        return self._rng.choice(self._symbols)

    def jitter(self, upper: int) -> int:
        """Return a random integer in ``[0, upper)``; 0 when ``upper`` <= 0."""
        if upper <= 0:
            return 0
        return self._rng.randrange(upper)
