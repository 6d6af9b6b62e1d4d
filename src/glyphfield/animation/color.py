"""RGB colour value type and colour interpolation.

Colours travel through the engine as :class:`Color` values. Hex strings only
appear at the edges: settings parse them, logs and debug output print them.
"""

from dataclasses import dataclass
import math

from glyphfield.animation.easing import Easing, EasingFunc, get_easing, clamp_progress


def _round_half_up(value: float) -> int:
    # Channel rounding matches the browser's Math.round (halves go up)
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Color:
    """Three 8-bit colour channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rrggbb`` (or the short ``#rgb`` form).

        Raises:
            ValueError: If the string is not a hex colour
        """
        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex colour: {value!r}")
        try:
            packed = int(digits, 16)
        except ValueError:
            raise ValueError(f"Invalid hex colour: {value!r}") from None
        return cls((packed >> 16) & 255, (packed >> 8) & 255, packed & 255)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def lerp(self, other: "Color", t: float) -> "Color":
        """Linear blend towards ``other``; ``t`` is used as given."""
        return Color(
            _round_half_up(self.r + (other.r - self.r) * t),
            _round_half_up(self.g + (other.g - self.g) * t),
            _round_half_up(self.b + (other.b - self.b) * t),
        )

    def __str__(self) -> str:
        return self.to_hex()


def interpolate_color(
    start: Color,
    end: Color,
    t: float,
    easing: Easing | str | EasingFunc = Easing.LINEAR
) -> Color:
    """Interpolate between two colours.

    Args:
        start: Starting colour
        end: Ending colour
        t: Progress (0.0 to 1.0), clamped before easing
        easing: Easing function applied to the clamped progress

    Returns:
        Interpolated colour
    """
    eased_t = get_easing(easing)(clamp_progress(t))
    return start.lerp(end, eased_t)
