"""Easing functions for the settle fade.

All functions take a normalized time t (0.0 to 1.0) and return a normalized value.
The settle phase uses ``ease_out_cubic`` unless configured otherwise; the
other curves are the ease-out family, which keeps the fade decelerating into
the base colour.
"""

from enum import Enum, auto
from typing import Callable
import math


class Easing(Enum):
    """Available easing function types."""

    LINEAR = auto()
    EASE_OUT_QUAD = auto()
    EASE_OUT_CUBIC = auto()
    EASE_OUT_QUART = auto()
    EASE_OUT_SINE = auto()


# Type alias for easing functions
EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_quad(t: float) -> float:
    """Decelerate to zero velocity."""
    return 1 - (1 - t) * (1 - t)


def ease_out_cubic(t: float) -> float:
    """Decelerate to zero velocity (cubic)."""
    return 1 - pow(1 - t, 3)


def ease_out_quart(t: float) -> float:
    """Decelerate to zero velocity (quartic)."""
    return 1 - pow(1 - t, 4)


def ease_out_sine(t: float) -> float:
    """Decelerate using sine curve."""
    return math.sin((t * math.pi) / 2)


# Mapping from enum to function
_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_OUT_SINE: ease_out_sine,
}

# String names follow the enum, lower-cased ("ease_out_cubic")
_EASING_BY_NAME: dict[str, Easing] = {easing.name.lower(): easing for easing in Easing}


def get_easing(easing: Easing | str | EasingFunc) -> EasingFunc:
    """Get an easing function by enum or name.

    Args:
        easing: Easing enum value, string name (e.g., "ease_out_cubic"),
            or an already resolved easing function

    Returns:
        The easing function

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, str):
        easing_enum = _EASING_BY_NAME.get(easing.lower())
        if easing_enum is None:
            raise ValueError(f"Unknown easing function: {easing}")
        easing = easing_enum
    elif not isinstance(easing, Easing):
        return easing

    func = _EASING_FUNCTIONS.get(easing)
    if func is None:
        raise ValueError(f"No function registered for: {easing}")

    return func


def clamp_progress(t: float) -> float:
    """Clamp a progress fraction to [0, 1]."""
    return max(0.0, min(1.0, t))
