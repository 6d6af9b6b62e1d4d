"""Animation engine and frame scheduling for GLYPHFIELD."""

from glyphfield.engine.scheduler import (
    Debouncer,
    FrameScheduler,
    ScrambleCadence,
    monotonic_ms,
)
from glyphfield.engine.engine import GlyphFieldEngine

__all__ = [
    "Debouncer",
    "FrameScheduler",
    "ScrambleCadence",
    "monotonic_ms",
    "GlyphFieldEngine",
]
