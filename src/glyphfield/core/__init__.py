"""Core framework components for GLYPHFIELD."""

from .events import (
    EventBus,
    Event,
    EventType,
    pointer_move_event,
    pointer_leave_event,
    resize_event,
)

__all__ = [
    "EventBus",
    "Event",
    "EventType",
    "pointer_move_event",
    "pointer_leave_event",
    "resize_event",
]
