"""Tests for the event bus."""

import logging

from glyphfield.core.events import (
    Event,
    EventBus,
    EventType,
    pointer_leave_event,
    pointer_move_event,
    resize_event,
)


class TestEventBus:
    """Tests for EventBus dispatch."""

    def test_sync_dispatch(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.POINTER_MOVE, received.append)

        bus.emit(pointer_move_event(10, 20))
        bus.emit(pointer_leave_event())

        assert len(received) == 1
        assert received[0].data == {"x": 10, "y": 20}

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(EventType.RESIZE, received.append)
        unsubscribe()
        bus.emit(resize_event(100, 100))
        assert received == []

    def test_handler_error_logged(self, caplog):
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.SHUTDOWN, broken)
        bus.subscribe(EventType.SHUTDOWN, received.append)

        with caplog.at_level(logging.ERROR):
            bus.emit(Event(EventType.SHUTDOWN))

        assert "boom" in caplog.text
        assert len(received) == 1

    def test_emit_skips_async_handlers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(EventType.SHUTDOWN, handler)
        bus.emit(Event(EventType.SHUTDOWN))
        assert received == []

    def test_handler_may_unsubscribe_during_dispatch(self):
        bus = EventBus()
        received = []

        def once(event):
            received.append(event)
            unsubscribe()

        unsubscribe = bus.subscribe(EventType.POINTER_LEAVE, once)
        bus.emit(pointer_leave_event())
        bus.emit(pointer_leave_event())
        assert len(received) == 1


class TestEventQueue:
    """Tests for queued events drained once per frame."""

    async def test_queue_preserves_order(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.POINTER_MOVE, received.append)

        bus.queue_event(pointer_move_event(1, 1))
        bus.queue_event(pointer_move_event(2, 2))
        assert received == []

        await bus.process_queue()
        assert [e.data["x"] for e in received] == [1, 2]

    async def test_queue_runs_sync_and_async_handlers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(("async", event.type))

        bus.subscribe(EventType.RESIZE, handler)
        bus.subscribe(EventType.RESIZE, lambda e: received.append(("sync", e.type)))

        bus.queue_event(resize_event(320, 240, 2.0))
        await bus.process_queue()
        assert sorted(received) == [("async", EventType.RESIZE), ("sync", EventType.RESIZE)]

    async def test_async_handler_error_logged(self, caplog):
        bus = EventBus()

        async def broken(event):
            raise RuntimeError("async boom")

        bus.subscribe(EventType.RESIZE, broken)
        bus.queue_event(resize_event(1, 1))
        with caplog.at_level(logging.ERROR):
            await bus.process_queue()
        assert "async boom" in caplog.text

    async def test_empty_queue(self):
        await EventBus().process_queue()

    def test_resize_event_payload(self):
        event = resize_event(800, 600, 2.0)
        assert event.type is EventType.RESIZE
        assert event.data == {"width": 800, "height": 600, "pixel_ratio": 2.0}
