"""Tests for the ring-buffer logging helpers."""
import logging

from patternlab.core.logging import EventLog, RingBufferHandler, create_logger, ring_buffer


def test_ring_buffer_keeps_latest():
    logger = logging.Logger("patternlab.test.ring")
    handler = RingBufferHandler(max_entries=3)
    logger.addHandler(handler)
    for i in range(5):
        logger.info("event_%d", i, extra={"details": {"i": i}})

    events = handler.get_events()
    assert [e["event"] for e in events] == ["event_2", "event_3", "event_4"]
    assert events[-1]["details"] == {"i": 4}
    assert events[-1]["level"] == "INFO"

    handler.clear()
    assert handler.get_events() == []


def test_create_logger_reuses_handlers():
    first = create_logger("patternlab.test.create", ring_size=4)
    second = create_logger("patternlab.test.create", ring_size=99)
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False
    assert ring_buffer(first).max_entries == 4


def test_ring_buffer_lookup_missing():
    assert ring_buffer(logging.Logger("patternlab.test.none")) is None


def test_event_log_is_private_per_owner():
    logger = logging.getLogger("patternlab.test.events")
    a, b = EventLog(logger), EventLog(logger)
    a.log("opened", {"who": "a"})
    b.log("closed", level=logging.DEBUG)

    assert a.get_events()[0]["event"] == "opened"
    assert a.get_events()[0]["details"] == {"who": "a"}
    assert [e["event"] for e in b.get_events()] == ["closed"]
    assert b.get_events()[0]["level"] == "DEBUG"


def test_event_log_copies_details():
    details = {"k": 1}
    log = EventLog(logging.getLogger("patternlab.test.copy"))
    log.log("evt", details)
    details["k"] = 2
    assert log.get_events()[0]["details"] == {"k": 1}
