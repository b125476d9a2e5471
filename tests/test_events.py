"""Tests for the event bus."""

import pytest

from modules.events import EventBus, LogEvent, LOG, STATUS_UPDATE


def test_delivers_in_emission_order_to_every_subscriber():
    bus = EventBus()
    first, second = [], []
    bus.subscribe(LOG, first.append)
    bus.subscribe(LOG, second.append)

    bus.log("INFO", "one")
    bus.log("WARN", "two")

    assert first == [LogEvent("INFO", "one"), LogEvent("WARN", "two")]
    assert second == first


def test_late_subscriber_misses_earlier_events():
    bus = EventBus()
    bus.status(status="early")
    received = []
    bus.subscribe(STATUS_UPDATE, received.append)

    bus.status(walletsCount=2)

    assert received == [{"walletsCount": 2}]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received = []
    bus.subscribe(LOG, received.append)
    bus.unsubscribe(LOG, received.append)

    bus.log("INFO", "nobody listens")

    assert received == []


def test_emit_without_subscribers_is_noop():
    EventBus().emit("unknown", {"x": 1})


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        LogEvent(level="DEBUG", message="nope")


def test_buses_are_independent():
    left, right = EventBus(), EventBus()
    received = []
    left.subscribe(LOG, received.append)

    right.log("INFO", "elsewhere")

    assert received == []
