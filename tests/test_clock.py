"""Tests for the millisecond wall clock."""

import time

from service_logging import clock


def test_returns_epoch_millis(monkeypatch):
    monkeypatch.setattr(time, "time_ns", lambda: 1_700_000_000_123_456_789)
    assert clock.current_time_millis() == 1_700_000_000_123


def test_before_epoch_is_zero(monkeypatch):
    monkeypatch.setattr(time, "time_ns", lambda: -5_000_000_000)
    assert clock.current_time_millis() == 0
