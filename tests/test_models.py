"""Tests for the log entry model."""

import dataclasses
import time

import pytest

from service_logging.models import LogEntry, entry_to_dict
from service_logging.severity import Severity


def test_default_severity_is_debug():
    entry = LogEntry()
    assert entry.severity is Severity.DEBUG
    assert entry.text == ""
    assert entry.category is None


def test_auto_timestamp():
    before = time.time_ns() // 1_000_000
    entry = LogEntry()
    after = time.time_ns() // 1_000_000
    assert isinstance(entry.timestamp, int)
    assert before <= entry.timestamp <= after


def test_timestamp_comes_from_clock(fixed_clock):
    assert LogEntry().timestamp == fixed_clock


def test_timestamp_not_caller_supplied():
    with pytest.raises(TypeError):
        LogEntry(timestamp=5)


def test_entry_is_immutable():
    entry = LogEntry(text="hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.text = "changed"


def test_str_format(fixed_clock):
    entry = LogEntry(severity=Severity.INFO, text="started", category="boot")
    assert str(entry) == f"{fixed_clock} Info started"


def test_entry_to_dict_omits_unset_fields(fixed_clock):
    d = entry_to_dict(LogEntry(severity=Severity.WARNING, text="disk full"))
    assert d == {"timestamp": fixed_clock, "severity": 4, "text": "disk full"}
    assert None not in d.values()


def test_entry_to_dict_uses_camel_case(fixed_clock):
    entry = LogEntry(
        severity=Severity.ERROR,
        text="boom",
        category="db",
        class_name="Repo",
        method_name="save",
        thread_id="worker-1",
    )
    d = entry_to_dict(entry)
    assert d["category"] == "db"
    assert d["className"] == "Repo"
    assert d["methodName"] == "save"
    assert d["threadId"] == "worker-1"
    assert type(d["severity"]) is int
