"""Log entry model and its wire representation."""

from dataclasses import dataclass, field
from typing import Optional

from service_logging import clock
from service_logging.severity import Severity

# Optional attributes and the camelCase keys the service expects for them
OPTIONAL_FIELDS = {
    "category": "category",
    "class_name": "className",
    "method_name": "methodName",
    "thread_id": "threadId",
}


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Usually built with :func:`service_logging.fields.log`, which puts the
    json-encoded key/value pairs (sorted by key) into ``text``.
    """

    severity: Severity = Severity.DEBUG
    text: str = ""
    category: Optional[str] = None
    class_name: Optional[str] = None
    method_name: Optional[str] = None
    thread_id: Optional[str] = None
    # Milliseconds since epoch in UTC, stamped when the entry is created
    timestamp: int = field(
        default_factory=lambda: clock.current_time_millis(), init=False
    )

    def __str__(self) -> str:
        # omits the optional fields for brevity
        return f"{self.timestamp} {self.severity} {self.text}"


def entry_to_dict(entry: LogEntry) -> dict:
    """Convert a LogEntry to the dict sent to the logging service.

    Optional fields that are unset are left out rather than sent as null.
    """
    data = {
        "timestamp": entry.timestamp,
        "severity": int(entry.severity),
        "text": entry.text,
    }
    for attr, key in OPTIONAL_FIELDS.items():
        value = getattr(entry, attr)
        if value is not None:
            data[key] = value
    return data
