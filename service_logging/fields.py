"""Build structured log entries from key/value pairs.

Keys named ``text``, ``category``, ``class_name``, ``method_name`` and
``thread_id`` are reserved: they fill the matching LogEntry attribute. All
other pairs are json-encoded (sorted by key, values stringified) into
``text``. If ``text`` is given explicitly the other pairs are dropped.

Keys should look like Python identifiers (no spaces or punctuation), which
keeps them usable as keyword arguments to :func:`log`.
"""

import json
import logging
from typing import Any, Iterable, Mapping, Protocol, Union

from service_logging.errors import EncodingError
from service_logging.models import LogEntry, OPTIONAL_FIELDS
from service_logging.severity import Severity

logger = logging.getLogger(__name__)

RESERVED_KEYS = ("text",) + tuple(OPTIONAL_FIELDS)

Fields = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


class AppendsLog(Protocol):
    """Anything that log entries can be appended to."""

    def append(self, entry: LogEntry) -> None: ...


def encode_fields(fields: Fields) -> str:
    """Encode fields as a compact JSON object with sorted keys.

    Later pairs overwrite earlier ones with the same key.
    """
    try:
        return json.dumps(
            dict(fields), sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc


def create_log_entry(severity: Severity, fields: Fields) -> LogEntry:
    """Create a LogEntry from a severity and ordered (key, value) pairs.

    Never raises for bad field values; an encoding failure ends up as a
    diagnostic message in ``text`` instead.
    """
    if isinstance(fields, Mapping):
        fields = fields.items()

    attrs: dict[str, str] = {}
    extra: list[tuple[Any, str]] = []
    has_text = False

    for key, value in fields:
        val = str(value)
        if key == "text":
            attrs["text"] = val
            has_text = True
        elif isinstance(key, str) and key in OPTIONAL_FIELDS:
            attrs[key] = val
        else:
            extra.append((key, val))

    if not has_text:
        try:
            attrs["text"] = encode_fields(extra)
        except EncodingError as exc:
            logger.debug("Could not encode log fields: %s", exc)
            attrs["text"] = f"error serializing message: {exc}"

    return LogEntry(severity=severity, **attrs)


def log(
    target: AppendsLog, severity: Severity, *pairs: tuple[str, Any], **fields: Any
) -> LogEntry:
    """Create a log entry and append it to *target*.

    Positional (key, value) pairs come first, then keyword fields, both in
    call order::

        log(queue, Severity.INFO, method="GET", url=url, status=200)
    """
    entry = create_log_entry(severity, list(pairs) + list(fields.items()))
    target.append(entry)
    return entry
