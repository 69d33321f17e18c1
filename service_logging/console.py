"""Logger that writes entries to a console stream."""

import sys
from typing import Optional, Sequence, TextIO

from service_logging.models import LogEntry


class ConsoleLogger:
    """Writes each entry as ``<timestamp> <sub> <Severity> <text>``.

    The stream defaults to whatever ``sys.stdout`` is at send time; pass any
    text stream (a browser console bridge, a file, ``io.StringIO``) to write
    somewhere else.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @classmethod
    def init(cls, stream: Optional[TextIO] = None) -> "ConsoleLogger":
        return cls(stream)

    async def send(self, sub: str, entries: Sequence[LogEntry]) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        for e in entries:
            print(f"{e.timestamp} {sub} {e.severity} {e.text}", file=stream)
        if entries:
            stream.flush()
