"""Severity levels understood by the logging service."""

from enum import IntEnum

from service_logging.errors import ParseError


class Severity(IntEnum):
    """Ordered log severity; the integer value is what goes on the wire."""

    DEBUG = 1       # Most verbose level, aka trace
    VERBOSE = 2
    INFO = 3        # Warnings plus major events
    WARNING = 4
    ERROR = 5
    CRITICAL = 6

    @classmethod
    def default(cls) -> "Severity":
        return cls.INFO

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Parse a severity name written lowercase, Capitalized or UPPERCASE.

        Raises ParseError for anything else, including mixed case.
        """
        try:
            return _SPELLINGS[value]
        except (KeyError, TypeError):
            raise ParseError(value) from None

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


# Alias kept for callers that think in terms of log levels
LogLevel = Severity

_SPELLINGS: dict[str, Severity] = {}
for _member in Severity:
    for _spelling in (_member.name.lower(), _member.name.capitalize(), _member.name):
        _SPELLINGS[_spelling] = _member
