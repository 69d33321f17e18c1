"""Aggregate structured logs in memory and send them to a logging service.

Contains loggers for Coralogix (HTTP) and the console.
"""

__version__ = "0.4.0"

from service_logging.severity import LogLevel, Severity
from service_logging.errors import (
    BackendError,
    EncodingError,
    ParseError,
    ServiceLoggingError,
    TransportError,
)
from service_logging.models import LogEntry, entry_to_dict
from service_logging.fields import AppendsLog, create_log_entry, log
from service_logging.log_queue import LogQueue, SharedLogQueue
from service_logging.logger import Logger, flush_queue, send_logs
from service_logging.config import CoralogixConfig
from service_logging.coralogix import CoralogixLogger
from service_logging.console import ConsoleLogger

__all__ = [
    "AppendsLog",
    "BackendError",
    "ConsoleLogger",
    "CoralogixConfig",
    "CoralogixLogger",
    "EncodingError",
    "LogEntry",
    "LogLevel",
    "LogQueue",
    "Logger",
    "ParseError",
    "ServiceLoggingError",
    "Severity",
    "SharedLogQueue",
    "TransportError",
    "create_log_entry",
    "entry_to_dict",
    "flush_queue",
    "log",
    "send_logs",
]
