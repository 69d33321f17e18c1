"""Demo client: records a few structured logs and flushes them once."""

import asyncio
import logging
import sys

from service_logging import (
    ConsoleLogger,
    CoralogixLogger,
    LogQueue,
    Severity,
    ServiceLoggingError,
    flush_queue,
    log,
)
from service_logging.config import (
    ClientConfig,
    load_client_config,
    load_coralogix_config,
    load_yaml_config,
)

logger = logging.getLogger(__name__)

SAMPLE_LOGS = [
    (Severity.DEBUG, {"text": "Cache warmed", "category": "startup"}),
    (Severity.INFO, {"method": "GET", "url": "https://example.com", "status": 200}),
    (Severity.WARNING, {"method": "POST", "url": "https://example.com/upload", "status": 413}),
    (Severity.ERROR, {"text": "Upstream timeout", "class_name": "Fetcher", "method_name": "get"}),
]


def record_sample_logs(queue: LogQueue, min_severity: Severity) -> None:
    """Append the sample entries at or above *min_severity* to the queue."""
    for severity, fields in SAMPLE_LOGS:
        if severity >= min_severity:
            log(queue, severity, **fields)


async def ship(config: ClientConfig, queue: LogQueue) -> int:
    """Flush the queue to the configured sink. Returns the number of entries sent."""
    if config.sink == "coralogix":
        cx_config = load_coralogix_config(load_yaml_config(config.config_file))
        if not cx_config.api_key:
            raise ValueError("CORALOGIX_API_KEY is not set")
        async with CoralogixLogger(cx_config) as sink:
            return await flush_queue(queue, sink, config.subsystem)
    return await flush_queue(queue, ConsoleLogger(), config.subsystem)


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_client_config(argv)
    except ServiceLoggingError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    queue = LogQueue()
    record_sample_logs(queue, config.min_severity)

    logger.info(
        "Flushing %d log entries to %s (subsystem=%s)",
        len(queue),
        config.sink,
        config.subsystem,
    )
    try:
        sent = asyncio.run(ship(config, queue))
    except (ServiceLoggingError, ValueError) as exc:
        logger.error("Failed to send logs: %s", exc)
        return 1

    logger.info("Sent %d log entries", sent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
