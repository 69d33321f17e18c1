"""Logger protocol: a destination that receives batches of log entries."""

import logging
from typing import Protocol, Sequence, runtime_checkable

from service_logging.log_queue import LogQueue
from service_logging.models import LogEntry

logger = logging.getLogger(__name__)

DEFAULT_SUBSYSTEM = "http"


@runtime_checkable
class Logger(Protocol):
    """A logging service that log batches are sent to.

    ``sub`` names the logical stream within the application (for example
    "http" or "background-job"). An empty batch must be accepted as a no-op.
    Each call is a single attempt; failures are raised to the caller.
    """

    async def send(self, sub: str, entries: Sequence[LogEntry]) -> None: ...


async def send_logs(
    entries: Sequence[LogEntry], sink: Logger, sub: str = DEFAULT_SUBSYSTEM
) -> None:
    """Send entries to the logger, skipping the call if there are none."""
    if entries:
        await sink.send(sub, entries)


async def flush_queue(
    queue: LogQueue, sink: Logger, sub: str = DEFAULT_SUBSYSTEM
) -> int:
    """Drain the queue and send its entries. Returns the number sent.

    The entries are removed from the queue before sending, so a failed send
    loses them unless the caller catches the error and re-queues the batch.
    """
    entries = queue.take()
    if not entries:
        return 0
    logger.debug("Flushing %d log entries to %s", len(entries), sub)
    await send_logs(entries, sink, sub)
    return len(entries)
