"""Wall clock used to stamp log entries."""

import time


def current_time_millis() -> int:
    """Return the current UTC time as integer milliseconds since the epoch.

    Returns 0 if the system clock reads before the epoch.
    """
    return max(time.time_ns() // 1_000_000, 0)
