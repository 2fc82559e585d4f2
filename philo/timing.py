"""Millisecond clock and a sleep that polls it."""

import time

_POLL_INTERVAL = 0.00007


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(_POLL_INTERVAL)