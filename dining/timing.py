"""Millisecond clock and a sleep that does not undershoot."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: float) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    if ms <= 0:
        return
    target = ms / 1000
    step = max(ms / 10_000, 0.0001)
    start = time.monotonic()
    while time.monotonic() - start < target:
        time.sleep(step)