"""Helpers for running and pacing worker threads."""

from __future__ import annotations

import random
import threading
import time
from types import TracebackType


class ThreadGuard:
    """Context manager that joins a thread when the block is left."""

    def __init__(self, thread: threading.Thread) -> None:
        self._thread = thread

    def __enter__(self) -> threading.Thread:
        return self._thread

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        started = self._thread.ident is not None
        if started and self._thread is not threading.current_thread():
            self._thread.join()


def random_sleep(low_ms: int = 1, high_ms: int = 100) -> int:
    """Sleep a random whole number of milliseconds in [low_ms, high_ms]; return it."""
    if low_ms > high_ms:
        raise ValueError("low_ms must not exceed high_ms")
    if low_ms < 0:
        raise ValueError("sleep time must not be negative")
    delay = random.randint(low_ms, high_ms)
    time.sleep(delay / 1000)
    return delay