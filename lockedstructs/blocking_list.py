"""A FIFO list shared between producer and consumer threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class BlockingList:
    """Producers append at the tail; consumers take from the head, waiting when empty."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._cond = threading.Condition(threading.Lock())

    def produce(self, value: Any) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def consume(self, timeout: float | None = None) -> Any:
        """Remove and return the head, blocking until one is available.

        Raises TimeoutError if ``timeout`` seconds pass with the list still empty.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._items), timeout):
                raise TimeoutError("no value was produced in time")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def values(self) -> list[Any]:
        """A snapshot of the held values, head first."""
        with self._cond:
            return list(self._items)