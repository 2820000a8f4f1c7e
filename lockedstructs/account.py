"""A running balance that many threads may change at once."""

from __future__ import annotations

import threading


class Account:
    """An integer balance guarded by a mutex; starts at zero."""

    def __init__(self) -> None:
        self._amount = 0
        self._lock = threading.Lock()

    @property
    def amount(self) -> int:
        """The current balance."""
        with self._lock:
            return self._amount

    def income(self, amount: int) -> None:
        """Add ``amount`` to the balance."""
        with self._lock:
            self._amount += amount

    def expend(self, amount: int) -> None:
        """Subtract ``amount`` from the balance."""
        with self._lock:
            self._amount -= amount

    def __repr__(self) -> str:
        return f"{type(self).__name__}(amount={self.amount})"