"""A chained hash table with one mutex per bucket."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

DEFAULT_BUCKET_COUNT = 13


@dataclass
class _Entry:
    key: int
    value: Any


@dataclass
class _Bucket:
    lock: threading.Lock = field(default_factory=threading.Lock)
    chain: list[_Entry] = field(default_factory=list)


class LockedHashTable:
    """Integer-keyed table; each bucket is a chain locked on its own.

    A new key is placed at the head of its chain.  ``set_key`` moves an entry
    to the tail of the chain for its new key, without merging with an entry
    that may already hold that key; lookups report the last match in a chain.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self._buckets = [_Bucket() for _ in range(bucket_count)]

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket_index(self, key: int) -> int:
        """The bucket a key hashes to."""
        return key % len(self._buckets)

    def get(self, key: int, default: Any = None) -> Any:
        """The value stored under ``key``, or ``default`` if there is none."""
        bucket = self._buckets[self.bucket_index(key)]
        found = default
        with bucket.lock:
            for entry in bucket.chain:
                if entry.key == key:
                    found = entry.value
        return found

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing the first existing match."""
        bucket = self._buckets[self.bucket_index(key)]
        with bucket.lock:
            for entry in bucket.chain:
                if entry.key == key:
                    entry.value = value
                    return
            bucket.chain.insert(0, _Entry(key, value))

    def set_key(self, key: int, new_key: int) -> None:
        """Move the entry under ``key`` so that it is stored under ``new_key``.

        Raises KeyError if ``key`` is not present.
        """
        source = self._buckets[self.bucket_index(key)]
        with source.lock:
            position = next(
                (pos for pos, entry in enumerate(source.chain) if entry.key == key),
                None,
            )
            if position is None:
                raise KeyError(key)
            value = source.chain.pop(position).value

        target = self._buckets[self.bucket_index(new_key)]
        with target.lock:
            target.chain.append(_Entry(new_key, value))

    def bucket_items(self, index: int) -> list[tuple[int, Any]]:
        """A snapshot of one bucket's chain as (key, value) pairs, head first."""
        bucket = self._buckets[index]
        with bucket.lock:
            return [(entry.key, entry.value) for entry in bucket.chain]