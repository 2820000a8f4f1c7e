# lockedstructs

Small thread-safe data structures built on `threading` primitives.

- `lockedstructs.account.Account` is an integer balance guarded by a lock.
- `lockedstructs.blocking_list.BlockingList` is a FIFO list where `consume` waits until an item arrives.
- `lockedstructs.hash_table.LockedHashTable` is a chained hash table with one lock per bucket.
- `lockedstructs.threads.ThreadGuard` and `lockedstructs.threads.random_sleep` are helpers for writing threaded code and tests.

## Installation

```
pip install .
```

## Usage

### Account

The balance starts at zero. `income` adds to it and `expend` subtracts from it. The `amount` property reads it.

```python
import threading
from lockedstructs.account import Account

account = Account()
workers = [
    threading.Thread(target=account.income, args=(30,)),
    threading.Thread(target=account.income, args=(30,)),
    threading.Thread(target=account.expend, args=(10,)),
]
for worker in workers:
    worker.start()
for worker in workers:
    worker.join()

assert account.amount == 50
```

### BlockingList

`produce` appends at the tail and wakes one waiting consumer. `consume` removes the head and returns it. It blocks while the list is empty.

```python
from lockedstructs.blocking_list import BlockingList

items = BlockingList()
items.produce(1)
items.produce(2)
assert len(items) == 2
assert items.values() == [1, 2]   # snapshot, head first

assert items.consume() == 1
assert len(items) == 1
```

`consume` accepts an optional `timeout` in seconds. If that time passes and the list is still empty, it raises `TimeoutError`.

### LockedHashTable

Keys are integers. A key goes to bucket `key % bucket_count`, and there are 13 buckets by default.

When `insert` is given a new key, it puts the entry at the head of that bucket's chain. When the key is already there, `insert` replaces the value.

`set_key` moves an entry to the tail of the chain for its new key. It does not merge with an entry that already holds the new key. `get` returns the last match in a chain.

```python
from lockedstructs.hash_table import LockedHashTable

table = LockedHashTable()          # 13 buckets
table.insert(1, 11)
assert table.get(1) == 11
assert table.get(5) is None        # missing keys give the default
assert table.get(5, -1) == -1

table.set_key(1, 2)                # move the entry to a new key
assert table.get(2) == 11
assert table.bucket_items(table.bucket_index(1)) == []
assert table.bucket_items(table.bucket_index(2)) == [(2, 11)]
```

`set_key` raises `KeyError` when the key is not in the table. `LockedHashTable(bucket_count)` raises `ValueError` when `bucket_count` is less than 1.

### ThreadGuard and random_sleep

```python
import threading
from lockedstructs.threads import ThreadGuard, random_sleep

worker = threading.Thread(target=random_sleep)
worker.start()
with ThreadGuard(worker) as thread:
    pass                            # the thread is joined on leaving the block
```

`ThreadGuard` joins the thread when the block is left. It skips the join if the thread was never started, or if the block is being left on that same thread.

`random_sleep(low_ms=1, high_ms=100)` sleeps for a random whole number of milliseconds in that range and returns the number. It raises `ValueError` in two cases:

- `low_ms` exceeds `high_ms`;
- `low_ms` is negative.

## Scope

This is a library only. It has no command-line program, and it does not keep anything beyond the life of the objects you create.

## Running the tests

```
pip install .[test]
pytest
```