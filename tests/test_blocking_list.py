import random
import threading
import time

import pytest

from lockedstructs.blocking_list import BlockingList


def _run_all(threads):
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_init_is_empty():
    items = BlockingList()
    assert len(items) == 0
    assert items.values() == []


def test_basic_producers_then_consumers():
    items = BlockingList()
    _run_all([threading.Thread(target=items.produce, args=(tid,)) for tid in range(4)])
    assert len(items) == 4
    assert sorted(items.values()) == [0, 1, 2, 3]

    _run_all([threading.Thread(target=items.consume) for _ in range(4)])
    assert len(items) == 0
    assert items.values() == []


def test_mixed_concurrent():
    items = BlockingList()
    keys_per_thread = 10

    def work(tid):
        for i in range(keys_per_thread):
            items.produce(tid * i)
        for _ in range(keys_per_thread):
            items.consume()
        for i in range(keys_per_thread):
            items.produce(tid * i)

    _run_all([threading.Thread(target=work, args=(tid,)) for tid in range(4)])
    assert len(items) == 4 * keys_per_thread

    def drain():
        for _ in range(4 * keys_per_thread):
            items.consume()

    _run_all([threading.Thread(target=drain)])
    assert len(items) == 0
    assert items.values() == []


def test_long_running_producer_and_consumer():
    items = BlockingList()
    stop = threading.Event()

    def pause():
        time.sleep(random.randint(1, 20) / 1000)

    def produce():
        while not stop.is_set():
            items.produce(1)
            pause()

    def consume():
        while not stop.is_set() or len(items) != 0:
            try:
                items.consume(timeout=0.05)
            except TimeoutError:
                continue
            pause()

    producer = threading.Thread(target=produce)
    consumer = threading.Thread(target=consume)
    producer.start()
    consumer.start()
    time.sleep(1)
    stop.set()
    producer.join()
    consumer.join()

    assert len(items) == 0
    assert items.values() == []


def test_consume_is_fifo():
    items = BlockingList()
    for value in (5, 6, 7):
        items.produce(value)
    assert items.values() == [5, 6, 7]
    assert [items.consume() for _ in range(3)] == [5, 6, 7]


def test_consume_times_out_when_empty():
    items = BlockingList()
    with pytest.raises(TimeoutError):
        items.consume(timeout=0.01)


def test_consume_waits_for_producer():
    items = BlockingList()
    results = []
    consumer = threading.Thread(target=lambda: results.append(items.consume()))
    consumer.start()
    time.sleep(0.05)
    items.produce(42)
    consumer.join(timeout=5)
    assert results == [42]
    assert len(items) == 0