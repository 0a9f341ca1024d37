from __future__ import annotations

import threading
import time

from pokecatalog.domain.concurrency import KeyedLocks


def test_entries_are_released_after_use() -> None:
    locks: KeyedLocks[int] = KeyedLocks()

    with locks.hold(1):
        assert len(locks) == 1

    assert len(locks) == 0


def test_same_key_is_mutually_exclusive() -> None:
    locks: KeyedLocks[int] = KeyedLocks()
    order: list[str] = []
    entered = threading.Event()

    def hold_first() -> None:
        with locks.hold(7):
            entered.set()
            time.sleep(0.05)
            order.append("first")

    def hold_second() -> None:
        entered.wait()
        with locks.hold(7):
            order.append("second")

    threads = [threading.Thread(target=hold_first), threading.Thread(target=hold_second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert order == ["first", "second"]
    assert len(locks) == 0


def test_different_keys_do_not_block_each_other() -> None:
    locks: KeyedLocks[int] = KeyedLocks()
    acquired = threading.Event()

    def hold_other() -> None:
        with locks.hold(2):
            acquired.set()

    with locks.hold(1):
        thread = threading.Thread(target=hold_other)
        thread.start()
        assert acquired.wait(timeout=5)
        thread.join(timeout=5)
