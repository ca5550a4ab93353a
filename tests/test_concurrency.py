"""
Concurrency tests - all store access goes through one lock, so concurrent
commands behave like some sequential order with nothing lost.
"""

import threading
from dataclasses import asdict
from concurrent.futures import ThreadPoolExecutor

from conftest import make_event, make_password


def test_two_concurrent_add_event_calls_both_persist(commands):
    barrier = threading.Barrier(2)
    errors = []

    def add(event_id):
        event = asdict(make_event(id=event_id))
        barrier.wait()
        try:
            commands.invoke("add_event", {"event": event})
        except Exception as e:  # collected for the assertion below
            errors.append(e)

    threads = [threading.Thread(target=add, args=(event_id,)) for event_id in ("e1", "e2")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert sorted(e["id"] for e in commands.invoke("list_events")) == ["e1", "e2"]


def test_many_writers_lose_nothing(store):
    ids = [f"p{i:03d}" for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda pid: store.passwords.add(make_password(id=pid)), ids))

    assert store.passwords.count() == len(ids)
    assert sorted(p.id for p in store.passwords.list()) == ids


def test_readers_and_writers_interleave_cleanly(store):
    def write(i):
        store.settings.set("counter", str(i))
        store.events.add(make_event(id=f"e{i}"))
        return store.events.list()

    with ThreadPoolExecutor(max_workers=6) as pool:
        snapshots = list(pool.map(write, range(60)))

    # every read saw a consistent table: distinct ids, sorted order
    for snapshot in snapshots:
        ids = [e.id for e in snapshot]
        assert len(ids) == len(set(ids))
        keys = [(e.start_date, e.id) for e in snapshot]
        assert keys == sorted(keys)

    assert store.events.count() == 60
    assert store.settings.count() == 1
    assert store.settings.get("counter") in {str(i) for i in range(60)}


def test_concurrent_duplicate_adds_yield_one_winner(store):
    outcomes = []
    lock = threading.Lock()

    def add(_):
        try:
            store.passwords.add(make_password(id="same"))
            result = "ok"
        except Exception as e:
            result = type(e).__name__
        with lock:
            outcomes.append(result)

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(add, range(8)))

    assert outcomes.count("ok") == 1
    assert outcomes.count("ConflictError") == 7
    assert store.passwords.count() == 1
