"""In-Memory Order Store — ledger semantics.

Tests cover:
    - add_item creates the entry and appends in order
    - remove_item drops the first occurrence only
    - NoOrderForTable vs NoMatchingItemForTable diagnostics
    - Emptied tables are pruned and report NoOrderForTable
    - Reads return copies
    - A poisoned ledger lock surfaces as LockFailureError
"""

import pytest

from restaurant_api.core.errors import (
    LockFailureError, NoMatchingItemForTableError, NoOrderForTableError,
)
from restaurant_api.infrastructure.order_store import InMemoryOrderStore


@pytest.fixture
def store():
    return InMemoryOrderStore(lock_timeout=0.1)


def test_add_item_creates_entry(store):
    store.add_item(1, 42)
    assert store.get_item_ids(1) == [42]


def test_add_item_keeps_insertion_order_and_duplicates(store):
    for item_id in (42, 43, 42):
        store.add_item(1, item_id)
    assert store.get_item_ids(1) == [42, 43, 42]


def test_add_item_accepts_any_table_id(store):
    store.add_item(9999, 1)
    assert store.get_item_ids(9999) == [1]


def test_remove_item_drops_first_occurrence_only(store):
    for item_id in (42, 43, 42):
        store.add_item(1, item_id)
    store.remove_item(1, 42)
    assert store.get_item_ids(1) == [43, 42]


def test_remove_item_without_entry_raises_no_order(store):
    with pytest.raises(NoOrderForTableError) as exc_info:
        store.remove_item(99, 1)
    assert exc_info.value.table_id == 99


def test_remove_item_missing_item_raises_no_matching(store):
    store.add_item(1, 42)
    with pytest.raises(NoMatchingItemForTableError) as exc_info:
        store.remove_item(1, 99)
    assert (exc_info.value.table_id, exc_info.value.item_id) == (1, 99)
    assert store.get_item_ids(1) == [42]


def test_removing_last_item_prunes_entry(store):
    store.add_item(1, 42)
    store.remove_item(1, 42)
    with pytest.raises(NoOrderForTableError):
        store.get_item_ids(1)
    with pytest.raises(NoOrderForTableError):
        store.remove_item(1, 42)


def test_get_item_ids_without_entry_raises_no_order(store):
    with pytest.raises(NoOrderForTableError):
        store.get_item_ids(99)


def test_get_item_ids_returns_copy(store):
    store.add_item(1, 42)
    ids = store.get_item_ids(1)
    ids.append(7)
    assert store.get_item_ids(1) == [42]


def test_get_item_id_checks_presence(store):
    store.add_item(1, 42)
    assert store.get_item_id(1, 42) == 42


def test_get_item_id_missing_item_raises_no_matching(store):
    store.add_item(1, 42)
    with pytest.raises(NoMatchingItemForTableError):
        store.get_item_id(1, 99)


def test_get_item_id_without_entry_raises_no_matching(store):
    with pytest.raises(NoMatchingItemForTableError):
        store.get_item_id(1, 99)


def test_poisoned_ledger_raises_lock_failure(store):
    with pytest.raises(RuntimeError):
        with store._lock.hold():
            raise RuntimeError("crash")
    with pytest.raises(LockFailureError):
        store.add_item(1, 42)
    store._lock.clear_poison()
    store.add_item(1, 42)
    assert store.get_item_ids(1) == [42]
