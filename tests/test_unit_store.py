"""
Unit tests for identity counters, entity stores and storage backends.

Tests cover:
- Monotonic identifiers that are never reused
- Insert/get/scan/remove semantics of EntityStore
- SQLiteBackend persistence across backend instances
- Corrupt payloads surfacing as StorageFault
"""

import pytest

from wisewords_api.app.core.db import health_check
from wisewords_api.app.core.errors import StorageFault
from wisewords_api.app.core.storage import InMemoryBackend, SQLiteBackend
from wisewords_api.app.schemas.quote import Quote
from wisewords_api.app.services.store import EntityStore, IdCounter, QUOTE_REGION


def make_quote(quote_id: int, created_at: int = 1) -> Quote:
    return Quote(
        id=quote_id,
        contributor_id=1,
        author="Seneca",
        text="Luck is what happens when preparation meets opportunity.",
        category="stoicism",
        created_at=created_at,
    )


class TestIdCounter:
    def test_starts_at_one_and_increases(self):
        counter = IdCounter(InMemoryBackend(), "quote_id")
        assert counter.current() == 0
        assert counter.peek() == 1
        assert [counter.next_id() for _ in range(3)] == [1, 2, 3]
        assert counter.peek() == 4

    def test_counters_are_independent(self):
        backend = InMemoryBackend()
        first = IdCounter(backend, "contributor_id")
        second = IdCounter(backend, "quote_id")
        first.next_id()
        first.next_id()
        assert second.next_id() == 1

    def test_ids_not_reused_after_delete(self):
        backend = InMemoryBackend()
        counter = IdCounter(backend, "quote_id")
        store = EntityStore(backend, QUOTE_REGION, Quote)
        store.insert(make_quote(counter.next_id()))
        store.remove(1)
        assert counter.next_id() == 2


class TestEntityStore:
    def test_get_missing_returns_none(self):
        store = EntityStore(InMemoryBackend(), QUOTE_REGION, Quote)
        assert store.get(42) is None
        assert store.remove(42) is None

    def test_insert_replaces_existing(self):
        store = EntityStore(InMemoryBackend(), QUOTE_REGION, Quote)
        store.insert(make_quote(1))
        store.insert(make_quote(1).model_copy(update={"text": "Replaced."}))
        assert store.get(1).text == "Replaced."
        assert store.count() == 1

    def test_scan_is_in_key_order(self):
        store = EntityStore(InMemoryBackend(), QUOTE_REGION, Quote)
        for quote_id in (3, 1, 2):
            store.insert(make_quote(quote_id))
        assert [key for key, _ in store.scan()] == [1, 2, 3]

    def test_remove_returns_prior_value(self):
        store = EntityStore(InMemoryBackend(), QUOTE_REGION, Quote)
        store.insert(make_quote(7))
        removed = store.remove(7)
        assert removed == make_quote(7)
        assert store.get(7) is None

    def test_corrupt_payload_is_storage_fault(self):
        backend = InMemoryBackend()
        backend.put(QUOTE_REGION, 1, b"{not json")
        store = EntityStore(backend, QUOTE_REGION, Quote)
        with pytest.raises(StorageFault):
            store.get(1)


class TestSQLiteBackend:
    def test_records_and_counters_persist(self, tmp_path):
        db_path = str(tmp_path / "wisewords.db")
        backend = SQLiteBackend(db_path)
        counter = IdCounter(backend, "quote_id")
        store = EntityStore(backend, QUOTE_REGION, Quote)
        store.insert(make_quote(counter.next_id()))
        store.insert(make_quote(counter.next_id()))

        reopened = SQLiteBackend(db_path)
        assert IdCounter(reopened, "quote_id").next_id() == 3
        reopened_store = EntityStore(reopened, QUOTE_REGION, Quote)
        assert [key for key, _ in reopened_store.scan()] == [1, 2]
        assert reopened_store.count() == 2
        assert health_check(db_path)

    def test_pop_deletes_row(self, tmp_path):
        backend = SQLiteBackend(str(tmp_path / "wisewords.db"))
        backend.put("quotes", 5, b"payload")
        assert backend.pop("quotes", 5) == b"payload"
        assert backend.pop("quotes", 5) is None
        assert backend.items("quotes") == []

    def test_regions_do_not_overlap(self, tmp_path):
        backend = SQLiteBackend(str(tmp_path / "wisewords.db"))
        backend.put("quotes", 1, b"quote")
        backend.put("contributors", 1, b"contributor")
        assert backend.get("quotes", 1) == b"quote"
        assert backend.get("contributors", 1) == b"contributor"

    def test_keys_beyond_sqlite_range_find_nothing(self, tmp_path):
        backend = SQLiteBackend(str(tmp_path / "wisewords.db"))
        for key in (2**63, 2**64 - 1):
            assert backend.get("contributors", key) is None
            assert backend.pop("contributors", key) is None

    def test_put_beyond_sqlite_range_is_storage_fault(self, tmp_path):
        backend = SQLiteBackend(str(tmp_path / "wisewords.db"))
        with pytest.raises(StorageFault):
            backend.put("quotes", 2**63, b"payload")
