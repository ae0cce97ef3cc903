"""
Unit tests for the read-only query engine.

Tests cover:
- list_all reporting an empty collection as NotFound
- recent ordering, truncation and tie handling
- Case-insensitive category filtering
"""

import pytest

from wisewords_api.app.core.errors import NotFoundError
from wisewords_api.app.core.storage import InMemoryBackend
from wisewords_api.app.schemas.quote import Quote
from wisewords_api.app.services import queries
from wisewords_api.app.services.store import EntityStore, QUOTE_REGION


@pytest.fixture
def store() -> EntityStore:
    return EntityStore(InMemoryBackend(), QUOTE_REGION, Quote)


def add(store: EntityStore, quote_id: int, created_at: int, category: str = "Wisdom") -> None:
    store.insert(
        Quote(
            id=quote_id,
            contributor_id=1,
            author="Ada",
            text=f"quote {quote_id}",
            category=category,
            created_at=created_at,
        )
    )


def test_list_all_empty_is_not_found(store):
    with pytest.raises(NotFoundError, match="No quotes found."):
        queries.list_all(store, "No quotes found.")


def test_list_all_returns_key_order(store):
    add(store, 2, 10)
    add(store, 1, 20)
    assert [q.id for q in queries.list_all(store, "none")] == [1, 2]


def test_recent_orders_by_created_at_desc(store):
    for quote_id, created_at in enumerate([5, 3, 9, 1, 7, 2], start=1):
        add(store, quote_id, created_at)
    assert [q.created_at for q in queries.recent(store)] == [9, 7, 5, 3, 2]


def test_recent_respects_limit(store):
    for quote_id in range(1, 4):
        add(store, quote_id, quote_id)
    assert [q.id for q in queries.recent(store, n=2)] == [3, 2]


def test_recent_ties_keep_key_order(store):
    add(store, 1, 5)
    add(store, 2, 5)
    add(store, 3, 5)
    assert [q.id for q in queries.recent(store)] == [1, 2, 3]


def test_recent_empty_is_not_found(store):
    with pytest.raises(NotFoundError):
        queries.recent(store)


def test_by_category_ignores_case(store):
    add(store, 1, 1, category="stoicism")
    add(store, 2, 2, category="Humor")
    add(store, 3, 3, category="STOICISM")
    assert [q.id for q in queries.by_category(store, "Stoicism")] == [1, 3]


def test_by_category_no_match_is_not_found(store):
    add(store, 1, 1, category="Humor")
    with pytest.raises(NotFoundError, match="No quotes found in category: Stoicism"):
        queries.by_category(store, "Stoicism")
