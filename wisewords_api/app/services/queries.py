"""
Read-only views over an entity store.

Every query scans the whole collection and recomputes its result; there
are no indexes or cached orderings.  An empty result is reported as
``NotFoundError`` rather than an empty list.
"""

from typing import List

from wisewords_api.app.core.errors import NotFoundError
from wisewords_api.app.schemas.quote import Quote
from wisewords_api.app.services.store import EntityStore, RecordT


def list_all(store: EntityStore[RecordT], empty_message: str) -> List[RecordT]:
    records = [record for _, record in store.scan()]
    if not records:
        raise NotFoundError(empty_message)
    return records


def recent(store: EntityStore[Quote], n: int = 5) -> List[Quote]:
    """Return the ``n`` most recently created quotes, newest first.

    ``sorted`` is stable, so quotes sharing a timestamp keep their key
    order.
    """
    quotes = [quote for _, quote in store.scan()]
    newest_first = sorted(quotes, key=lambda quote: quote.created_at, reverse=True)
    result = newest_first[:n]
    if not result:
        raise NotFoundError("No recent quotes found.")
    return result


def by_category(store: EntityStore[Quote], category: str) -> List[Quote]:
    wanted = category.lower()
    matches = [quote for _, quote in store.scan() if quote.category.lower() == wanted]
    if not matches:
        raise NotFoundError(f"No quotes found in category: {category}")
    return matches
