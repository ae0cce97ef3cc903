"""
Service layer for quotes.

Quotes have no owner of their own.  Writing one requires owning the
contributor it references: on create that is the payload's
``contributor_id``; on update and delete it is the contributor the
stored quote currently points at.  An update may re-point a quote to
another contributor as long as that contributor exists.
"""

from __future__ import annotations

import logging
from typing import List

from wisewords_api.app.core import clock
from wisewords_api.app.core.config import settings
from wisewords_api.app.core.errors import NotFoundError
from wisewords_api.app.schemas.contributor import Contributor
from wisewords_api.app.schemas.quote import Quote, QuotePayload
from wisewords_api.app.services import queries, validators
from wisewords_api.app.services.authorizer import check_owner
from wisewords_api.app.services.store import (
    contributor_store,
    quote_counter,
    quote_store,
    store_lock,
)


logger = logging.getLogger(__name__)


def _referenced_contributor(contributor_id: int) -> Contributor:
    contributor = contributor_store().get(contributor_id)
    if contributor is None:
        raise NotFoundError(f"couldn't find a contributor with id={contributor_id}")
    return contributor


class QuoteService:
    """Service class for managing quotes and the queries over them."""

    @classmethod
    async def add_quote(cls, payload: QuotePayload, caller: str) -> Quote:
        """Create a quote under a contributor owned by ``caller``."""
        validators.ensure_valid(validators.quote_violations(payload))
        with store_lock:
            check_owner(_referenced_contributor(payload.contributor_id), caller)
            counter = quote_counter()
            quote = Quote(
                id=counter.peek(),
                contributor_id=payload.contributor_id,
                author=payload.author,
                text=payload.text,
                category=payload.category,
                created_at=clock.now(),
                updated_at=None,
            )
            validators.ensure_valid(
                validators.size_violations(quote, settings.max_record_size)
            )
            quote.id = counter.next_id()
            quote_store().insert(quote)
        logger.info(
            "Caller %s created quote %s for contributor %s",
            caller,
            quote.id,
            quote.contributor_id,
        )
        return quote

    @classmethod
    async def get_quote(cls, quote_id: int) -> Quote:
        quote = quote_store().get(quote_id)
        if quote is None:
            raise NotFoundError(f"Searched but Quote with id={quote_id} not found")
        return quote

    @classmethod
    async def list_quotes(cls) -> List[Quote]:
        return queries.list_all(quote_store(), "No quotes found.")

    @classmethod
    async def recent_quotes(cls) -> List[Quote]:
        return queries.recent(quote_store(), settings.recent_quotes_limit)

    @classmethod
    async def quotes_by_category(cls, category: str) -> List[Quote]:
        return queries.by_category(quote_store(), category)

    @classmethod
    async def update_quote(cls, quote_id: int, payload: QuotePayload, caller: str) -> Quote:
        """Replace a quote's fields.

        Ownership is checked against the contributor the quote belongs
        to before the update, and only then is the new
        ``contributor_id`` resolved.
        """
        validators.ensure_valid(validators.quote_violations(payload))
        with store_lock:
            store = quote_store()
            current = store.get(quote_id)
            if current is None:
                raise NotFoundError(
                    f"couldn't update a Quote with id={quote_id}. Quote not found"
                )
            check_owner(_referenced_contributor(current.contributor_id), caller)
            if payload.contributor_id != current.contributor_id:
                _referenced_contributor(payload.contributor_id)
            updated = current.model_copy(
                update={
                    "contributor_id": payload.contributor_id,
                    "author": payload.author,
                    "text": payload.text,
                    "category": payload.category,
                    "updated_at": clock.now(),
                }
            )
            validators.ensure_valid(
                validators.size_violations(updated, settings.max_record_size)
            )
            store.insert(updated)
        logger.info("Caller %s updated quote %s", caller, quote_id)
        return updated

    @classmethod
    async def delete_quote(cls, quote_id: int, caller: str) -> Quote:
        with store_lock:
            store = quote_store()
            current = store.get(quote_id)
            if current is None:
                raise NotFoundError(
                    f"couldn't delete a Quote with id={quote_id}. Quote not found"
                )
            check_owner(_referenced_contributor(current.contributor_id), caller)
            removed = store.remove(quote_id)
        logger.info("Caller %s deleted quote %s", caller, quote_id)
        return removed
