"""
Service layer for contributors.

A contributor profile is owned by the principal that created it.  Only
that principal may replace or delete it, and the same ownership guards
every quote that references the profile (see ``QuoteService``).

Every mutation runs validation and the ownership check to completion
before touching storage, so a rejected request leaves no trace, not
even a consumed identifier.
"""

from __future__ import annotations

import logging
from typing import List

from wisewords_api.app.core import clock
from wisewords_api.app.core.config import settings
from wisewords_api.app.core.errors import NotFoundError
from wisewords_api.app.schemas.contributor import Contributor, ContributorPayload
from wisewords_api.app.services import queries, validators
from wisewords_api.app.services.authorizer import check_owner
from wisewords_api.app.services.store import contributor_counter, contributor_store, store_lock


logger = logging.getLogger(__name__)


class ContributorService:
    """Service class for managing contributor profiles."""

    @classmethod
    async def add_contributor(cls, payload: ContributorPayload, caller: str) -> Contributor:
        """Create a profile owned by ``caller`` and return it."""
        validators.ensure_valid(validators.contributor_violations(payload))
        with store_lock:
            counter = contributor_counter()
            contributor = Contributor(
                id=counter.peek(),
                owner=caller,
                username=payload.username,
                email=payload.email,
                age=payload.age,
                created_at=clock.now(),
                updated_at=None,
            )
            validators.ensure_valid(
                validators.size_violations(contributor, settings.max_record_size)
            )
            contributor.id = counter.next_id()
            contributor_store().insert(contributor)
        logger.info("Caller %s created contributor %s", caller, contributor.id)
        return contributor

    @classmethod
    async def get_contributor(cls, contributor_id: int) -> Contributor:
        contributor = contributor_store().get(contributor_id)
        if contributor is None:
            raise NotFoundError(
                f"Searched but Contributor with id={contributor_id} not found"
            )
        return contributor

    @classmethod
    async def list_contributors(cls) -> List[Contributor]:
        return queries.list_all(contributor_store(), "No contributors found.")

    @classmethod
    async def update_contributor(
        cls, contributor_id: int, payload: ContributorPayload, caller: str
    ) -> Contributor:
        """Replace the editable fields of a profile owned by ``caller``.

        ``id``, ``owner`` and ``created_at`` are kept; ``updated_at`` is
        set to the current time.
        """
        validators.ensure_valid(validators.contributor_violations(payload))
        with store_lock:
            store = contributor_store()
            current = store.get(contributor_id)
            if current is None:
                raise NotFoundError(
                    f"couldn't update a Contributor with id={contributor_id}. Contributor not found"
                )
            check_owner(current, caller)
            updated = current.model_copy(
                update={
                    "username": payload.username,
                    "email": payload.email,
                    "age": payload.age,
                    "updated_at": clock.now(),
                }
            )
            validators.ensure_valid(
                validators.size_violations(updated, settings.max_record_size)
            )
            store.insert(updated)
        logger.info("Caller %s updated contributor %s", caller, contributor_id)
        return updated

    @classmethod
    async def delete_contributor(cls, contributor_id: int, caller: str) -> Contributor:
        """Delete a profile owned by ``caller`` and return the removed record.

        Quotes referencing the profile are left in place.
        """
        with store_lock:
            store = contributor_store()
            current = store.get(contributor_id)
            if current is None:
                raise NotFoundError(
                    f"couldn't delete a Contributor with id={contributor_id}. Contributor not found"
                )
            check_owner(current, caller)
            removed = store.remove(contributor_id)
        logger.info("Caller %s deleted contributor %s", caller, contributor_id)
        return removed
