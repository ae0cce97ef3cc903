"""
Contributor endpoints for API v1.

Reading profiles is public.  Creating, replacing and deleting a profile
requires a bearer token; the token subject becomes the owner on create
and must match the owner on replace and delete.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from wisewords_api.app.core.errors import ServiceError
from wisewords_api.app.core.security import get_current_principal
from wisewords_api.app.schemas.contributor import Contributor, ContributorPayload
from wisewords_api.app.services.contributor_service import ContributorService

router = APIRouter()


@router.get("/", response_model=List[Contributor])
async def list_contributors() -> List[Contributor]:
    """Return every contributor.  Responds 404 when there are none."""
    try:
        return await ContributorService.list_contributors()
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.get("/{contributor_id}", response_model=Contributor)
async def get_contributor(contributor_id: int) -> Contributor:
    try:
        return await ContributorService.get_contributor(contributor_id)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.post("/", response_model=Contributor, status_code=status.HTTP_201_CREATED)
async def add_contributor(
    payload: ContributorPayload,
    caller: str = Depends(get_current_principal),
) -> Contributor:
    """Register a contributor profile owned by the caller."""
    try:
        return await ContributorService.add_contributor(payload, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.put("/{contributor_id}", response_model=Contributor)
async def update_contributor(
    contributor_id: int,
    payload: ContributorPayload,
    caller: str = Depends(get_current_principal),
) -> Contributor:
    """Replace username, email and age of a profile the caller owns."""
    try:
        return await ContributorService.update_contributor(contributor_id, payload, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.delete("/{contributor_id}", response_model=Contributor)
async def delete_contributor(
    contributor_id: int,
    caller: str = Depends(get_current_principal),
) -> Contributor:
    """Delete a profile the caller owns and return it.

    Quotes filed under the profile are not removed.
    """
    try:
        return await ContributorService.delete_contributor(contributor_id, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e
