"""
Quote endpoints for API v1.

Listing and lookups are public.  Writes require a bearer token whose
subject owns the contributor the quote is filed under.  The fixed
paths ``/recent`` and ``/category/{category}`` are declared before
``/{quote_id}`` so they are not captured by it.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from wisewords_api.app.core.errors import ServiceError
from wisewords_api.app.core.security import get_current_principal
from wisewords_api.app.schemas.quote import Quote, QuotePayload
from wisewords_api.app.services.quote_service import QuoteService

router = APIRouter()


@router.get("/", response_model=List[Quote])
async def list_quotes() -> List[Quote]:
    try:
        return await QuoteService.list_quotes()
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.get("/recent", response_model=List[Quote])
async def recent_quotes() -> List[Quote]:
    """Return the most recently created quotes, newest first."""
    try:
        return await QuoteService.recent_quotes()
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.get("/category/{category}", response_model=List[Quote])
async def quotes_by_category(category: str) -> List[Quote]:
    """Return the quotes filed under ``category``, ignoring case."""
    try:
        return await QuoteService.quotes_by_category(category)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.get("/{quote_id}", response_model=Quote)
async def get_quote(quote_id: int) -> Quote:
    try:
        return await QuoteService.get_quote(quote_id)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.post("/", response_model=Quote, status_code=status.HTTP_201_CREATED)
async def add_quote(
    payload: QuotePayload,
    caller: str = Depends(get_current_principal),
) -> Quote:
    try:
        return await QuoteService.add_quote(payload, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.put("/{quote_id}", response_model=Quote)
async def update_quote(
    quote_id: int,
    payload: QuotePayload,
    caller: str = Depends(get_current_principal),
) -> Quote:
    """Replace a quote.  The caller must own its current contributor."""
    try:
        return await QuoteService.update_quote(quote_id, payload, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.delete("/{quote_id}", response_model=Quote)
async def delete_quote(
    quote_id: int,
    caller: str = Depends(get_current_principal),
) -> Quote:
    try:
        return await QuoteService.delete_quote(quote_id, caller)
    except ServiceError as e:
        raise e.to_http_exception() from e
