"""
Top-level router for version 1 of the API.

This router aggregates the per-entity routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import contributors, info, quotes

router = APIRouter()

router.include_router(contributors.router, prefix="/contributors", tags=["contributors"])
router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
router.include_router(info.router, prefix="/info", tags=["info"])
