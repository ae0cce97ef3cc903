"""
Information endpoint for API v1.

Returns the service name and version together with the number of
stored contributors and quotes.  When serving from SQLite the response
also reports whether the database answers (``"storage"``).  Publicly
accessible.
"""

from typing import Any, Dict

from fastapi import APIRouter

from wisewords_api.app.core.config import settings
from wisewords_api.app.core.db import health_check
from wisewords_api.app.core.storage import SQLiteBackend, get_backend
from wisewords_api.app.services.store import contributor_store, quote_store

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "name": settings.project_name,
        "version": settings.api_version,
    }
    backend = get_backend()
    if isinstance(backend, SQLiteBackend):
        info["storage"] = "ok" if health_check(backend.db_path) else "unavailable"
        if info["storage"] != "ok":
            return info
    info["contributors"] = contributor_store().count()
    info["quotes"] = quote_store().count()
    return info
