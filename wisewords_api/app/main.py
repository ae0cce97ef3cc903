"""
Main entrypoint for the WiseWords API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn wisewords_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import StorageBackend, open_backend


def create_app(backend: Optional[StorageBackend] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    backend : Optional[StorageBackend]
        Storage to serve from.  When given it is installed immediately;
        otherwise the SQLite backend from ``settings.database_url`` is
        opened (and migrated) on startup.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")

    if backend is not None:
        open_backend(backend)
    else:
        @app.on_event("startup")
        async def startup_event() -> None:
            open_backend()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
