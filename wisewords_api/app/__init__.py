"""
Application package initializer.

The API is organised in layers: ``core`` (configuration, logging,
storage, caller identity, errors), ``schemas`` (payloads and stored
records), ``services`` (validation, ownership and queries) and
``api/v1`` (HTTP routers).  ``main`` wires them into a FastAPI app.
"""

from .main import app  # noqa: F401
