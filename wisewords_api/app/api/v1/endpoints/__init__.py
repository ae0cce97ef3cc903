"""
Endpoint modules for API v1: ``contributors``, ``quotes`` and ``info``.

The routers are aggregated in ``router.py`` at the package level.
"""
