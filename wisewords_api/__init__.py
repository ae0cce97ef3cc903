"""
Top-level package for the WiseWords API.

All functionality lives in submodules under ``app``, imported with
fully qualified names such as ``wisewords_api.app.main``.
"""

__all__ = []
