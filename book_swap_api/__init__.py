"""
Top‑level package for the Book Swap API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``book_swap_api.app.main:app``.
"""

__all__ = []
