"""
Top‑level router for version 1 of the API.

This router aggregates the per-entity routers.  Each endpoint module
defines its routes with an empty path so the prefix given here is the
full resource path (``/users`` rather than ``/users/``).
"""

from fastapi import APIRouter

from .endpoints import books, feedback, swap_requests, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(swap_requests.router, prefix="/swapRequests", tags=["swap requests"])
router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
