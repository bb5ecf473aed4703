"""
FastAPI dependencies shared by the endpoint modules.

The store and the entity factory are created once in ``create_app`` and
kept on ``app.state``; these functions hand them, wrapped in the right
service, to each request.
"""

from fastapi import Depends, Request

from ..core.storage import Store
from ..services.book_service import BookService
from ..services.entity_factory import EntityFactory
from ..services.feedback_service import FeedbackService
from ..services.swap_request_service import SwapRequestService
from ..services.user_service import UserService


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_entity_factory(request: Request) -> EntityFactory:
    return request.app.state.entity_factory


def get_user_service(
    store: Store = Depends(get_store),
    factory: EntityFactory = Depends(get_entity_factory),
) -> UserService:
    return UserService(store.users, factory)


def get_book_service(
    store: Store = Depends(get_store),
    factory: EntityFactory = Depends(get_entity_factory),
) -> BookService:
    return BookService(store.books, factory)


def get_swap_request_service(
    store: Store = Depends(get_store),
    factory: EntityFactory = Depends(get_entity_factory),
) -> SwapRequestService:
    return SwapRequestService(store.swap_requests, factory)


def get_feedback_service(
    store: Store = Depends(get_store),
    factory: EntityFactory = Depends(get_entity_factory),
) -> FeedbackService:
    return FeedbackService(store.feedback, factory)
