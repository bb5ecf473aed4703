import itertools
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from book_swap_api.app.core.storage import memory_store
from book_swap_api.app.main import create_app
from book_swap_api.app.services.entity_factory import EntityFactory

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class BrokenTable:
    """Table whose every operation fails like a lost database."""

    def insert(self, key, entity):
        raise RuntimeError("disk unavailable")

    def get(self, key):
        raise RuntimeError("disk unavailable")

    def values(self):
        raise RuntimeError("disk unavailable")


@pytest.fixture
def store():
    return memory_store()


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sequential_factory():
    counter = itertools.count(1)
    return EntityFactory(id_factory=lambda: f"id-{next(counter):04d}", clock=lambda: FIXED_NOW)


@pytest.fixture
def deterministic_client(store, sequential_factory):
    app = create_app(store=store, entity_factory=sequential_factory)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client():
    broken = memory_store()
    broken.users = BrokenTable()
    broken.books = BrokenTable()
    broken.swap_requests = BrokenTable()
    broken.feedback = BrokenTable()
    app = create_app(store=broken)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload():
    return {"name": "Ada", "email": "ada@example.com"}


@pytest.fixture
def book_payload():
    return {
        "userId": "u1",
        "title": "Dune",
        "author": "Frank Herbert",
        "description": "Paperback, cover slightly worn",
    }


@pytest.fixture
def swap_request_payload():
    return {"bookId": "b1", "requestedById": "u2", "status": "pending"}


@pytest.fixture
def feedback_payload():
    return {"userId": "u1", "swapRequestId": "s1", "rating": 5, "comment": "ok"}
