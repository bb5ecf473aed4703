"""
Business logic for books.

Books are stored in the ``books`` table.  The owner referenced by
``user_id`` is not checked for existence.
"""

import logging
from typing import List

from ..core.storage import Table
from ..schemas.book import Book, BookCreate
from .entity_factory import EntityFactory

logger = logging.getLogger(__name__)


class BookService:
    """Service for listing books offered for swap."""

    def __init__(self, table: Table[Book], factory: EntityFactory) -> None:
        self.table = table
        self.factory = factory

    async def create_book(self, data: BookCreate) -> Book:
        book = self.factory.build(Book, data)
        self.table.insert(book.id, book)
        logger.info("User %s listed book %s", book.user_id, book.id)
        return book

    async def list_books(self) -> List[Book]:
        return self.table.values()
