"""
Entity tables and the store that groups them.

A table is an ordered key-value mapping from entity id to entity.  Two
implementations exist: :class:`MemoryTable` keeps entries in process
memory and :class:`~book_swap_api.app.core.db.SqliteTable` keeps them
in a SQLite file.  ``build_store`` picks one according to settings; the
resulting :class:`Store` is created once at startup and handed to the
endpoints through ``app.state``.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Protocol, TypeVar

from pydantic import BaseModel

from .config import Settings
from .db import SqliteTable, get_database_path, init_db
from ..schemas.book import Book
from ..schemas.feedback import Feedback
from ..schemas.swap_request import SwapRequest
from ..schemas.user import User

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class Table(Protocol[EntityT]):
    def insert(self, key: str, entity: EntityT) -> None: ...

    def get(self, key: str) -> Optional[EntityT]: ...

    def values(self) -> List[EntityT]: ...


class MemoryTable(Generic[EntityT]):
    """In-process table.  Same ordering and overwrite rules as ``SqliteTable``."""

    def __init__(self) -> None:
        self._rows: Dict[str, EntityT] = {}
        self._lock = threading.Lock()

    def insert(self, key: str, entity: EntityT) -> None:
        with self._lock:
            self._rows[key] = entity

    def get(self, key: str) -> Optional[EntityT]:
        with self._lock:
            return self._rows.get(key)

    def values(self) -> List[EntityT]:
        with self._lock:
            return [self._rows[key] for key in sorted(self._rows)]


@dataclass
class Store:
    """The four entity tables."""

    users: Table[User]
    books: Table[Book]
    swap_requests: Table[SwapRequest]
    feedback: Table[Feedback]


def memory_store() -> Store:
    return Store(
        users=MemoryTable(),
        books=MemoryTable(),
        swap_requests=MemoryTable(),
        feedback=MemoryTable(),
    )


def sqlite_store(db_url: str) -> Store:
    """Open (and migrate if needed) the SQLite database at ``db_url``."""
    db_path = get_database_path(db_url)
    init_db(db_path)
    return Store(
        users=SqliteTable(db_path, "users", User),
        books=SqliteTable(db_path, "books", Book),
        swap_requests=SqliteTable(db_path, "swap_requests", SwapRequest),
        feedback=SqliteTable(db_path, "feedback", Feedback),
    )


def build_store(settings: Settings) -> Store:
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.warning("Using in-memory storage; data is lost on restart")
        return memory_store()
    if backend == "sqlite":
        logger.info("Using SQLite storage at %s", settings.database_url)
        return sqlite_store(settings.database_url)
    raise ValueError(f"Unknown storage backend {settings.storage_backend!r}")
