"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations (``init_db``) and the
``SqliteTable`` key-value table used by the store.  Each entity type
lives in its own table of ``(key, value)`` rows where ``value`` is the
JSON-encoded entity.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generic, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel

from .errors import StorageError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

TABLE_NAMES = ("users", "books", "swap_requests", "feedback")

MIGRATIONS: List[tuple] = [
    # Migration 1: one key-value table per entity type
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS books (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS swap_requests (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS feedback (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path(db_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative paths are resolved
    against the current working directory.
    """
    if os.path.isabs(db_url):
        return db_url
    return str((Path.cwd() / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by name.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with get_cursor(db_path) as cursor:
        # WAL lets list requests read while another request inserts.
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s to %s", version, db_path)
                current_version = version


class SqliteTable(Generic[EntityT]):
    """Durable ordered mapping from key to entity backed by one SQLite table.

    Entities are stored as JSON and decoded with ``model`` on the way
    out.  ``insert`` replaces an existing row with the same key.
    """

    def __init__(self, db_path: str, name: str, model: Type[EntityT]) -> None:
        if name not in TABLE_NAMES:
            raise ValueError(f"Unknown table {name!r}")
        self.db_path = db_path
        self.name = name
        self.model = model

    def insert(self, key: str, entity: EntityT) -> None:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    f"INSERT OR REPLACE INTO {self.name} (key, value) VALUES (?, ?)",
                    (key, entity.model_dump_json()),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to insert {key!r} into {self.name}") from exc

    def get(self, key: str) -> Optional[EntityT]:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    f"SELECT value FROM {self.name} WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to read {key!r} from {self.name}") from exc
        if row is None:
            return None
        return self.model.model_validate_json(row["value"])

    def values(self) -> List[EntityT]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    f"SELECT value FROM {self.name} ORDER BY key"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to read {self.name}") from exc
        return [self.model.model_validate_json(row["value"]) for row in rows]
