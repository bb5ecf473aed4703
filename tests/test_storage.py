from datetime import datetime, timezone

import pytest

from book_swap_api.app.core.config import Settings
from book_swap_api.app.core.db import SqliteTable, get_database_path, init_db
from book_swap_api.app.core.errors import StorageError
from book_swap_api.app.core.storage import MemoryTable, build_store, memory_store, sqlite_store
from book_swap_api.app.schemas.feedback import Feedback
from book_swap_api.app.schemas.user import User

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_user(user_id, name="Ada"):
    return User(id=user_id, name=name, email=f"{name.lower()}@example.com", created_at=NOW)


@pytest.fixture(params=["memory", "sqlite"])
def users_table(request, tmp_path):
    if request.param == "memory":
        return MemoryTable()
    return sqlite_store(str(tmp_path / "swap.db")).users


def test_empty_table(users_table):
    assert users_table.values() == []
    assert users_table.get("missing") is None


def test_insert_and_get(users_table):
    user = make_user("abc")
    users_table.insert(user.id, user)

    assert users_table.get("abc") == user


def test_values_in_ascending_key_order(users_table):
    for key in ["c", "a", "b"]:
        users_table.insert(key, make_user(key))

    assert [u.id for u in users_table.values()] == ["a", "b", "c"]


def test_insert_overwrites_existing_key(users_table):
    users_table.insert("k", make_user("k", name="Ada"))
    users_table.insert("k", make_user("k", name="Grace"))

    values = users_table.values()
    assert len(values) == 1
    assert values[0].name == "Grace"


def test_sqlite_store_survives_reopen(tmp_path):
    db_file = str(tmp_path / "swap.db")
    first = sqlite_store(db_file)
    first.users.insert("u1", make_user("u1"))

    reopened = sqlite_store(db_file)

    assert [u.id for u in reopened.users.values()] == ["u1"]
    assert reopened.users.get("u1").created_at == NOW


def test_sqlite_tables_are_independent(tmp_path):
    store = sqlite_store(str(tmp_path / "swap.db"))
    store.users.insert("u1", make_user("u1"))

    assert store.books.values() == []
    assert store.swap_requests.values() == []
    assert store.feedback.values() == []


def test_sqlite_keeps_rating_type(tmp_path):
    store = sqlite_store(str(tmp_path / "swap.db"))
    store.feedback.insert(
        "f1",
        Feedback(id="f1", user_id="u", swap_request_id="s", rating=4, comment="x", created_at=NOW),
    )
    store.feedback.insert(
        "f2",
        Feedback(id="f2", user_id="u", swap_request_id="s", rating=4.5, comment="y", created_at=NOW),
    )

    ratings = [f.rating for f in store.feedback.values()]
    assert ratings == [4, 4.5]
    assert isinstance(ratings[0], int)


def test_init_db_is_idempotent(tmp_path):
    db_path = str(tmp_path / "swap.db")
    init_db(db_path)
    init_db(db_path)

    table = SqliteTable(db_path, "users", User)
    table.insert("u1", make_user("u1"))
    assert len(table.values()) == 1


def test_sqlite_failure_raises_storage_error(tmp_path):
    # Tables were never created, so every statement fails.
    table = SqliteTable(str(tmp_path / "empty.db"), "users", User)

    with pytest.raises(StorageError) as excinfo:
        table.insert("u1", make_user("u1"))
    assert excinfo.value.__cause__ is not None

    with pytest.raises(StorageError):
        table.values()


def test_sqlite_table_rejects_unknown_name(tmp_path):
    with pytest.raises(ValueError):
        SqliteTable(str(tmp_path / "swap.db"), "users; DROP TABLE books", User)


def test_relative_database_path_resolves_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_database_path("swap.db") == str((tmp_path / "swap.db").resolve())
    assert get_database_path("/var/data/swap.db") == "/var/data/swap.db"


def test_build_store_backends(tmp_path):
    assert isinstance(build_store(Settings(storage_backend="memory")).users, MemoryTable)

    sqlite_backed = build_store(Settings(storage_backend="sqlite", database_url=str(tmp_path / "s.db")))
    assert isinstance(sqlite_backed.users, SqliteTable)

    with pytest.raises(ValueError):
        build_store(Settings(storage_backend="redis"))


def test_memory_store_has_separate_tables():
    store = memory_store()
    store.users.insert("u1", make_user("u1"))
    assert store.books.values() == []
