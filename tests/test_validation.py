import pytest

from book_swap_api.app.core.errors import InvalidInputError
from book_swap_api.app.core.validation import has_required_fields, parse_payload, required_fields
from book_swap_api.app.schemas.book import BookCreate
from book_swap_api.app.schemas.feedback import FeedbackCreate
from book_swap_api.app.schemas.swap_request import SwapRequestCreate
from book_swap_api.app.schemas.user import UserCreate


def test_has_required_fields():
    assert has_required_fields({"name": "Ada", "email": "a@x"}, ["name", "email"])
    assert not has_required_fields({"name": "Ada"}, ["name", "email"])
    assert not has_required_fields({"name": "Ada", "email": None}, ["name", "email"])
    assert not has_required_fields(["name", "email"], ["name", "email"])
    assert not has_required_fields(None, ["name"])


def test_presence_check_accepts_falsy_values():
    # Presence only; type and emptiness are checked by the schema.
    assert has_required_fields({"rating": 0, "comment": ""}, ["rating", "comment"])


@pytest.mark.parametrize(
    "schema, expected",
    [
        (UserCreate, ["name", "email"]),
        (BookCreate, ["userId", "title", "author", "description"]),
        (SwapRequestCreate, ["bookId", "requestedById", "status"]),
        (FeedbackCreate, ["userId", "swapRequestId", "rating", "comment"]),
    ],
)
def test_required_fields_use_json_names(schema, expected):
    assert required_fields(schema) == expected


def test_parse_payload_keeps_values_verbatim():
    payload = parse_payload(UserCreate, {"name": "  Ada ", "email": "ADA@Example.com"})
    assert payload.name == "  Ada "
    assert payload.email == "ADA@Example.com"


def test_parse_payload_ignores_unknown_keys():
    payload = parse_payload(
        SwapRequestCreate,
        {"bookId": "b1", "requestedById": "u2", "status": "pending", "id": "forged"},
    )
    assert payload.book_id == "b1"
    assert not hasattr(payload, "id")


@pytest.mark.parametrize("rating", [5, 0, -1, 4.5])
def test_rating_accepts_numbers(rating):
    payload = parse_payload(
        FeedbackCreate,
        {"userId": "u1", "swapRequestId": "s1", "rating": rating, "comment": "ok"},
    )
    assert payload.rating == rating
    assert type(payload.rating) is type(rating)


@pytest.mark.parametrize("rating", ["five", "5", True, [5], {"value": 5}])
def test_rating_rejects_non_numbers(rating):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_payload(
            FeedbackCreate,
            {"userId": "u1", "swapRequestId": "s1", "rating": rating, "comment": "ok"},
        )
    assert excinfo.value.message == FeedbackCreate.invalid_input_message


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Ada"},
        {"name": "Ada", "email": None},
        {"name": "", "email": "ada@example.com"},
        {"name": 42, "email": "ada@example.com"},
        {"name": ["Ada"], "email": "ada@example.com"},
        "name=Ada",
        None,
    ],
)
def test_invalid_user_payloads(body):
    with pytest.raises(InvalidInputError, match="'name' and 'email'"):
        parse_payload(UserCreate, body)


def test_invalid_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_payload(BookCreate, {"userId": "u1", "title": "T", "author": "A"})
