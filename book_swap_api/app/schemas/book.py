"""
Pydantic schemas for books offered for swap.

A book belongs to the user named by ``userId``.  The owner is not
looked up when the book is created, so a book may point at a user
that does not exist.
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class BookCreate(BaseModel):
    """Schema for listing a new book."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'userId', 'title', 'author', and 'description' "
        "are provided and are of the correct types."
    )

    user_id: StrictStr = Field(..., alias="userId", min_length=1, description="Identifier of the owner")
    title: StrictStr = Field(..., min_length=1, examples=["Dune"])
    author: StrictStr = Field(..., min_length=1, examples=["Frank Herbert"])
    description: StrictStr = Field(..., min_length=1, examples=["Paperback, lightly read"])


class Book(BaseModel):
    """A book listed by a user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(..., alias="userId")
    title: str
    author: str
    description: str
    created_at: datetime = Field(..., alias="createdAt")


class BookCreated(BaseModel):
    message: str
    book: Book


class BookList(BaseModel):
    message: str
    books: List[Book]
