"""
Pydantic models for user data.

``UserCreate`` is the registration payload, ``User`` the stored record
and ``UserCreated``/``UserList`` the response envelopes.  Email
addresses are kept exactly as submitted; no normalisation happens.
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UserCreate(BaseModel):
    """Schema for registering a user."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'name' and 'email' are provided and are strings."
    )

    name: StrictStr = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: StrictStr = Field(..., min_length=1, examples=["ada@example.com"])


class User(BaseModel):
    """A registered user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")


class UserCreated(BaseModel):
    message: str
    user: User


class UserList(BaseModel):
    message: str
    users: List[User]
