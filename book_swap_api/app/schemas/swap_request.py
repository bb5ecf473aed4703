"""
Pydantic schemas for swap requests.

``status`` is free-form text.  No set of allowed values or transitions
is defined, and creating a swap request does not change the requested
book in any way.
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class SwapRequestCreate(BaseModel):
    """Schema for requesting a swap."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'bookId', 'requestedById', and 'status' "
        "are provided and are of the correct types."
    )

    book_id: StrictStr = Field(..., alias="bookId", min_length=1)
    requested_by_id: StrictStr = Field(..., alias="requestedById", min_length=1)
    status: StrictStr = Field(..., min_length=1, examples=["pending"])


class SwapRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    book_id: str = Field(..., alias="bookId")
    requested_by_id: str = Field(..., alias="requestedById")
    status: str
    created_at: datetime = Field(..., alias="createdAt")


class SwapRequestCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    swap_request: SwapRequest = Field(..., alias="swapRequest")


class SwapRequestList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    swap_requests: List[SwapRequest] = Field(..., alias="swapRequests")
