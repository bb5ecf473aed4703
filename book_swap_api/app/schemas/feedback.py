"""
Pydantic schemas for feedback on swaps.

``rating`` must be a JSON number.  Integers are kept as integers and
floats as floats; booleans and numeric strings such as ``"5"`` are
rejected.  No range is enforced.
"""

from datetime import datetime
from typing import Annotated, ClassVar, List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

Rating = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]


class FeedbackCreate(BaseModel):
    """Schema for leaving feedback on a swap request."""

    invalid_input_message: ClassVar[str] = (
        "Invalid input: Ensure 'userId', 'swapRequestId', 'rating', and 'comment' "
        "are provided and are of the correct types."
    )

    user_id: StrictStr = Field(..., alias="userId", min_length=1)
    swap_request_id: StrictStr = Field(..., alias="swapRequestId", min_length=1)
    rating: Rating = Field(..., examples=[5])
    comment: StrictStr = Field(..., min_length=1, examples=["Smooth swap"])


class Feedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(..., alias="userId")
    swap_request_id: str = Field(..., alias="swapRequestId")
    rating: Union[int, float]
    comment: str
    created_at: datetime = Field(..., alias="createdAt")


class FeedbackCreated(BaseModel):
    message: str
    feedback: Feedback


class FeedbackList(BaseModel):
    message: str
    feedback: List[Feedback]
