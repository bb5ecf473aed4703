"""
API endpoints for feedback on swaps.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from book_swap_api.app.api.deps import get_feedback_service
from book_swap_api.app.core.validation import validated_body
from book_swap_api.app.schemas.feedback import FeedbackCreate, FeedbackCreated, FeedbackList
from book_swap_api.app.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=FeedbackCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Leave feedback",
)
async def create_feedback(
    data: FeedbackCreate = Depends(validated_body(FeedbackCreate)),
    service: FeedbackService = Depends(get_feedback_service),
) -> FeedbackCreated:
    """Leave feedback on a swap request.

    ``rating`` must be a number; a string such as ``"five"`` is
    rejected with HTTP 400.
    """
    try:
        feedback = await service.create_feedback(data)
    except Exception:
        logger.exception("Failed to create feedback")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the feedback.",
        )
    return FeedbackCreated(message="Feedback created successfully", feedback=feedback)


@router.get("", response_model=FeedbackList, summary="List feedback")
async def list_feedback(service: FeedbackService = Depends(get_feedback_service)) -> FeedbackList:
    try:
        feedback = await service.list_feedback()
    except Exception:
        logger.exception("Failed to retrieve feedback")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving feedback.",
        )
    return FeedbackList(message="Feedback retrieved successfully", feedback=feedback)
