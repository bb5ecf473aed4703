"""
API endpoints for swap requests.

Swap requests are served under ``/swapRequests`` to match the JSON
field naming used by the rest of the API.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from book_swap_api.app.api.deps import get_swap_request_service
from book_swap_api.app.core.validation import validated_body
from book_swap_api.app.schemas.swap_request import (
    SwapRequestCreate,
    SwapRequestCreated,
    SwapRequestList,
)
from book_swap_api.app.services.swap_request_service import SwapRequestService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=SwapRequestCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Request a swap",
)
async def create_swap_request(
    data: SwapRequestCreate = Depends(validated_body(SwapRequestCreate)),
    service: SwapRequestService = Depends(get_swap_request_service),
) -> SwapRequestCreated:
    """Record a request to swap a book.

    ``status`` is stored as given; any non-empty string is accepted.
    """
    try:
        swap_request = await service.create_swap_request(data)
    except Exception:
        logger.exception("Failed to create swap request")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the swap request.",
        )
    return SwapRequestCreated(
        message="Swap request created successfully",
        swap_request=swap_request,
    )


@router.get("", response_model=SwapRequestList, summary="List swap requests")
async def list_swap_requests(
    service: SwapRequestService = Depends(get_swap_request_service),
) -> SwapRequestList:
    try:
        swap_requests = await service.list_swap_requests()
    except Exception:
        logger.exception("Failed to retrieve swap requests")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving swap requests.",
        )
    return SwapRequestList(
        message="Swap requests retrieved successfully",
        swap_requests=swap_requests,
    )
