"""
User endpoints for API v1.

``POST /users`` registers a user and ``GET /users`` lists every
registered user.  There are no endpoints to fetch, update or delete a
single user.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from book_swap_api.app.api.deps import get_user_service
from book_swap_api.app.core.validation import validated_body
from book_swap_api.app.schemas.user import UserCreate, UserCreated, UserList
from book_swap_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def create_user(
    data: UserCreate = Depends(validated_body(UserCreate)),
    service: UserService = Depends(get_user_service),
) -> UserCreated:
    """Create a new user.

    Returns HTTP 400 if ``name`` or ``email`` is missing or not a
    non-empty string.
    """
    try:
        user = await service.create_user(data)
    except Exception:
        logger.exception("Failed to create user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the user.",
        )
    return UserCreated(message="User created successfully", user=user)


@router.get("", response_model=UserList, summary="List users")
async def list_users(service: UserService = Depends(get_user_service)) -> UserList:
    try:
        users = await service.list_users()
    except Exception:
        logger.exception("Failed to retrieve users")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving users.",
        )
    return UserList(message="Users retrieved successfully", users=users)
