"""
API endpoints for books offered for swap.

Any user id is accepted as the owner of a new book; the owner is not
required to be registered.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from book_swap_api.app.api.deps import get_book_service
from book_swap_api.app.core.validation import validated_body
from book_swap_api.app.schemas.book import BookCreate, BookCreated, BookList
from book_swap_api.app.services.book_service import BookService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=BookCreated,
    status_code=status.HTTP_201_CREATED,
    summary="List a book for swap",
)
async def create_book(
    data: BookCreate = Depends(validated_body(BookCreate)),
    service: BookService = Depends(get_book_service),
) -> BookCreated:
    try:
        book = await service.create_book(data)
    except Exception:
        logger.exception("Failed to create book")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while creating the book.",
        )
    return BookCreated(message="Book created successfully", book=book)


@router.get("", response_model=BookList, summary="List books")
async def list_books(service: BookService = Depends(get_book_service)) -> BookList:
    try:
        books = await service.list_books()
    except Exception:
        logger.exception("Failed to retrieve books")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error occurred while retrieving books.",
        )
    return BookList(message="Books retrieved successfully", books=books)
