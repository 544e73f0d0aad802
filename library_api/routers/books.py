"""
Books Router

HTTP binding for the catalog service:
- POST   /books/            create (201, 400 on duplicate ISBN or bad body)
- GET    /books/{book_id}   fetch (200, 404)
- PUT    /books/{book_id}   update (200, 404)
- DELETE /books/{book_id}   delete (204, 404)
- GET    /books/            example search with pagination (200)

Routes translate "not found" (None from the service) into 404. Business
errors are mapped to responses by the exception handlers in main.py.
"""

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import BookExample, BookServiceDep, Pagination
from library_api.models import Book
from library_api.schemas import (
    ApiErrors,
    BookCreate,
    BookPageResponse,
    BookResponse,
    BookUpdate,
)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(service: BookServiceDep, book_id: int) -> Book:
    """
    Get a book by ID or raise 404.

    Raises:
        HTTPException: 404 if book not found
    """
    book = service.get_by_id(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return book


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Register a book. The ISBN must not be registered yet.",
    responses={400: {"model": ApiErrors, "description": "Duplicate ISBN or invalid fields"}},
)
def create_book(book_data: BookCreate, service: BookServiceDep) -> BookResponse:
    """
    Create a new book.

    Returns:
        Created book with its assigned id
    """
    book = service.create(book_data.to_model())
    return BookResponse.model_validate(book)


@router.get(
    "/",
    response_model=BookPageResponse,
    summary="Find books",
    description=(
        "Paginated search. title, author and isbn match as case-insensitive "
        "substrings; omitted filters are ignored and all filters are combined."
    ),
)
def find_books(
    service: BookServiceDep,
    example: BookExample,
    page_request: Pagination,
) -> BookPageResponse:
    """
    Search books by example.

    Examples:
        GET /api/v1/books/?title=avent
        GET /api/v1/books/?author=orwell&page=1&size=5&sort=title,desc

    An empty filter returns every book, one page at a time. No match is an
    empty page, not an error.
    """
    page = service.find(example, page_request)
    return BookPageResponse.from_page(page)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book.",
)
def get_book(book_id: int, service: BookServiceDep) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        HTTPException: 404 if book not found
    """
    book = get_book_or_404(service, book_id)
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update an existing book. Only the fields sent are changed.",
    responses={400: {"model": ApiErrors, "description": "ISBN taken or invalid fields"}},
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> BookResponse:
    """
    Update an existing book.

    Raises:
        HTTPException: 404 if book not found
    """
    book = get_book_or_404(service, book_id)
    book = service.update(book_data.apply_to(book))
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book.",
)
def delete_book(book_id: int, service: BookServiceDep) -> None:
    """
    Delete a book.

    Returns 204 No Content on success.

    Raises:
        HTTPException: 404 if book not found
    """
    book = get_book_or_404(service, book_id)
    service.delete(book)
