"""
Book Pydantic Schemas

- BookCreate: all of title, author and isbn are required and non-blank
- BookUpdate: every field optional (PATCH-like PUT)
- BookResponse: what the API returns for a single book
- BookPageResponse: the page envelope returned by search
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from library_api.models import Book
from library_api.pagination import Page


def _strip_required(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v.strip()


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Leading/trailing whitespace is removed; whitespace-only values are
    rejected.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Book title",
        examples=["As aventuras", "1984"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Artur", "George Orwell"],
    )

    isbn: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="International Standard Book Number (unique)",
        examples=["001", "9780451524935"],
    )

    @field_validator("title", "author", "isbn")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        return _strip_required(v)


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "As aventuras",
        "author": "Artur",
        "isbn": "001"
    }
    """

    def to_model(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    Only the fields present in the request body are changed.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    author: str | None = Field(default=None, min_length=1, max_length=255)
    isbn: str | None = Field(default=None, min_length=1, max_length=20)

    @field_validator("title", "author", "isbn")
    @classmethod
    def must_not_be_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _strip_required(v)

    def apply_to(self, book: Book) -> Book:
        """Copy the fields that were sent onto the book and return it."""
        for field, value in self.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(book, field, value)
        return book


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 10,
                "title": "As aventuras",
                "author": "Artur",
                "isbn": "001",
            }
        },
    )


# =============================================================================
# Page Envelope
# =============================================================================
# Serialized in camelCase: {"content": [...], "totalElements": 1, "pageable": {...}}

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SortResponse(_CamelModel):
    property: str
    direction: str


class PageableResponse(_CamelModel):
    page_number: int = Field(..., ge=0, description="Zero-based page index")
    page_size: int = Field(..., ge=1, description="Requested page size")
    offset: int = Field(..., ge=0, description="Number of records skipped")
    sort: list[SortResponse] = Field(default_factory=list)


class BookPageResponse(_CamelModel):
    """
    Schema for one page of book search results.

    - content: Books on this page
    - total_elements: Number of books matching the filter
    - total_pages: Number of pages at this page size
    - pageable: The paging parameters echoed back
    """

    content: list[BookResponse]
    total_elements: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    number_of_elements: int = Field(..., ge=0)
    first: bool
    last: bool
    pageable: PageableResponse

    @classmethod
    def from_page(cls, page: Page[Book]) -> "BookPageResponse":
        request = page.page_request
        return cls(
            content=[BookResponse.model_validate(book) for book in page.content],
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number_of_elements=page.number_of_elements,
            first=page.is_first,
            last=page.is_last,
            pageable=PageableResponse(
                page_number=request.page,
                page_size=request.size,
                offset=request.offset,
                sort=[
                    SortResponse(property=order.field, direction=order.direction.value)
                    for order in request.sort
                ],
            ),
        )
