"""
Pydantic schemas for library API request/response validation.

These schemas enforce input validation and define the API contract.
JSON field names are camelCase; request bodies also accept the
snake_case attribute names. No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from library_api.domain.library.validation import INT32_MAX, INT32_MIN

NAME_MAX_LEN = 255


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------------------------------------------------------
# Customers
# ------------------------------------------------------------------


class CustomerCreateRequest(CamelModel):
    """Request schema for customer registration.

    The email format is checked by the customer service so that
    malformed addresses produce the service's own error message.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=NAME_MAX_LEN)
    password: str = Field(..., min_length=1)


class CustomerUpdateRequest(CamelModel):
    """Request schema for a partial customer update. Omitted or null fields are kept."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    email: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    password: Optional[str] = Field(default=None, min_length=1)


class CustomerResponse(CamelModel):
    """A customer as exposed by the API. Never carries the credential."""

    id: int
    name: str
    email: str


class LoginRequest(CamelModel):
    """Request schema for the login endpoint."""

    email: str
    password: str


class LoginResponse(CamelModel):
    """Response schema for a successful login."""

    token: str
    customer: CustomerResponse


# ------------------------------------------------------------------
# Categories
# ------------------------------------------------------------------


class CategoryCreateRequest(CamelModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    description: str


class CategoryUpdateRequest(CamelModel):
    """Request schema for a partial category update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    description: Optional[str] = None


class CategoryResponse(CamelModel):
    """A category with the number of books referencing it."""

    id: int
    name: str
    description: str
    book_count: int = 0


# ------------------------------------------------------------------
# Books
# ------------------------------------------------------------------


class BookCreateRequest(CamelModel):
    """Request schema for creating a book.

    Attributes:
        title: Book title.
        author: Author name.
        publisher: Publisher name.
        publishing_year: Year of publication.
        category_id: Id of an existing category.
    """

    title: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    author: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    publisher: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    publishing_year: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    category_id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)


class BookUpdateRequest(CamelModel):
    """Request schema for a partial book update."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    author: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    publisher: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    publishing_year: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    category_id: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)


class BookResponse(CamelModel):
    """A book. ``categoryName`` is only present on reads."""

    id: int
    title: str
    author: str
    publisher: str
    publishing_year: int
    category_id: int
    category_name: Optional[str] = None


# ------------------------------------------------------------------
# Service
# ------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    message: str
