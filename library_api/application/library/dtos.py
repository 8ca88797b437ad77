"""
Data Transfer Objects for the library application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. In the ``Update*``
commands a ``None`` field means "leave unchanged".
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateCustomerCommand:
    """Input DTO for registering a customer.

    Attributes:
        name: Display name.
        email: Unique email address.
        password: Plain-text password, hashed before it is stored.
    """

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class UpdateCustomerCommand:
    """Input DTO for a partial customer update."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class CreateCategoryCommand:
    """Input DTO for creating a category."""

    name: str
    description: str


@dataclass(frozen=True)
class UpdateCategoryCommand:
    """Input DTO for a partial category update."""

    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for creating a book.

    Attributes:
        title: Book title.
        author: Author name.
        publisher: Publisher name.
        publishing_year: Year of publication.
        category_id: Id of an existing category.
    """

    title: str
    author: str
    publisher: str
    publishing_year: int
    category_id: int


@dataclass(frozen=True)
class UpdateBookCommand:
    """Input DTO for a partial book update."""

    title: Optional[str] = None
    author: Optional[str] = None
    publisher: Optional[str] = None
    publishing_year: Optional[int] = None
    category_id: Optional[int] = None
