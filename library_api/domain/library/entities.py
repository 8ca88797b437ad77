"""
Domain entities for the library bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """A registered customer, including the stored password hash.

    Never leaves the application layer: use ``CustomerProfile`` for output.
    """

    id: int
    name: str
    email: str
    password_hash: str

    def to_profile(self) -> "CustomerProfile":
        """Project to the public shape without the credential."""
        return CustomerProfile(id=self.id, name=self.name, email=self.email)


@dataclass(frozen=True)
class CustomerProfile:
    """Public view of a customer. Carries no credential."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Category:
    """A book category.

    ``book_count`` is derived from the books referencing the category
    and is computed on every read.
    """

    id: int
    name: str
    description: str
    book_count: int = 0


@dataclass(frozen=True)
class Book:
    """A book belonging to exactly one category.

    ``category_name`` is only populated by read paths (joined from
    the categories table).
    """

    id: int
    title: str
    author: str
    publisher: str
    publishing_year: int
    category_id: int
    category_name: Optional[str] = None


@dataclass(frozen=True)
class TokenIdentity:
    """Identity claims carried by a verified bearer token."""

    customer_id: int
    email: str
