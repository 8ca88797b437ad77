"""
Port interfaces (ABCs) for the library bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from library_api.domain.library.entities import (
    Book,
    Category,
    Customer,
    CustomerProfile,
    TokenIdentity,
)


class CustomerRepository(ABC):
    """Port for persisting customers."""

    @abstractmethod
    def add(self, name: str, email: str, password_hash: str) -> int:
        """Insert a customer and return its server-assigned id.

        Raises:
            ConflictError: If the email is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Return the customer with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Return the customer registered with the given email, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if another customer already uses the email.

        Args:
            email: Address to look up.
            exclude_id: Customer id to ignore (the record being updated).
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, customer: Customer) -> bool:
        """Overwrite name, email and password hash. Return False if no row matched."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, customer_id: int) -> bool:
        """Delete a customer. Return False if no row matched."""
        raise NotImplementedError


class CategoryRepository(ABC):
    """Port for persisting categories."""

    @abstractmethod
    def add(self, name: str, description: str) -> int:
        """Insert a category and return its server-assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Return the category with its current book count, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category with its book count, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, category_id: int) -> bool:
        """Return True if a category with the given id exists."""
        raise NotImplementedError

    @abstractmethod
    def update(self, category: Category) -> bool:
        """Overwrite name and description. Return False if no row matched."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, category_id: int) -> bool:
        """Delete a category. Return False if no row matched.

        Raises:
            ConflictError: If books still reference the category.
        """
        raise NotImplementedError


class BookRepository(ABC):
    """Port for persisting books."""

    @abstractmethod
    def add(
        self,
        title: str,
        author: str,
        publisher: str,
        publishing_year: int,
        category_id: int,
    ) -> int:
        """Insert a book and return its server-assigned id.

        Raises:
            ValidationError: If the category does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Return the book joined with its category name, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book joined with its category name, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> bool:
        """Overwrite every stored column. Return False if no row matched.

        Raises:
            ValidationError: If the category does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, book_id: int) -> bool:
        """Delete a book. Return False if no row matched."""
        raise NotImplementedError

    @abstractmethod
    def count_by_category(self, category_id: int) -> int:
        """Return the number of books referencing a category."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way credential derivation."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted one-way hash of the password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the stored hash."""
        raise NotImplementedError


class TokenIssuer(ABC):
    """Port for issuing and verifying bearer tokens."""

    @abstractmethod
    def issue(self, customer: CustomerProfile) -> str:
        """Return a signed, time-boxed token for an authenticated customer."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> TokenIdentity:
        """Check signature, issuer, audience and expiry.

        Raises:
            UnauthorizedError: If any check fails.
        """
        raise NotImplementedError
