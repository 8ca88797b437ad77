"""
Service: customer registration, maintenance and authentication.

Operations: create, read, read_all, update, delete, authenticate.
Side effects: writes to the customer repository.
Failure cases: ValidationError, ConflictError, NotFoundError, UnauthorizedError.
"""

import logging
from dataclasses import replace

from library_api.application.library.dtos import (
    CreateCustomerCommand,
    UpdateCustomerCommand,
)
from library_api.domain.library.entities import CustomerProfile
from library_api.domain.library.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from library_api.domain.library.ports import CustomerRepository, PasswordHasher
from library_api.domain.library.validation import is_valid_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class CustomerService:
    """Orchestrates the customer lifecycle.

    Enforces email format and uniqueness, and makes sure the stored
    password hash never leaves this service: every public operation
    returns a ``CustomerProfile``.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._customer_repo = customer_repo
        self._password_hasher = password_hasher

    def create(self, command: CreateCustomerCommand) -> CustomerProfile:
        """Register a new customer.

        Args:
            command: Name, email and plain-text password.

        Returns:
            The stored customer without its credential.

        Raises:
            ValidationError: If the email is malformed.
            ConflictError: If the email is already registered.
        """
        _check_email(command.email)
        if self._customer_repo.email_taken(command.email):
            logger.warning("Registration rejected: email already in use")
            raise ConflictError("Email already exists")

        password_hash = self._password_hasher.hash(command.password)
        customer_id = self._customer_repo.add(command.name, command.email, password_hash)
        logger.info("Registered customer id=%d", customer_id)
        return CustomerProfile(id=customer_id, name=command.name, email=command.email)

    def read(self, customer_id: int) -> CustomerProfile:
        """Return a single customer.

        Raises:
            NotFoundError: If no customer has this id.
        """
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")
        return customer.to_profile()

    def read_all(self) -> list[CustomerProfile]:
        """Return every customer."""
        return [c.to_profile() for c in self._customer_repo.list_all()]

    def update(self, customer_id: int, command: UpdateCustomerCommand) -> CustomerProfile:
        """Merge the provided fields into an existing customer.

        Fields left as None keep their stored value. A new email is
        validated and checked for uniqueness against every other customer;
        a new password is re-hashed.

        Raises:
            NotFoundError: If no customer has this id.
            ValidationError: If the new email is malformed.
            ConflictError: If the new email belongs to another customer.
        """
        current = self._customer_repo.get_by_id(customer_id)
        if current is None:
            raise NotFoundError("Customer not found")

        if command.email is not None:
            _check_email(command.email)
            if self._customer_repo.email_taken(command.email, exclude_id=customer_id):
                logger.warning("Update of customer id=%d rejected: email in use", customer_id)
                raise ConflictError("Email already exists")

        merged = replace(
            current,
            name=command.name if command.name is not None else current.name,
            email=command.email if command.email is not None else current.email,
            password_hash=(
                self._password_hasher.hash(command.password)
                if command.password is not None
                else current.password_hash
            ),
        )
        if not self._customer_repo.update(merged):
            raise NotFoundError("Customer not found")

        logger.info("Updated customer id=%d", customer_id)
        return merged.to_profile()

    def delete(self, customer_id: int) -> None:
        """Remove a customer.

        Raises:
            NotFoundError: If no customer has this id.
        """
        if not self._customer_repo.delete(customer_id):
            raise NotFoundError("Customer not found")
        logger.info("Deleted customer id=%d", customer_id)

    def authenticate(self, email: str, password: str) -> CustomerProfile:
        """Check a customer's credentials.

        Unknown emails and wrong passwords fail the same way so callers
        cannot tell which accounts exist.

        Raises:
            UnauthorizedError: If the credentials do not match.
        """
        customer = self._customer_repo.get_by_email(email)
        if customer is None or not self._password_hasher.verify(
            password, customer.password_hash
        ):
            logger.warning("Failed login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return customer.to_profile()


def _check_email(email: str) -> None:
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
