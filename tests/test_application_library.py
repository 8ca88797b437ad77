"""
Tests for the library application layer (services).

Services are exercised with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic: which checks run, in what order,
and which domain error surfaces.
"""

from unittest.mock import MagicMock

import pytest

from library_api.application.library.book_service import BookService
from library_api.application.library.category_service import CategoryService
from library_api.application.library.customer_service import CustomerService
from library_api.application.library.dtos import (
    CreateBookCommand,
    CreateCategoryCommand,
    CreateCustomerCommand,
    UpdateBookCommand,
    UpdateCategoryCommand,
    UpdateCustomerCommand,
)
from library_api.domain.library.entities import Book, Category, Customer, CustomerProfile
from library_api.domain.library.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from library_api.domain.library.ports import (
    BookRepository,
    CategoryRepository,
    CustomerRepository,
    PasswordHasher,
)

STORED = Customer(id=7, name="Jane", email="jane@example.com", password_hash="hashed:secret")


@pytest.fixture
def customer_repo() -> MagicMock:
    return MagicMock(spec=CustomerRepository)


@pytest.fixture
def hasher() -> MagicMock:
    mock = MagicMock(spec=PasswordHasher)
    mock.hash.side_effect = lambda password: f"hashed:{password}"
    mock.verify.side_effect = lambda password, hashed: hashed == f"hashed:{password}"
    return mock


@pytest.fixture
def category_repo() -> MagicMock:
    return MagicMock(spec=CategoryRepository)


@pytest.fixture
def book_repo() -> MagicMock:
    return MagicMock(spec=BookRepository)


class TestCustomerService:
    """Tests for CustomerService."""

    def test_create_hashes_password_and_hides_it(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.email_taken.return_value = False
        customer_repo.add.return_value = 1
        service = CustomerService(customer_repo, hasher)

        profile = service.create(
            CreateCustomerCommand(name="John", email="john@example.com", password="pw")
        )

        assert profile == CustomerProfile(id=1, name="John", email="john@example.com")
        customer_repo.add.assert_called_once_with("John", "john@example.com", "hashed:pw")

    def test_create_rejects_malformed_email(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(ValidationError, match="Invalid email format"):
            service.create(CreateCustomerCommand(name="J", email="nope", password="pw"))
        customer_repo.add.assert_not_called()

    def test_create_rejects_taken_email(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.email_taken.return_value = True
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(ConflictError, match="Email already exists"):
            service.create(
                CreateCustomerCommand(name="J", email="jane@example.com", password="pw")
            )
        customer_repo.add.assert_not_called()

    def test_read_unknown_raises_not_found(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = None
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(NotFoundError, match="Customer not found"):
            service.read(99)

    def test_update_name_only_keeps_email_and_hash(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = STORED
        customer_repo.update.return_value = True
        service = CustomerService(customer_repo, hasher)

        profile = service.update(7, UpdateCustomerCommand(name="X"))

        assert profile == CustomerProfile(id=7, name="X", email="jane@example.com")
        saved = customer_repo.update.call_args.args[0]
        assert saved.password_hash == "hashed:secret"
        customer_repo.email_taken.assert_not_called()
        hasher.hash.assert_not_called()

    def test_update_checks_uniqueness_excluding_self(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = STORED
        customer_repo.email_taken.return_value = False
        customer_repo.update.return_value = True
        service = CustomerService(customer_repo, hasher)

        service.update(7, UpdateCustomerCommand(email="jane@example.com", password="new"))

        customer_repo.email_taken.assert_called_once_with("jane@example.com", exclude_id=7)
        assert customer_repo.update.call_args.args[0].password_hash == "hashed:new"

    def test_update_email_taken_by_other_conflicts(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = STORED
        customer_repo.email_taken.return_value = True
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(ConflictError):
            service.update(7, UpdateCustomerCommand(email="other@example.com"))
        customer_repo.update.assert_not_called()

    def test_update_unknown_raises_not_found(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_id.return_value = None
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(NotFoundError):
            service.update(1, UpdateCustomerCommand(name="X"))

    def test_delete_unknown_raises_not_found(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.delete.return_value = False
        service = CustomerService(customer_repo, hasher)

        with pytest.raises(NotFoundError):
            service.delete(1)

    def test_authenticate_success(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        customer_repo.get_by_email.return_value = STORED
        service = CustomerService(customer_repo, hasher)

        assert service.authenticate("jane@example.com", "secret") == STORED.to_profile()

    def test_authenticate_failures_are_indistinguishable(
        self, customer_repo: MagicMock, hasher: MagicMock
    ) -> None:
        service = CustomerService(customer_repo, hasher)

        customer_repo.get_by_email.return_value = STORED
        with pytest.raises(UnauthorizedError) as wrong_password:
            service.authenticate("jane@example.com", "wrong")

        customer_repo.get_by_email.return_value = None
        with pytest.raises(UnauthorizedError) as unknown_email:
            service.authenticate("ghost@example.com", "secret")

        assert wrong_password.value.message == unknown_email.value.message


class TestCategoryService:
    """Tests for CategoryService."""

    def test_create_has_zero_books(
        self, category_repo: MagicMock, book_repo: MagicMock
    ) -> None:
        category_repo.add.return_value = 3
        service = CategoryService(category_repo, book_repo)

        category = service.create(CreateCategoryCommand(name="Fiction", description="Novels"))

        assert category == Category(id=3, name="Fiction", description="Novels", book_count=0)

    def test_update_merges_fields(
        self, category_repo: MagicMock, book_repo: MagicMock
    ) -> None:
        category_repo.get_by_id.return_value = Category(1, "Fiction", "Novels", 2)
        category_repo.update.return_value = True
        service = CategoryService(category_repo, book_repo)

        category = service.update(1, UpdateCategoryCommand(description="Stories"))

        assert category.name == "Fiction"
        assert category.description == "Stories"
        assert category.book_count == 2

    def test_update_unknown_raises_not_found(
        self, category_repo: MagicMock, book_repo: MagicMock
    ) -> None:
        category_repo.get_by_id.return_value = None
        service = CategoryService(category_repo, book_repo)

        with pytest.raises(NotFoundError, match="Category not found"):
            service.update(1, UpdateCategoryCommand(name="X"))

    def test_delete_with_books_conflicts(
        self, category_repo: MagicMock, book_repo: MagicMock
    ) -> None:
        book_repo.count_by_category.return_value = 2
        service = CategoryService(category_repo, book_repo)

        with pytest.raises(ConflictError, match="associated books"):
            service.delete(1)
        category_repo.delete.assert_not_called()

    def test_delete_unknown_raises_not_found(
        self, category_repo: MagicMock, book_repo: MagicMock
    ) -> None:
        book_repo.count_by_category.return_value = 0
        category_repo.delete.return_value = False
        service = CategoryService(category_repo, book_repo)

        with pytest.raises(NotFoundError):
            service.delete(1)


class TestBookService:
    """Tests for BookService."""

    def _command(self, category_id: int = 1) -> CreateBookCommand:
        return CreateBookCommand(
            title="Dune",
            author="Frank Herbert",
            publisher="Chilton",
            publishing_year=1965,
            category_id=category_id,
        )

    def test_create_in_existing_category(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        category_repo.exists.return_value = True
        book_repo.add.return_value = 5
        service = BookService(book_repo, category_repo)

        book = service.create(self._command())

        assert book.id == 5
        assert book.category_name is None

    def test_create_in_unknown_category_never_writes(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        category_repo.exists.return_value = False
        service = BookService(book_repo, category_repo)

        with pytest.raises(ValidationError, match="Category does not exist"):
            service.create(self._command(category_id=42))
        book_repo.add.assert_not_called()

    def test_update_without_category_skips_check(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        book_repo.get_by_id.return_value = Book(5, "Dune", "FH", "Chilton", 1965, 1, "SF")
        book_repo.update.return_value = True
        service = BookService(book_repo, category_repo)

        book = service.update(5, UpdateBookCommand(title="Dune Messiah"))

        assert book.title == "Dune Messiah"
        assert book.author == "FH"
        assert book.category_name is None
        category_repo.exists.assert_not_called()

    def test_update_replaces_every_provided_field(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        book_repo.get_by_id.return_value = Book(5, "Dune", "FH", "Chilton", 1965, 1, "SF")
        book_repo.update.return_value = True
        category_repo.exists.return_value = True
        service = BookService(book_repo, category_repo)

        book = service.update(
            5,
            UpdateBookCommand(
                title="Emma",
                author="Jane Austen",
                publisher="John Murray",
                publishing_year=1815,
                category_id=2,
            ),
        )

        assert book == Book(5, "Emma", "Jane Austen", "John Murray", 1815, 2)
        book_repo.update.assert_called_once_with(book)
        category_repo.exists.assert_called_once_with(2)

    def test_update_to_unknown_category_fails(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        book_repo.get_by_id.return_value = Book(5, "Dune", "FH", "Chilton", 1965, 1, "SF")
        category_repo.exists.return_value = False
        service = BookService(book_repo, category_repo)

        with pytest.raises(ValidationError):
            service.update(5, UpdateBookCommand(category_id=9))
        book_repo.update.assert_not_called()

    def test_read_unknown_raises_not_found(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        book_repo.get_by_id.return_value = None
        service = BookService(book_repo, category_repo)

        with pytest.raises(NotFoundError, match="Book not found"):
            service.read(1)

    def test_delete_unknown_raises_not_found(
        self, book_repo: MagicMock, category_repo: MagicMock
    ) -> None:
        book_repo.delete.return_value = False
        service = BookService(book_repo, category_repo)

        with pytest.raises(NotFoundError):
            service.delete(1)
