"""
Service: book management.

Operations: create, read, read_all, update, delete.
Side effects: writes to the book repository.
Failure cases: ValidationError (unknown category), NotFoundError.
"""

import logging
from dataclasses import replace

from library_api.application.library.dtos import CreateBookCommand, UpdateBookCommand
from library_api.domain.library.entities import Book
from library_api.domain.library.errors import NotFoundError, ValidationError
from library_api.domain.library.ports import BookRepository, CategoryRepository

logger = logging.getLogger(__name__)


class BookService:
    """Orchestrates the book lifecycle.

    Every write that sets a category id first checks that the
    category exists.
    """

    def __init__(
        self,
        book_repo: BookRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._book_repo = book_repo
        self._category_repo = category_repo

    def create(self, command: CreateBookCommand) -> Book:
        """Create a book in an existing category.

        The returned book has no ``category_name``; only reads join it in.

        Raises:
            ValidationError: If the category does not exist.
        """
        self._require_category(command.category_id)
        book_id = self._book_repo.add(
            title=command.title,
            author=command.author,
            publisher=command.publisher,
            publishing_year=command.publishing_year,
            category_id=command.category_id,
        )
        logger.info("Created book id=%d in category id=%d", book_id, command.category_id)
        return Book(
            id=book_id,
            title=command.title,
            author=command.author,
            publisher=command.publisher,
            publishing_year=command.publishing_year,
            category_id=command.category_id,
        )

    def read(self, book_id: int) -> Book:
        """Return a book with its category name.

        Raises:
            NotFoundError: If no book has this id.
        """
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise NotFoundError("Book not found")
        return book

    def read_all(self) -> list[Book]:
        """Return every book with its category name."""
        return self._book_repo.list_all()

    def update(self, book_id: int, command: UpdateBookCommand) -> Book:
        """Merge the provided fields into an existing book.

        Raises:
            NotFoundError: If no book has this id.
            ValidationError: If a new category id does not exist.
        """
        current = self.read(book_id)
        if command.category_id is not None:
            self._require_category(command.category_id)

        merged = replace(
            current,
            title=command.title if command.title is not None else current.title,
            author=command.author if command.author is not None else current.author,
            publisher=(
                command.publisher if command.publisher is not None else current.publisher
            ),
            publishing_year=(
                command.publishing_year
                if command.publishing_year is not None
                else current.publishing_year
            ),
            category_id=(
                command.category_id
                if command.category_id is not None
                else current.category_id
            ),
            category_name=None,
        )
        if not self._book_repo.update(merged):
            raise NotFoundError("Book not found")

        logger.info("Updated book id=%d", book_id)
        return merged

    def delete(self, book_id: int) -> None:
        """Remove a book.

        Raises:
            NotFoundError: If no book has this id.
        """
        if not self._book_repo.delete(book_id):
            raise NotFoundError("Book not found")
        logger.info("Deleted book id=%d", book_id)

    def _require_category(self, category_id: int) -> None:
        if not self._category_repo.exists(category_id):
            logger.warning("Rejected reference to unknown category id=%d", category_id)
            raise ValidationError("Category does not exist")
