"""
Service: category management.

Operations: create, read, read_all, update, delete.
Side effects: writes to the category repository.
Failure cases: NotFoundError, ConflictError.
"""

import logging
from dataclasses import replace

from library_api.application.library.dtos import (
    CreateCategoryCommand,
    UpdateCategoryCommand,
)
from library_api.domain.library.entities import Category
from library_api.domain.library.errors import ConflictError, NotFoundError
from library_api.domain.library.ports import BookRepository, CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Orchestrates the category lifecycle.

    A category referenced by at least one book cannot be deleted.
    """

    def __init__(
        self,
        category_repo: CategoryRepository,
        book_repo: BookRepository,
    ) -> None:
        self._category_repo = category_repo
        self._book_repo = book_repo

    def create(self, command: CreateCategoryCommand) -> Category:
        """Create a category. A new category never has books."""
        category_id = self._category_repo.add(command.name, command.description)
        logger.info("Created category id=%d", category_id)
        return Category(
            id=category_id,
            name=command.name,
            description=command.description,
            book_count=0,
        )

    def read(self, category_id: int) -> Category:
        """Return a category with its current book count.

        Raises:
            NotFoundError: If no category has this id.
        """
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def read_all(self) -> list[Category]:
        """Return every category with its book count."""
        return self._category_repo.list_all()

    def update(self, category_id: int, command: UpdateCategoryCommand) -> Category:
        """Merge the provided fields into an existing category.

        Raises:
            NotFoundError: If no category has this id.
        """
        current = self.read(category_id)
        merged = replace(
            current,
            name=command.name if command.name is not None else current.name,
            description=(
                command.description
                if command.description is not None
                else current.description
            ),
        )
        if not self._category_repo.update(merged):
            raise NotFoundError("Category not found")

        logger.info("Updated category id=%d", category_id)
        return merged

    def delete(self, category_id: int) -> None:
        """Remove a category that no book references.

        Raises:
            ConflictError: If books still reference the category.
            NotFoundError: If no category has this id.
        """
        if self._book_repo.count_by_category(category_id) > 0:
            logger.warning("Delete of category id=%d rejected: books attached", category_id)
            raise ConflictError("Cannot delete category with associated books")

        if not self._category_repo.delete(category_id):
            raise NotFoundError("Category not found")
        logger.info("Deleted category id=%d", category_id)
