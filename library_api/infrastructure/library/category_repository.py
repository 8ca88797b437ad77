"""
Adapter: Category repository.

Implements CategoryRepository port.
Book counts are aggregated with a LEFT JOIN on every read.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from library_api.domain.library.entities import Category
from library_api.domain.library.errors import ConflictError
from library_api.domain.library.ports import CategoryRepository

logger = logging.getLogger(__name__)

_SELECT_WITH_COUNT = """
    SELECT c.id, c.name, c.description, COUNT(b.id) AS book_count
    FROM categories c
    LEFT JOIN books b ON c.id = b.category_id
"""
_GROUP_BY = "GROUP BY c.id, c.name, c.description"


class CategoryRepositoryAdapter(CategoryRepository):
    """Reads and writes the ``categories`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, name: str, description: str) -> int:
        query = text(
            """
            INSERT INTO categories (name, description)
            VALUES (:name, :description)
            RETURNING id
            """
        )
        with self._engine.begin() as conn:
            return conn.execute(
                query, {"name": name, "description": description}
            ).scalar_one()

    def get_by_id(self, category_id: int) -> Optional[Category]:
        query = text(f"{_SELECT_WITH_COUNT} WHERE c.id = :id {_GROUP_BY}")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": category_id}).first()
        return _to_category(row) if row is not None else None

    def list_all(self) -> list[Category]:
        query = text(f"{_SELECT_WITH_COUNT} {_GROUP_BY} ORDER BY c.id")
        with self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_category(row) for row in rows]

    def exists(self, category_id: int) -> bool:
        query = text("SELECT COUNT(*) FROM categories WHERE id = :id")
        with self._engine.connect() as conn:
            return conn.execute(query, {"id": category_id}).scalar_one() > 0

    def update(self, category: Category) -> bool:
        query = text(
            """
            UPDATE categories
            SET name = :name, description = :description
            WHERE id = :id
            """
        )
        with self._engine.begin() as conn:
            result = conn.execute(
                query,
                {
                    "id": category.id,
                    "name": category.name,
                    "description": category.description,
                },
            )
            return result.rowcount > 0

    def delete(self, category_id: int) -> bool:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    text("DELETE FROM categories WHERE id = :id"), {"id": category_id}
                )
                deleted = result.rowcount
        except IntegrityError as exc:
            # A book was attached after the service-level check.
            raise ConflictError("Cannot delete category with associated books") from exc
        logger.debug("Delete category id=%d matched %d row(s).", category_id, deleted)
        return deleted > 0


def _to_category(row: Row) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        book_count=row.book_count,
    )
