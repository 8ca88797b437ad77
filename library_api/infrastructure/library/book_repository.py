"""
Adapter: Book repository.

Implements BookRepository port.
Reads join the categories table to fill in the category name.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from library_api.domain.library.entities import Book
from library_api.domain.library.errors import ValidationError
from library_api.domain.library.ports import BookRepository

logger = logging.getLogger(__name__)

_SELECT_JOINED = """
    SELECT b.id, b.title, b.author, b.publisher, b.publishing_year,
           b.category_id, c.name AS category_name
    FROM books b
    JOIN categories c ON b.category_id = c.id
"""


class BookRepositoryAdapter(BookRepository):
    """Reads and writes the ``books`` table.

    The foreign key on ``category_id`` backs up the service-level
    existence check when a category is deleted concurrently.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(
        self,
        title: str,
        author: str,
        publisher: str,
        publishing_year: int,
        category_id: int,
    ) -> int:
        query = text(
            """
            INSERT INTO books (title, author, publisher, publishing_year, category_id)
            VALUES (:title, :author, :publisher, :publishing_year, :category_id)
            RETURNING id
            """
        )
        params = {
            "title": title,
            "author": author,
            "publisher": publisher,
            "publishing_year": publishing_year,
            "category_id": category_id,
        }
        try:
            with self._engine.begin() as conn:
                return conn.execute(query, params).scalar_one()
        except IntegrityError as exc:
            raise ValidationError("Category does not exist") from exc

    def get_by_id(self, book_id: int) -> Optional[Book]:
        query = text(f"{_SELECT_JOINED} WHERE b.id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": book_id}).first()
        return _to_book(row) if row is not None else None

    def list_all(self) -> list[Book]:
        query = text(f"{_SELECT_JOINED} ORDER BY b.id")
        with self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_book(row) for row in rows]

    def update(self, book: Book) -> bool:
        query = text(
            """
            UPDATE books
            SET title = :title, author = :author, publisher = :publisher,
                publishing_year = :publishing_year, category_id = :category_id
            WHERE id = :id
            """
        )
        params = {
            "id": book.id,
            "title": book.title,
            "author": book.author,
            "publisher": book.publisher,
            "publishing_year": book.publishing_year,
            "category_id": book.category_id,
        }
        try:
            with self._engine.begin() as conn:
                result = conn.execute(query, params)
                matched = result.rowcount > 0
        except IntegrityError as exc:
            raise ValidationError("Category does not exist") from exc
        return matched

    def delete(self, book_id: int) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(text("DELETE FROM books WHERE id = :id"), {"id": book_id})
            deleted = result.rowcount
        logger.debug("Delete book id=%d matched %d row(s).", book_id, deleted)
        return deleted > 0

    def count_by_category(self, category_id: int) -> int:
        query = text("SELECT COUNT(*) FROM books WHERE category_id = :category_id")
        with self._engine.connect() as conn:
            return conn.execute(query, {"category_id": category_id}).scalar_one()


def _to_book(row: Row) -> Book:
    return Book(
        id=row.id,
        title=row.title,
        author=row.author,
        publisher=row.publisher,
        publishing_year=row.publishing_year,
        category_id=row.category_id,
        category_name=row.category_name,
    )
