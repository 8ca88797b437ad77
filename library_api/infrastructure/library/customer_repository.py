"""
Adapter: Customer repository.

Implements CustomerRepository port.
Persists customers with parameterized SQL through SQLAlchemy Core.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from library_api.domain.library.entities import Customer
from library_api.domain.library.errors import ConflictError
from library_api.domain.library.ports import CustomerRepository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "SELECT id, name, email, password FROM customers"


class CustomerRepositoryAdapter(CustomerRepository):
    """Reads and writes the ``customers`` table.

    The unique constraint on ``email`` backs up the service-level
    uniqueness check when two registrations race.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, name: str, email: str, password_hash: str) -> int:
        query = text(
            """
            INSERT INTO customers (name, email, password)
            VALUES (:name, :email, :password)
            RETURNING id
            """
        )
        try:
            with self._engine.begin() as conn:
                customer_id = conn.execute(
                    query,
                    {"name": name, "email": email, "password": password_hash},
                ).scalar_one()
        except IntegrityError as exc:
            raise ConflictError("Email already exists") from exc
        return customer_id

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        query = text(f"{_SELECT_COLUMNS} WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": customer_id}).first()
        return _to_customer(row) if row is not None else None

    def get_by_email(self, email: str) -> Optional[Customer]:
        query = text(f"{_SELECT_COLUMNS} WHERE email = :email")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"email": email}).first()
        return _to_customer(row) if row is not None else None

    def list_all(self) -> list[Customer]:
        query = text(f"{_SELECT_COLUMNS} ORDER BY id")
        with self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [_to_customer(row) for row in rows]

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        if exclude_id is None:
            query = text("SELECT COUNT(*) FROM customers WHERE email = :email")
            params = {"email": email}
        else:
            query = text(
                "SELECT COUNT(*) FROM customers WHERE email = :email AND id != :id"
            )
            params = {"email": email, "id": exclude_id}
        with self._engine.connect() as conn:
            count = conn.execute(query, params).scalar_one()
        return count > 0

    def update(self, customer: Customer) -> bool:
        query = text(
            """
            UPDATE customers
            SET name = :name, email = :email, password = :password
            WHERE id = :id
            """
        )
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    query,
                    {
                        "id": customer.id,
                        "name": customer.name,
                        "email": customer.email,
                        "password": customer.password_hash,
                    },
                )
                matched = result.rowcount > 0
        except IntegrityError as exc:
            raise ConflictError("Email already exists") from exc
        return matched

    def delete(self, customer_id: int) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(
                text("DELETE FROM customers WHERE id = :id"), {"id": customer_id}
            )
            deleted = result.rowcount
        logger.debug("Delete customer id=%d matched %d row(s).", customer_id, deleted)
        return deleted > 0


def _to_customer(row: Row) -> Customer:
    return Customer(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password,
    )
