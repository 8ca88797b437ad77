"""
Database engine and schema.

Builds the single SQLAlchemy engine (connection pool) shared by all
repositories and declares the three library tables. The schema is
created at application startup when absent.
"""

import logging

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from library_api.core.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()

customers_table = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
)

categories_table = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=False),
)

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), nullable=False),
    Column("publisher", String(255), nullable=False),
    Column("publishing_year", Integer, nullable=False),
    Column("category_id", Integer, ForeignKey("categories.id"), nullable=False),
)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    """SQLite ignores foreign keys unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(config: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    In test mode (``database_in_memory``) every engine gets its own
    private in-memory SQLite database held by a single shared connection.

    Args:
        config: Application settings.

    Returns:
        A configured engine.
    """
    if config.database_in_memory:
        logger.info("Using in-memory SQLite database")
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        url = make_url(config.database_url)
        if config.database_user:
            url = url.set(username=config.database_user)
        if config.database_password:
            url = url.set(password=config.database_password)
        logger.info(
            "Connecting to database at %s",
            url.render_as_string(hide_password=True),
        )
        engine = create_engine(url, pool_pre_ping=True)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_schema(engine: Engine) -> None:
    """Create the library tables if they do not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s)", ", ".join(metadata.tables))
