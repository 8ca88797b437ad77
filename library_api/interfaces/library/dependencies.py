"""
Dependency injection for the library bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into services via constructor injection, plus the bearer
authentication and path-id parsing used by the routers.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import Engine

from library_api.application.library.book_service import BookService
from library_api.application.library.category_service import CategoryService
from library_api.application.library.customer_service import CustomerService
from library_api.core.config import Settings
from library_api.domain.library.entities import TokenIdentity
from library_api.domain.library.errors import UnauthorizedError, ValidationError
from library_api.domain.library.validation import parse_int32
from library_api.infrastructure.library.book_repository import BookRepositoryAdapter
from library_api.infrastructure.library.category_repository import (
    CategoryRepositoryAdapter,
)
from library_api.infrastructure.library.customer_repository import (
    CustomerRepositoryAdapter,
)
from library_api.infrastructure.library.password_hasher import BcryptPasswordHasher
from library_api.infrastructure.library.token_service import JwtTokenService

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Token returned by POST /login",
)


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_engine(request: Request) -> Engine:
    """Return the application's shared database engine."""
    return request.app.state.engine


def get_customer_service(
    engine: Engine = Depends(get_engine),
    config: Settings = Depends(get_settings),
) -> CustomerService:
    """Build CustomerService with its infrastructure dependencies."""
    return CustomerService(
        customer_repo=CustomerRepositoryAdapter(engine=engine),
        password_hasher=BcryptPasswordHasher(rounds=config.bcrypt_rounds),
    )


def get_category_service(engine: Engine = Depends(get_engine)) -> CategoryService:
    """Build CategoryService with its infrastructure dependencies."""
    return CategoryService(
        category_repo=CategoryRepositoryAdapter(engine=engine),
        book_repo=BookRepositoryAdapter(engine=engine),
    )


def get_book_service(engine: Engine = Depends(get_engine)) -> BookService:
    """Build BookService with its infrastructure dependencies."""
    return BookService(
        book_repo=BookRepositoryAdapter(engine=engine),
        category_repo=CategoryRepositoryAdapter(engine=engine),
    )


def get_token_service(config: Settings = Depends(get_settings)) -> JwtTokenService:
    """Build the bearer token issuer from the JWT settings."""
    return JwtTokenService(
        secret=config.jwt_secret,
        issuer=config.jwt_issuer,
        audience=config.jwt_audience,
        expires_in_seconds=config.jwt_expiration_seconds,
    )


def require_customer(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: JwtTokenService = Depends(get_token_service),
) -> TokenIdentity:
    """Authenticate the caller from the ``Authorization: Bearer`` header.

    Raises:
        UnauthorizedError: If the header is missing, not a bearer
            credential, or the token fails verification.
    """
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")
    return token_service.verify(credentials.credentials)


def parse_item_id(item_id: str) -> int:
    """Parse the ``{item_id}`` path segment.

    Raises:
        ValidationError: If the segment is not a plain decimal integer
            that fits an INTEGER column.
    """
    parsed = parse_int32(item_id)
    if parsed is None:
        raise ValidationError("Invalid ID")
    return parsed
