"""
FastAPI routers for the library bounded context.

All routes delegate to services. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.

Reads of books and categories are public; every other write, and
every customer operation except registration and login, requires
a bearer token.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from slowapi import Limiter

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
from library_api.domain.library.entities import Book, Category, CustomerProfile
from library_api.infrastructure.library.token_service import JwtTokenService
from library_api.interfaces.library.dependencies import (
    get_book_service,
    get_category_service,
    get_customer_service,
    get_token_service,
    parse_item_id,
    require_customer,
)
from library_api.interfaces.library.schemas import (
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
)

AUTH_REQUIRED = [Depends(require_customer)]
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}

books_router = APIRouter(prefix="/books", tags=["books"], responses=ERROR_RESPONSES)
categories_router = APIRouter(
    prefix="/categories", tags=["categories"], responses=ERROR_RESPONSES
)
customers_router = APIRouter(
    prefix="/customers", tags=["customers"], responses=ERROR_RESPONSES
)


def _book_response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        title=book.title,
        author=book.author,
        publisher=book.publisher,
        publishing_year=book.publishing_year,
        category_id=book.category_id,
        category_name=book.category_name,
    )


def _category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        book_count=category.book_count,
    )


def _customer_response(customer: CustomerProfile) -> CustomerResponse:
    return CustomerResponse(id=customer.id, name=customer.name, email=customer.email)


# ------------------------------------------------------------------
# Books
# ------------------------------------------------------------------


@books_router.get("", response_model=list[BookResponse], summary="List books")
def list_books(
    service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    """Return every book with its category name."""
    return [_book_response(b) for b in service.read_all()]


@books_router.get("/{item_id}", response_model=BookResponse, summary="Get a book")
def get_book(
    book_id: int = Depends(parse_item_id),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Return a single book with its category name."""
    return _book_response(service.read(book_id))


@books_router.post(
    "",
    response_model=BookResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    dependencies=AUTH_REQUIRED,
    summary="Create a book",
)
def create_book(
    request: BookCreateRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a book in an existing category."""
    command = CreateBookCommand(
        title=request.title,
        author=request.author,
        publisher=request.publisher,
        publishing_year=request.publishing_year,
        category_id=request.category_id,
    )
    return _book_response(service.create(command))


@books_router.put(
    "/{item_id}",
    response_model=BookResponse,
    response_model_exclude_none=True,
    dependencies=AUTH_REQUIRED,
    summary="Update a book",
)
def update_book(
    request: BookUpdateRequest,
    book_id: int = Depends(parse_item_id),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Apply a partial update to a book."""
    command = UpdateBookCommand(
        title=request.title,
        author=request.author,
        publisher=request.publisher,
        publishing_year=request.publishing_year,
        category_id=request.category_id,
    )
    return _book_response(service.update(book_id, command))


@books_router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=AUTH_REQUIRED,
    summary="Delete a book",
)
def delete_book(
    book_id: int = Depends(parse_item_id),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    service.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ------------------------------------------------------------------
# Categories
# ------------------------------------------------------------------


@categories_router.get(
    "", response_model=list[CategoryResponse], summary="List categories"
)
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    """Return every category with its book count."""
    return [_category_response(c) for c in service.read_all()]


@categories_router.get(
    "/{item_id}", response_model=CategoryResponse, summary="Get a category"
)
def get_category(
    category_id: int = Depends(parse_item_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Return a single category with its book count."""
    return _category_response(service.read(category_id))


@categories_router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=AUTH_REQUIRED,
    summary="Create a category",
)
def create_category(
    request: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category."""
    command = CreateCategoryCommand(name=request.name, description=request.description)
    return _category_response(service.create(command))


@categories_router.put(
    "/{item_id}",
    response_model=CategoryResponse,
    dependencies=AUTH_REQUIRED,
    summary="Update a category",
)
def update_category(
    request: CategoryUpdateRequest,
    category_id: int = Depends(parse_item_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Apply a partial update to a category."""
    command = UpdateCategoryCommand(name=request.name, description=request.description)
    return _category_response(service.update(category_id, command))


@categories_router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=AUTH_REQUIRED,
    summary="Delete a category",
)
def delete_category(
    category_id: int = Depends(parse_item_id),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category that no book references."""
    service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ------------------------------------------------------------------
# Customers
# ------------------------------------------------------------------


@customers_router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
)
def register_customer(
    request: CustomerCreateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Register a new customer. The password is never echoed back."""
    command = CreateCustomerCommand(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return _customer_response(service.create(command))


@customers_router.get(
    "",
    response_model=list[CustomerResponse],
    dependencies=AUTH_REQUIRED,
    summary="List customers",
)
def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> list[CustomerResponse]:
    """Return every customer."""
    return [_customer_response(c) for c in service.read_all()]


@customers_router.get(
    "/{item_id}",
    response_model=CustomerResponse,
    dependencies=AUTH_REQUIRED,
    summary="Get a customer",
)
def get_customer(
    customer_id: int = Depends(parse_item_id),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Return a single customer."""
    return _customer_response(service.read(customer_id))


@customers_router.put(
    "/{item_id}",
    response_model=CustomerResponse,
    dependencies=AUTH_REQUIRED,
    summary="Update a customer",
)
def update_customer(
    request: CustomerUpdateRequest,
    customer_id: int = Depends(parse_item_id),
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    """Apply a partial update to a customer."""
    command = UpdateCustomerCommand(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    return _customer_response(service.update(customer_id, command))


@customers_router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=AUTH_REQUIRED,
    summary="Delete a customer",
)
def delete_customer(
    customer_id: int = Depends(parse_item_id),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Delete a customer."""
    service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ------------------------------------------------------------------
# Login
# ------------------------------------------------------------------


def create_auth_router(limiter: Limiter, login_limit: str) -> APIRouter:
    """Build the login router, rate limited by the application's limiter.

    Args:
        limiter: The limiter owned by the application being built.
        login_limit: slowapi limit string, e.g. ``"10/minute"``.
    """
    auth_router = APIRouter(tags=["auth"], responses=ERROR_RESPONSES)

    @auth_router.post("/login", response_model=LoginResponse, summary="Log in")
    @limiter.limit(login_limit)
    def login(
        request: Request,
        credentials: LoginRequest,
        service: CustomerService = Depends(get_customer_service),
        token_service: JwtTokenService = Depends(get_token_service),
    ) -> LoginResponse:
        """Exchange email and password for a bearer token."""
        customer = service.authenticate(credentials.email, credentials.password)
        return LoginResponse(
            token=token_service.issue(customer),
            customer=_customer_response(customer),
        )

    return auth_router
