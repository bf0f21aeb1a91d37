"""Domain exceptions and the handlers that turn them into HTML error pages."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.expovote.core.logging import get_logger
from src.expovote.core.templates import render

logger = get_logger(__name__)


class ExpoVoteError(Exception):
    """Base class for every error the application raises on purpose."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "Ocorreu um erro interno. Tente novamente em instantes."

    def __init__(self, message: str | None = None):
        self.message = message or self.public_message
        super().__init__(self.message)


class ValidationError(ExpoVoteError):
    """Missing or malformed user input."""

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Requisição inválida."


class NotFoundError(ExpoVoteError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Recurso não encontrado."


class ProjectNotFound(NotFoundError):
    public_message = "Projeto não encontrado."

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(self.public_message)


class DuplicateVote(ExpoVoteError):
    """The voter already has a vote for this project.

    This is an expected outcome rendered as a regular page, not a failure page.
    """

    status_code = status.HTTP_200_OK
    public_message = "Você já votou neste projeto."

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(self.public_message)


class StorageError(ExpoVoteError):
    """Persistence layer failure. Detail is logged, never rendered."""


class StorageUnavailable(StorageError):
    """Connection lost, refused or timed out."""


class ConstraintViolation(StorageError):
    """The database rejected a write (missing foreign key, unique clash)."""


class QRCodeError(ExpoVoteError):
    """The QR payload could not be encoded."""


def _error_page(request: Request, status_code: int, message: str) -> Response:
    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def render_unexpected_error(request: Request, exc: Exception) -> Response:
    """Log an unhandled exception and render the generic 500 page."""
    logger.exception(
        "Unhandled exception",
        exc_info=exc,
        request_id=correlation_id.get(),
        path=request.url.path,
    )
    return _error_page(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, ExpoVoteError.public_message
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that render error pages with the request id."""

    @app.exception_handler(ExpoVoteError)
    async def expovote_exception_handler(request: Request, exc: ExpoVoteError) -> Response:
        if isinstance(exc, StorageError | QRCodeError):
            # Full detail already logged where the error was translated
            message = exc.public_message
        else:
            message = exc.message
        return _error_page(request, exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        logger.info("Rejected invalid request", path=request.url.path, errors=exc.errors())
        return _error_page(request, status.HTTP_400_BAD_REQUEST, ValidationError.public_message)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = NotFoundError.public_message
        else:
            message = str(exc.detail)
        return _error_page(request, exc.status_code, message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> Response:
        # Only reached for errors raised outside the logging-context middleware
        return render_unexpected_error(request, exc)
