import asyncio
import contextlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import RequestResponseEndpoint

from src.expovote.api.routes.router import page_router
from src.expovote.core.config import get_settings
from src.expovote.core.db import bootstrap_schema, dispose_engine, get_engine
from src.expovote.core.exceptions import render_unexpected_error, setup_exception_handlers
from src.expovote.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.expovote.core.metrics import setup_metrics
from src.expovote.core.security import SecurityHeadersMiddleware, limiter
from src.expovote.core.security.rate_limit import rate_limit_exceeded_handler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", org_name=settings.org_name)

    # Bootstrap in the background so the server answers (and /health reports
    # the database state) while the database is still unreachable.
    schema_task: asyncio.Task[bool] | None = None
    if settings.database_auto_create_schema:
        schema_task = asyncio.create_task(
            bootstrap_schema(
                get_engine(),
                settings.schema_init_max_attempts,
                settings.schema_init_retry_delay,
            )
        )
    app.state.schema_task = schema_task

    yield

    logger.info("Shutting down")
    if schema_task is not None and not schema_task.done():
        schema_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await schema_task
    await dispose_engine()
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=f"Votação de projetos - {settings.org_name}",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    setup_exception_handlers(app)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]

    # Logging context - binds request_id to structlog context
    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id to log context and render unexpected errors.

        Errors are turned into the 500 page here, inside the security headers
        and correlation id middlewares, so that page carries both.
        """
        clear_request_context()
        bind_request_context(correlation_id.get())
        try:
            return await call_next(request)
        except Exception as exc:
            return render_unexpected_error(request, exc)
        finally:
            clear_request_context()

    app.add_middleware(SecurityHeadersMiddleware, content_security_policy=settings.csp)

    # Correlation ID - outermost, so every layer below sees the request id
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(page_router)
    setup_metrics(app)

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.expovote.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
