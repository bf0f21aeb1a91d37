"""Rate limiting for the public write endpoints.

Voter identity is only a hash of address and user agent, so a script cycling
user agents could stuff the ballot; limiting requests per address bounds that.
In-memory storage, per process. Disabled in the testing environment.
"""

from fastapi import Request, status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.responses import Response

from src.expovote.core.config import get_settings
from src.expovote.core.identity import get_client_address
from src.expovote.core.logging import get_logger
from src.expovote.core.templates import render

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Rate limit key: the client address, honouring trusted proxies only."""
    return get_client_address(request, get_settings().trusted_proxy_ips)


def vote_limit() -> str:
    return get_settings().vote_rate_limit


def register_limit() -> str:
    return get_settings().register_rate_limit


def create_limiter() -> Limiter:
    """Create the rate limiter. Disabled in testing environment."""
    settings = get_settings()
    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)
    return Limiter(key_func=get_rate_limit_key)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    logger.warning("Rate limit exceeded", path=request.url.path, limit=str(exc.detail))
    return render(
        request,
        "error.html",
        {
            "status_code": status.HTTP_429_TOO_MANY_REQUESTS,
            "message": "Muitas requisições. Aguarde um instante e tente novamente.",
        },
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    )


# Note: reads settings at import time; reconfiguring requires a restart.
limiter = create_limiter()
