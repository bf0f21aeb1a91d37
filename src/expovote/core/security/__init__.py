"""Security utilities - response headers and rate limiting."""

from src.expovote.core.security.headers import SecurityHeadersMiddleware
from src.expovote.core.security.rate_limit import get_rate_limit_key, limiter

__all__ = [
    "SecurityHeadersMiddleware",
    "get_rate_limit_key",
    "limiter",
]
