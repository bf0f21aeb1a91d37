"""Security headers middleware for server-rendered pages."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every response.

    Pages embed user-supplied project names, so the CSP forbids scripts
    outright; the templates only need inline styles and same-origin images.
    """

    def __init__(
        self,
        app: ASGIApp,
        content_security_policy: str,
        x_content_type_options: str = "nosniff",
        x_frame_options: str = "DENY",
        referrer_policy: str = "same-origin",
    ):
        super().__init__(app)
        self.headers: dict[str, str] = {}
        if content_security_policy:
            self.headers["Content-Security-Policy"] = content_security_policy
        if x_content_type_options:
            self.headers["X-Content-Type-Options"] = x_content_type_options
        if x_frame_options:
            self.headers["X-Frame-Options"] = x_frame_options
        if referrer_policy:
            self.headers["Referrer-Policy"] = referrer_policy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for header, value in self.headers.items():
            response.headers.setdefault(header, value)
        return response
