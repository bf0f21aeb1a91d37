"""Jinja2 template rendering for server-side pages."""

from pathlib import Path
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from src.expovote.core.config import get_settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render a template with the site-wide context (names, request id)."""
    settings = get_settings()
    page_context: dict[str, Any] = {
        "app_name": settings.app_name,
        "org_name": settings.org_name,
        "request_id": correlation_id.get(),
    }
    if context:
        page_context.update(context)
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)
