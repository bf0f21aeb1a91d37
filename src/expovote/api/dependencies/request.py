"""Request-derived values: voter identity and public base URL."""

from typing import Annotated

from fastapi import Depends, Request

from src.expovote.core.config import get_settings
from src.expovote.core.identity import voter_id_for_request
from src.expovote.core.logging import bind_voter_context


def get_voter_id(request: Request) -> str:
    """Pseudo-identifier of the voting client, bound to the log context."""
    voter_id = voter_id_for_request(request, get_settings().trusted_proxy_ips)
    bind_voter_context(voter_id)
    return voter_id


def get_public_base_url(request: Request) -> str:
    """BASE_URL if configured, otherwise the URL this request was addressed to."""
    configured = get_settings().base_url
    if configured:
        return configured
    return str(request.base_url).rstrip("/")


VoterId = Annotated[str, Depends(get_voter_id)]
PublicBaseUrl = Annotated[str, Depends(get_public_base_url)]
