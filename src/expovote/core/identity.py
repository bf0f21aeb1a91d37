"""Voter identification from connection metadata.

The identifier is a heuristic, not an authenticated identity: people sharing
an address and browser build collide, and anyone changing network or browser
gets a fresh identifier. It only discourages casual repeat voting.
"""

from hashlib import md5

from starlette.requests import Request

UNKNOWN_ADDRESS = "unknown"


def compute_voter_id(source_address: str | None, agent_string: str | None) -> str:
    """Hash address and user agent into a 32-character hex identifier."""
    material = f"{source_address or ''}{agent_string or ''}"
    return md5(material.encode(), usedforsecurity=False).hexdigest()


def get_client_address(request: Request, trusted_proxy_ips: list[str]) -> str:
    """Resolve the address a request came from.

    X-Forwarded-For is only honoured when the direct peer is a trusted proxy,
    otherwise any client could pick its own identity. The list is read from
    the right: each trusted proxy appends the address it saw, so the nearest
    hop that is not a known proxy is the client. Entries further left were
    supplied by the client and are ignored.
    """
    peer = request.client.host if request.client else None
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for and peer is not None and _is_trusted(peer, trusted_proxy_ips):
        for hop in reversed(forwarded_for.split(",")):
            hop = hop.strip()
            if hop and hop not in trusted_proxy_ips:
                return hop
    return peer or UNKNOWN_ADDRESS


def _is_trusted(peer: str, trusted_proxy_ips: list[str]) -> bool:
    return "*" in trusted_proxy_ips or peer in trusted_proxy_ips


def voter_id_for_request(request: Request, trusted_proxy_ips: list[str]) -> str:
    return compute_voter_id(
        get_client_address(request, trusted_proxy_ips),
        request.headers.get("user-agent", ""),
    )
