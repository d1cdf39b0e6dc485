"""
Extract the session token from a request.

Web clients carry the session in an HTTP-only cookie set at login. Native
clients cannot rely on a cookie jar, so they store the token themselves and
send it as ``Authorization: Bearer <token>``. Both channels carry the same
token value.
"""
from fastapi import Request

from core.cookies import COOKIE_NAME

BEARER_PREFIX = "Bearer "


def get_bearer_token(request: Request) -> str | None:
    """Return the token from the Authorization header, or None."""
    header = request.headers.get("authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


def get_token_from_request(request: Request) -> str | None:
    """Return the Bearer token if present, else the session cookie, else None."""
    token = get_bearer_token(request)
    if token:
        return token
    return request.cookies.get(COOKIE_NAME) or None
