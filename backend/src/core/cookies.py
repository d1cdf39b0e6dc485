"""Session cookie name and per-request cookie options."""
from typing import Any

from fastapi import Request, Response

from core.config import Settings

COOKIE_NAME = "app_session_id"
ONE_YEAR_SECONDS = 60 * 60 * 24 * 365


def is_secure_request(request: Request) -> bool:
    """True when the request reached us over HTTPS, directly or through a proxy."""
    if request.url.scheme == "https":
        return True
    forwarded = request.headers.get("x-forwarded-proto", "")
    return any(proto.strip().lower() == "https" for proto in forwarded.split(","))


def get_session_cookie_options(request: Request, settings: Settings) -> dict[str, Any]:
    """
    Build cookie attributes for the session cookie.

    Secure cookies use SameSite=None so the web client can call the API from a
    different origin; plain-HTTP development falls back to SameSite=Lax, since
    browsers reject SameSite=None without Secure.
    """
    secure = settings.cookie_secure if settings.cookie_secure is not None else is_secure_request(request)
    samesite = settings.cookie_samesite
    if samesite == "none":
        secure = True
    elif samesite is None:
        samesite = "none" if secure else "lax"
    return {
        "httponly": True,
        "path": "/",
        "secure": secure,
        "samesite": samesite,
        "domain": settings.cookie_domain or None,
    }


def set_session_cookie(
    response: Response,
    request: Request,
    settings: Settings,
    token: str,
) -> None:
    """Attach the session cookie with a one-year max-age."""
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=ONE_YEAR_SECONDS,
        **get_session_cookie_options(request, settings),
    )


def clear_session_cookie(response: Response, request: Request, settings: Settings) -> None:
    """Expire the session cookie in the browser."""
    response.delete_cookie(COOKIE_NAME, **get_session_cookie_options(request, settings))
