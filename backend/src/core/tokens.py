"""
Session token codec.

Session tokens are HS256 JWTs carrying a single custom claim, ``userId``, plus
issuer, audience and expiry. They are stateless: there is no revocation list,
so a token stays valid until it expires or the client throws it away.
"""
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from core.config import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_ISSUER = "babysteps"
JWT_AUDIENCE = "babysteps-app"

ONE_YEAR = timedelta(days=365)


@dataclass(frozen=True)
class TokenPayload:
    """Verified claims of a session token."""

    user_id: int


def _get_secret(settings: Settings) -> str:
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is required for auth")
    return settings.jwt_secret


def create_token(
    user_id: int,
    settings: Settings,
    expires_in: timedelta = ONE_YEAR,
    now: datetime | None = None,
) -> str:
    """
    Issue a signed session token for a user.

    Args:
        user_id: Numeric user ID placed in the ``userId`` claim.
        settings: Settings providing the signing secret.
        expires_in: Token lifetime (default one year).
        now: Issue time; defaults to the current UTC time. Tests pass a fixed
            clock to produce already-expired tokens.

    Raises:
        RuntimeError: If the signing secret is not configured.
    """
    issued_at = now or datetime.now(UTC)
    payload = {
        "userId": user_id,
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(
        payload,
        _get_secret(settings),
        algorithm=JWT_ALGORITHM,
        headers={"typ": "JWT"},
    )


def verify_token(token: str, settings: Settings) -> TokenPayload | None:
    """
    Verify a session token.

    Returns None for every failure mode (bad signature, wrong issuer or
    audience, expired, malformed, non-integer ``userId``). Callers must not try
    to tell these apart.
    """
    try:
        claims = jwt.decode(
            token,
            _get_secret(settings),
            algorithms=[JWT_ALGORITHM],
            audience=JWT_AUDIENCE,
            issuer=JWT_ISSUER,
            options={"require": ["exp", "iss", "aud"]},
        )
    except jwt.PyJWTError as e:
        logger.debug("Session token rejected: %s", e)
        return None

    user_id = claims.get("userId")
    # bool is a subclass of int; a boolean claim is still malformed
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        return None
    return TokenPayload(user_id=user_id)
