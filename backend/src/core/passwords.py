"""Password hashing with bcrypt."""
import asyncio
import secrets
from functools import lru_cache

import bcrypt

# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password against a stored bcrypt hash.

    A missing hash (account created through an OAuth provider) never matches.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Corrupt stored hash or over-long password
        return False


async def hash_password_async(password: str, rounds: int = 12) -> str:
    """Hash a password in a worker thread so the event loop keeps serving requests."""
    return await asyncio.to_thread(hash_password, password, rounds)


async def verify_password_async(password: str, hashed_password: str | None) -> bool:
    """Verify a password in a worker thread."""
    return await asyncio.to_thread(verify_password, password, hashed_password)


@lru_cache
def dummy_hash(rounds: int = 12) -> str:
    """A hash of a random secret at the given cost, for equalizing login timing."""
    return hash_password(secrets.token_urlsafe(16), rounds)


async def burn_password_check(password: str, rounds: int = 12) -> None:
    """Spend the same bcrypt work as a real check when there is no hash to check against."""
    hashed = await asyncio.to_thread(dummy_hash, rounds)
    await verify_password_async(password, hashed)
