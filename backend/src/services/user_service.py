"""
Service layer for user accounts (the credential store).

Local password accounts are keyed by ``open_id = "local:" + normalized
email``. Registration conflict checks and login lookups both go through
normalize_email(), so "A@x.com " and "a@x.com" are the same account.
"""
import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.passwords import burn_password_check, verify_password_async
from models.user import LOCAL_OPEN_ID_PREFIX, User
from services.exceptions import UserAlreadyExistsError

logger = logging.getLogger(__name__)

LOCAL_LOGIN_METHOD = "email"


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address."""
    return email.strip().lower()


def local_open_id(email: str) -> str:
    """Build the external identity for a password account."""
    return f"{LOCAL_OPEN_ID_PREFIX}{normalize_email(email)}"


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by numeric ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_open_id(db: AsyncSession, open_id: str) -> User | None:
    """Get a user by external identity."""
    result = await db.execute(select(User).where(User.open_id == open_id))
    return result.scalar_one_or_none()


async def get_user_by_local_email(db: AsyncSession, email: str) -> User | None:
    """Get a password account by email (normalized before lookup)."""
    return await get_user_by_open_id(db, local_open_id(email))


async def create_user(
    db: AsyncSession,
    email: str,
    password_hash: str,
    name: str | None = None,
) -> User:
    """
    Create a local password account.

    The insert runs in a SAVEPOINT so a unique-constraint violation (a
    concurrent registration that won the race) leaves the request's
    transaction usable.

    Raises:
        UserAlreadyExistsError: If the email is already registered.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    normalized = normalize_email(email)
    open_id = local_open_id(normalized)
    user = User(
        open_id=open_id,
        email=normalized,
        name=name,
        login_method=LOCAL_LOGIN_METHOD,
        password_hash=password_hash,
        last_signed_in=datetime.now(UTC),
    )
    try:
        async with db.begin_nested():
            db.add(user)
    except IntegrityError as e:
        raise UserAlreadyExistsError(open_id) from e
    await db.refresh(user)
    logger.info("Created local account user_id=%s", user.id)
    return user


async def upsert_user(
    db: AsyncSession,
    open_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    login_method: str | None = None,
    owner_open_id: str = "",
) -> User:
    """
    Insert or update an account that signs in through an external provider.

    Only the provided fields are written. The configured owner is promoted to
    admin; other roles are left as they are.
    """
    user = await get_user_by_open_id(db, open_id)
    if user is None:
        user = User(open_id=open_id, last_signed_in=datetime.now(UTC))
        db.add(user)

    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if login_method is not None:
        user.login_method = login_method
    if owner_open_id and open_id == owner_open_id:
        user.role = "admin"
    user.last_signed_in = datetime.now(UTC)

    await db.flush()
    await db.refresh(user)
    return user


async def update_last_signed_in(db: AsyncSession, user: User) -> None:
    """Stamp the user's last_signed_in with the current time."""
    user.last_signed_in = datetime.now(UTC)
    await db.flush()


async def check_password(user: User | None, password: str, rounds: int = 12) -> bool:
    """
    Check a password against the user's stored hash.

    Unknown users and accounts without a password hash (provider-originated)
    always fail, after the same bcrypt work as a real check.
    """
    if user is None or not user.password_hash:
        await burn_password_check(password, rounds)
        return False
    return await verify_password_async(password, user.password_hash)
