"""
Client-side session state machine shared by web and native clients.

A session starts in ``loading`` and settles in ``authenticated`` or
``anonymous``. Native clients may show the cached user immediately (first
paint) while the server is asked to confirm it; web clients wait for the
server. Either way the server has the last word: a cached user the server
no longer recognises is cleared.
"""
import logging
from enum import StrEnum
from typing import Literal

import httpx

from client.api_client import ApiError, BabyStepsClient
from client.session_store import SessionStore, SessionUser

logger = logging.getLogger(__name__)

Platform = Literal["web", "ios", "android"]

NETWORK_ERROR_MESSAGE = "Could not reach the server. Please try again."


class SessionState(StrEnum):
    """Lifecycle of a client session."""

    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class SessionManager:
    """
    Reconciles the locally cached session with the server.

    Args:
        api: Client for the auth endpoints.
        store: Where the token and cached user are persisted.
        trust_cache_before_verify: Expose the cached user before the server
            has confirmed it (native). Web clients pass False.
    """

    def __init__(
        self,
        api: BabyStepsClient,
        store: SessionStore,
        *,
        trust_cache_before_verify: bool,
    ) -> None:
        self.api = api
        self.store = store
        self.trust_cache_before_verify = trust_cache_before_verify
        self.state = SessionState.LOADING
        self.user: SessionUser | None = None
        # False while showing a cached user the server has not confirmed yet
        self.verified = False

    @classmethod
    def for_platform(
        cls,
        platform: Platform,
        api: BabyStepsClient,
        store: SessionStore,
    ) -> "SessionManager":
        """Create a manager with the cache policy for the given platform."""
        return cls(api, store, trust_cache_before_verify=platform != "web")

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    def _become_anonymous(self) -> None:
        self.state = SessionState.ANONYMOUS
        self.user = None
        self.verified = False

    async def _persist(self, token: str, user: SessionUser) -> None:
        await self.store.set_token(token)
        await self.store.set_user(user)
        self.state = SessionState.AUTHENTICATED
        self.user = user
        self.verified = True

    async def restore(self) -> SessionState:
        """
        Load the cached session for first paint.

        Only native clients look at the cache. Without a stored token they
        are anonymous straight away and no request is made.
        """
        if not self.trust_cache_before_verify:
            return self.state

        if not await self.store.get_token():
            self._become_anonymous()
            return self.state

        cached = await self.store.get_user()
        if cached is not None:
            self.state = SessionState.AUTHENTICATED
            self.user = cached
            self.verified = False
        return self.state

    async def verify(self) -> SessionState:
        """
        Confirm the session with the server.

        Tries ``/me`` first and falls back to a single token refresh. On
        success the token and user are saved; otherwise the local session is
        cleared.
        """
        token = await self.store.get_token()
        user = await self.api.get_me(token)
        if user is None:
            refreshed = await self.api.refresh_token(token)
            if refreshed is not None:
                token, user = refreshed

        if user is None:
            logger.info("Session could not be verified; signing out locally")
            await self.store.clear()
            self._become_anonymous()
            return self.state

        if token:
            await self.store.set_token(token)
        await self.store.set_user(user)
        self.state = SessionState.AUTHENTICATED
        self.user = user
        self.verified = True
        return self.state

    async def bootstrap(self) -> SessionState:
        """Restore, then verify unless restore already settled on anonymous."""
        if await self.restore() is SessionState.ANONYMOUS:
            return self.state
        return await self.verify()

    async def login(self, email: str, password: str) -> str | None:
        """
        Sign in.

        Returns:
            None on success, otherwise a message to show the user.
        """
        try:
            token, user = await self.api.login(email, password)
        except ApiError as e:
            return e.message
        except httpx.HTTPError:
            logger.warning("Login request failed", exc_info=True)
            return NETWORK_ERROR_MESSAGE
        await self._persist(token, user)
        return None

    async def register(self, email: str, password: str, name: str | None = None) -> str | None:
        """
        Create an account and sign in.

        Returns:
            None on success, otherwise a message to show the user.
        """
        try:
            token, user = await self.api.register(email, password, name)
        except ApiError as e:
            return e.message
        except httpx.HTTPError:
            logger.warning("Registration request failed", exc_info=True)
            return NETWORK_ERROR_MESSAGE
        await self._persist(token, user)
        return None

    async def logout(self) -> None:
        """
        Sign out.

        The server call only clears the cookie and may fail; the local token,
        cached user and cookie jar are cleared regardless.
        """
        token = await self.store.get_token()
        try:
            await self.api.logout(token)
        except (ApiError, httpx.HTTPError):
            logger.warning("Server logout failed; clearing local session anyway", exc_info=True)
        await self.store.clear()
        self.api.clear_cookies()
        self._become_anonymous()
