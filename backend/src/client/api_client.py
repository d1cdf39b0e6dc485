"""HTTP client for the BabySteps auth endpoints."""
import logging
from typing import Any

import httpx

from client.session_store import SessionUser

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server's error message."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _error_message(response: httpx.Response) -> str:
    """Pull ``error`` (auth routes) or ``detail`` (domain routes) out of an error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if isinstance(message, str):
            return message
    return response.reason_phrase


class BabyStepsClient:
    """
    Thin async wrapper around the auth endpoints.

    The underlying ``httpx.AsyncClient`` keeps a cookie jar, which plays the
    part of the browser for web sessions. Native sessions pass the stored
    token explicitly and it is sent as ``Authorization: Bearer``.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http

    @classmethod
    def create(cls, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> "BabyStepsClient":
        """Create a client with its own connection pool."""
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout))

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http.aclose()

    @staticmethod
    def _headers(token: str | None) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> dict[str, Any]:
        response = await self.http.post(path, json=json, headers=self._headers(token))
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
    ) -> tuple[str, SessionUser]:
        """
        Create an account.

        Returns:
            The session token and the new user.

        Raises:
            ApiError: On validation failure (400) or a taken email (409).
        """
        body: dict[str, Any] = {"email": email, "password": password}
        if name:
            body["name"] = name
        data = await self._post("/api/auth/register", json=body)
        return data["token"], SessionUser.model_validate(data["user"])

    async def login(self, email: str, password: str) -> tuple[str, SessionUser]:
        """
        Sign in.

        Raises:
            ApiError: 401 "Invalid email or password" for any credential failure.
        """
        data = await self._post("/api/auth/login", json={"email": email, "password": password})
        return data["token"], SessionUser.model_validate(data["user"])

    async def get_me(self, token: str | None = None) -> SessionUser | None:
        """Return the signed-in user, or None if the session is not valid."""
        try:
            response = await self.http.get("/api/auth/me", headers=self._headers(token))
        except httpx.HTTPError:
            logger.warning("GET /api/auth/me failed", exc_info=True)
            return None
        if response.is_error:
            return None
        user = response.json().get("user")
        return SessionUser.model_validate(user) if user else None

    async def refresh_token(self, token: str | None) -> tuple[str, SessionUser] | None:
        """Exchange a token for a fresh one. None if there is no token or it is rejected."""
        if not token:
            return None
        try:
            data = await self._post("/api/auth/refresh", token=token)
        except ApiError as e:
            logger.info("Token refresh rejected: %s", e)
            return None
        except httpx.HTTPError:
            logger.warning("POST /api/auth/refresh failed", exc_info=True)
            return None
        return data["token"], SessionUser.model_validate(data["user"])

    async def logout(self, token: str | None = None) -> None:
        """Ask the server to clear the session cookie."""
        await self._post("/api/auth/logout", token=token)

    async def establish_session(self, token: str) -> SessionUser:
        """
        Turn a Bearer token into a cookie session (web).

        Raises:
            ApiError: 400 without a token, 401 if the token is invalid.
        """
        data = await self._post("/api/auth/session", token=token)
        return SessionUser.model_validate(data["user"])

    def clear_cookies(self) -> None:
        """Forget any session cookie held by the local cookie jar."""
        self.http.cookies.clear()
