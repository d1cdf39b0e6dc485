"""
Local persistence for the client session: the token and the cached user.

The cached user only exists so a native app can paint the signed-in screen
before the network answers. It is always re-verified against the server.
"""
import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

TOKEN_KEY = "app_session_token"
USER_INFO_KEY = "app_user_info"


class SessionUser(BaseModel):
    """User as returned by the auth endpoints (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
    last_signed_in: datetime


class SessionStore(Protocol):
    """Key/value storage for the session token and cached user."""

    async def get_token(self) -> str | None: ...

    async def set_token(self, token: str) -> None: ...

    async def get_user(self) -> SessionUser | None: ...

    async def set_user(self, user: SessionUser) -> None: ...

    async def clear(self) -> None: ...


class MemorySessionStore:
    """In-process store (web clients, whose real session lives in the cookie jar)."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get_token(self) -> str | None:
        return self._data.get(TOKEN_KEY)

    async def set_token(self, token: str) -> None:
        self._data[TOKEN_KEY] = token

    async def get_user(self) -> SessionUser | None:
        raw = self._data.get(USER_INFO_KEY)
        return SessionUser.model_validate_json(raw) if raw else None

    async def set_user(self, user: SessionUser) -> None:
        self._data[USER_INFO_KEY] = user.model_dump_json(by_alias=True)

    async def clear(self) -> None:
        self._data.pop(TOKEN_KEY, None)
        self._data.pop(USER_INFO_KEY, None)


class FileSessionStore:
    """
    JSON file store (native clients).

    Writes go to a temp file that replaces the target, so a crash mid-write
    never leaves a half-written session behind. An unreadable file is treated
    as an empty session.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable session file %s", self.path, exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    async def get_token(self) -> str | None:
        token = self._read().get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    async def set_token(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    async def get_user(self) -> SessionUser | None:
        raw = self._read().get(USER_INFO_KEY)
        if not raw:
            return None
        try:
            return SessionUser.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding malformed cached user")
            return None

    async def set_user(self, user: SessionUser) -> None:
        data = self._read()
        data[USER_INFO_KEY] = user.model_dump_json(by_alias=True)
        self._write(data)

    async def clear(self) -> None:
        data = self._read()
        data.pop(TOKEN_KEY, None)
        data.pop(USER_INFO_KEY, None)
        self._write(data)
