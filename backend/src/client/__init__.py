"""Python client for the BabySteps API session endpoints."""
from client.api_client import ApiError, BabyStepsClient
from client.session import SessionManager, SessionState
from client.session_store import (
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
    SessionUser,
)

__all__ = [
    "ApiError",
    "BabyStepsClient",
    "FileSessionStore",
    "MemorySessionStore",
    "SessionManager",
    "SessionState",
    "SessionStore",
    "SessionUser",
]
