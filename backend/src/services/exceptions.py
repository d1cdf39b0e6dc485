"""Shared exceptions for service layer operations."""


class EntityNotFoundError(Exception):
    """
    Raised when a record does not exist or is not owned by the requesting user.

    Both cases share one error so callers cannot probe for other users' IDs.
    """

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        super().__init__(f"{entity_name} not found")


class UserAlreadyExistsError(Exception):
    """Raised when registering an external identity that is already taken."""

    def __init__(self, open_id: str) -> None:
        self.open_id = open_id
        super().__init__("An account with this email already exists")
