"""Shared fixtures for API tests."""
import pytest
from httpx import AsyncClient


@pytest.fixture
async def child_id(client: AsyncClient, auth_headers: dict[str, str]) -> int:
    """Create a child for test_user through the API and return its id."""
    response = await client.post(
        "/api/children",
        json={"name": "Ada", "date_of_birth": "2025-03-01", "gender": "female"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()["id"]
