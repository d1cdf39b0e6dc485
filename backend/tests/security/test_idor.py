"""
IDOR (Insecure Direct Object Reference) tests.

Another user's records must look exactly like records that do not exist:
every read, write and delete through a foreign id is a 404, and nothing
changes for the owner.
"""
import pytest
from httpx import AsyncClient

# (create path, create body without child_id, list segment, update path, update body, delete?)
RECORD_TYPES = [
    (
        "/api/growth",
        {"height": 60, "weight": 6, "measurement_date": "2025-06-01"},
        "growth",
        {"notes": "changed"},
        True,
    ),
    (
        "/api/milestones",
        {"category": "language", "milestone": "First word", "expected_age_months": 12},
        "milestones",
        {"achieved": True},
        False,
    ),
    (
        "/api/vaccinations",
        {"vaccine_name": "BCG", "recommended_age_months": 0},
        "vaccinations",
        {"administered": True},
        False,
    ),
    (
        "/api/nutrition",
        {"log_date": "2025-09-01", "type": "water", "description": "Sips"},
        "nutrition",
        None,
        True,
    ),
    (
        "/api/sleep",
        {"sleep_date": "2025-09-01", "start_time": "13:00", "end_time": "14:00", "duration": 60},
        "sleep",
        None,
        True,
    ),
    (
        "/api/health-notes",
        {"type": "allergy", "title": "Eggs", "note_date": "2025-09-01"},
        "health-notes",
        {"title": "changed"},
        True,
    ),
    (
        "/api/journal",
        {"title": "Beach", "media_type": "photo", "journal_date": "2025-09-01"},
        "journal",
        {"title": "changed"},
        True,
    ),
]


@pytest.fixture
async def victim_child_id(client: AsyncClient, auth_headers: dict[str, str]) -> int:
    response = await client.post(
        "/api/children",
        json={"name": "Victim", "date_of_birth": "2025-01-01", "gender": "other"},
        headers=auth_headers,
    )
    return response.json()["id"]


async def test_cannot_read_update_or_delete_other_users_child(
    client: AsyncClient,
    victim_child_id: int,
    auth_headers: dict[str, str],
    other_headers: dict[str, str],
) -> None:
    path = f"/api/children/{victim_child_id}"
    assert (await client.get(path, headers=other_headers)).status_code == 404
    assert (await client.patch(path, json={"name": "Mine"}, headers=other_headers)).status_code == 404
    assert (await client.delete(path, headers=other_headers)).status_code == 404

    still_there = await client.get(path, headers=auth_headers)
    assert still_there.status_code == 200
    assert still_there.json()["name"] == "Victim"


@pytest.mark.parametrize(
    ("create_path", "body", "segment", "update_body", "deletable"),
    RECORD_TYPES,
    ids=[r[2] for r in RECORD_TYPES],
)
async def test_other_users_records_are_invisible(
    client: AsyncClient,
    victim_child_id: int,
    auth_headers: dict[str, str],
    other_headers: dict[str, str],
    create_path: str,
    body: dict,
    segment: str,
    update_body: dict | None,
    deletable: bool,
) -> None:
    created = await client.post(
        create_path, json={**body, "child_id": victim_child_id}, headers=auth_headers,
    )
    assert created.status_code == 201
    record_id = created.json()["id"]

    # Listing through the victim's child
    listed = await client.get(f"/api/children/{victim_child_id}/{segment}", headers=other_headers)
    assert listed.status_code == 404

    # Creating a record on the victim's child
    injected = await client.post(
        create_path, json={**body, "child_id": victim_child_id}, headers=other_headers,
    )
    assert injected.status_code == 404

    if update_body is not None:
        response = await client.patch(
            f"{create_path}/{record_id}", json=update_body, headers=other_headers,
        )
        assert response.status_code == 404

    if deletable:
        response = await client.delete(f"{create_path}/{record_id}", headers=other_headers)
        assert response.status_code == 404

    owner_view = await client.get(f"/api/children/{victim_child_id}/{segment}", headers=auth_headers)
    assert [r["id"] for r in owner_view.json()] == [record_id]
    assert owner_view.json()[0] == created.json()


async def test_unknown_and_foreign_ids_are_indistinguishable(
    client: AsyncClient,
    victim_child_id: int,
    other_headers: dict[str, str],
) -> None:
    foreign = await client.get(f"/api/children/{victim_child_id}", headers=other_headers)
    missing = await client.get("/api/children/987654", headers=other_headers)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()
