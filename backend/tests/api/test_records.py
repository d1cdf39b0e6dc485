"""Tests for the child record endpoints (growth, milestones, vaccinations, logs, notes, journal)."""
import pytest
from httpx import AsyncClient


class TestGrowth:
    """Growth measurement endpoints."""

    async def test_create_and_list_newest_first(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        for day, height in (("2025-06-01", 60.5), ("2025-08-01", 64.25), ("2025-07-01", 62)):
            response = await client.post(
                "/api/growth",
                json={
                    "child_id": child_id,
                    "height": height,
                    "weight": 6.8,
                    "measurement_date": day,
                },
                headers=auth_headers,
            )
            assert response.status_code == 201

        response = await client.get(f"/api/children/{child_id}/growth", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert [m["measurement_date"] for m in data] == ["2025-08-01", "2025-07-01", "2025-06-01"]
        assert data[0]["height"] == pytest.approx(64.25)

    @pytest.mark.parametrize("field", ["height", "weight"])
    async def test_create_rejects_non_positive(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str], field: str,
    ) -> None:
        body = {"child_id": child_id, "height": 60, "weight": 6, "measurement_date": "2025-06-01"}
        body[field] = 0
        response = await client.post("/api/growth", json=body, headers=auth_headers)
        assert response.status_code == 422

    async def test_update_and_delete(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        created = await client.post(
            "/api/growth",
            json={"child_id": child_id, "height": 60, "weight": 6, "measurement_date": "2025-06-01"},
            headers=auth_headers,
        )
        record_id = created.json()["id"]

        updated = await client.patch(
            f"/api/growth/{record_id}", json={"weight": 6.4}, headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["weight"] == pytest.approx(6.4)
        assert updated.json()["height"] == pytest.approx(60)

        assert (await client.delete(f"/api/growth/{record_id}", headers=auth_headers)).status_code == 204
        assert (await client.delete(f"/api/growth/{record_id}", headers=auth_headers)).status_code == 404

    async def test_unknown_child(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        response = await client.get("/api/children/424242/growth", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Child not found"


class TestMilestones:
    """Developmental milestone endpoints."""

    async def test_create_list_and_mark_achieved(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        for milestone, months in (("Walks", 12), ("Rolls over", 4)):
            response = await client.post(
                "/api/milestones",
                json={
                    "child_id": child_id,
                    "category": "motor",
                    "milestone": milestone,
                    "expected_age_months": months,
                },
                headers=auth_headers,
            )
            assert response.status_code == 201
            assert response.json()["achieved"] is False

        listed = await client.get(f"/api/children/{child_id}/milestones", headers=auth_headers)
        assert [m["milestone"] for m in listed.json()] == ["Rolls over", "Walks"]

        record_id = listed.json()[0]["id"]
        updated = await client.patch(
            f"/api/milestones/{record_id}",
            json={"achieved": True, "achieved_date": "2025-07-04"},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["achieved"] is True
        assert updated.json()["achieved_date"] == "2025-07-04"

    async def test_rejects_unknown_category(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/milestones",
            json={
                "child_id": child_id,
                "category": "athletic",
                "milestone": "Runs",
                "expected_age_months": 18,
            },
            headers=auth_headers,
        )
        assert response.status_code == 422


class TestVaccinations:
    """Vaccination endpoints."""

    async def test_schedule_ordered_by_age_and_administer(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        for name, months in (("MMR", 12), ("HepB", 0)):
            response = await client.post(
                "/api/vaccinations",
                json={"child_id": child_id, "vaccine_name": name, "recommended_age_months": months},
                headers=auth_headers,
            )
            assert response.status_code == 201

        listed = await client.get(f"/api/children/{child_id}/vaccinations", headers=auth_headers)
        assert [v["vaccine_name"] for v in listed.json()] == ["HepB", "MMR"]

        record_id = listed.json()[0]["id"]
        updated = await client.patch(
            f"/api/vaccinations/{record_id}",
            json={"administered": True, "administered_date": "2025-03-02", "clinic": "City Clinic"},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["administered"] is True
        assert updated.json()["clinic"] == "City Clinic"


class TestNutrition:
    """Nutrition log endpoints."""

    async def post_entry(
        self, client: AsyncClient, headers: dict[str, str], child_id: int, log_date: str, time: str,
    ) -> int:
        response = await client.post(
            "/api/nutrition",
            json={
                "child_id": child_id,
                "log_date": log_date,
                "type": "breastfeeding",
                "description": "Feed",
                "duration": 15,
                "time": time,
            },
            headers=headers,
        )
        assert response.status_code == 201
        return response.json()["id"]

    async def test_filter_by_day_orders_by_time(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        await self.post_entry(client, auth_headers, child_id, "2025-09-01", "18:00")
        await self.post_entry(client, auth_headers, child_id, "2025-09-01", "06:30")
        await self.post_entry(client, auth_headers, child_id, "2025-09-02", "07:00")

        day = await client.get(
            f"/api/children/{child_id}/nutrition",
            params={"log_date": "2025-09-01"},
            headers=auth_headers,
        )
        assert [e["time"] for e in day.json()] == ["06:30", "18:00"]

        everything = await client.get(f"/api/children/{child_id}/nutrition", headers=auth_headers)
        assert len(everything.json()) == 3
        assert everything.json()[0]["log_date"] == "2025-09-02"

    async def test_rejects_bad_time(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/nutrition",
            json={
                "child_id": child_id,
                "log_date": "2025-09-01",
                "type": "formula",
                "description": "Bottle",
                "time": "7pm",
            },
            headers=auth_headers,
        )
        assert response.status_code == 422

    async def test_delete(self, client: AsyncClient, child_id: int, auth_headers: dict[str, str]) -> None:
        record_id = await self.post_entry(client, auth_headers, child_id, "2025-09-01", "08:00")
        response = await client.delete(f"/api/nutrition/{record_id}", headers=auth_headers)
        assert response.status_code == 204
        listed = await client.get(f"/api/children/{child_id}/nutrition", headers=auth_headers)
        assert listed.json() == []


class TestSleep:
    """Sleep log endpoints."""

    async def test_create_defaults_quality_and_filters_by_day(
        self, client: AsyncClient, child_id: int, auth_headers: dict[str, str],
    ) -> None:
        for day in ("2025-09-01", "2025-09-02"):
            response = await client.post(
                "/api/sleep",
                json={
                    "child_id": child_id,
                    "sleep_date": day,
                    "start_time": "20:00",
                    "end_time": "06:30",
                    "duration": 630,
                },
                headers=auth_headers,
            )
            assert response.status_code == 201
            assert response.json()["quality"] == "good"

        listed = await client.get(f"/api/children/{child_id}/sleep", headers=auth_headers)
        assert [s["sleep_date"] for s in listed.json()] == ["2025-09-02", "2025-09-01"]

        one_day = await client.get(
            f"/api/children/{child_id}/sleep",
            params={"sleep_date": "2025-09-01"},
            headers=auth_headers,
        )
        assert len(one_day.json()) == 1

        record_id = one_day.json()[0]["id"]
        assert (await client.delete(f"/api/sleep/{record_id}", headers=auth_headers)).status_code == 204


class TestHealthNotes:
    """Health note endpoints."""

    async def test_crud(self, client: AsyncClient, child_id: int, auth_headers: dict[str, str]) -> None:
        created = await client.post(
            "/api/health-notes",
            json={
                "child_id": child_id,
                "type": "medication",
                "title": "Fever",
                "medication_name": "Paracetamol",
                "dosage": "2.5 ml",
                "note_date": "2025-09-10",
            },
            headers=auth_headers,
        )
        assert created.status_code == 201
        record_id = created.json()["id"]

        await client.post(
            "/api/health-notes",
            json={"child_id": child_id, "type": "general", "title": "Checkup", "note_date": "2025-10-01"},
            headers=auth_headers,
        )
        listed = await client.get(f"/api/children/{child_id}/health-notes", headers=auth_headers)
        assert [n["title"] for n in listed.json()] == ["Checkup", "Fever"]

        updated = await client.patch(
            f"/api/health-notes/{record_id}", json={"frequency": "every 6h"}, headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["frequency"] == "every 6h"
        assert updated.json()["medication_name"] == "Paracetamol"

        response = await client.delete(f"/api/health-notes/{record_id}", headers=auth_headers)
        assert response.status_code == 204


class TestJournal:
    """Journal endpoints."""

    async def test_crud(self, client: AsyncClient, child_id: int, auth_headers: dict[str, str]) -> None:
        created = await client.post(
            "/api/journal",
            json={
                "child_id": child_id,
                "title": "First steps",
                "media_type": "video",
                "media_url": "https://cdn.example.com/v.mp4",
                "tags": "walking,firsts",
                "journal_date": "2025-08-15",
            },
            headers=auth_headers,
        )
        assert created.status_code == 201
        record_id = created.json()["id"]

        updated = await client.patch(
            f"/api/journal/{record_id}", json={"title": "First real steps"}, headers=auth_headers,
        )
        assert updated.json()["title"] == "First real steps"
        assert updated.json()["tags"] == "walking,firsts"

        listed = await client.get(f"/api/children/{child_id}/journal", headers=auth_headers)
        assert len(listed.json()) == 1

        response = await client.delete(f"/api/journal/{record_id}", headers=auth_headers)
        assert response.status_code == 204
        response = await client.delete(f"/api/journal/{record_id}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Journal entry not found"
