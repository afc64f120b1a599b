"""
Unit tests for the reservation endpoints: staging, listing, cancelling,
counting and confirming reservations held in the guest session.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


def stay(residence_id: int, start: str, end: str) -> dict:
    return {"residence_id": residence_id, "start_date": start, "end_date": end}


class TestReserve:
    async def test_reserve_free_stay(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))
        assert response.status_code == 201
        data = response.json()
        assert data["residence_id"] == seeded.house_id
        assert data["reservation_id"] is None
        assert data["reservation_start_date"] == "2030-07-01"

        count = await client.get("/api/v1/reservations/count")
        assert count.json() == {"count": 1}

    async def test_reserve_overlapping_persisted_stay(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations", json=stay(seeded.loft_id, "2030-06-14", "2030-06-16"))
        assert response.status_code == 409
        assert response.json()["detail"] == "Sorry, this residence is not available for the selected dates."

        page = await client.get("/api/v1/home")
        assert page.json()["message"] == "Sorry, this residence is not available for the selected dates."

    async def test_reserve_from_checkout_day(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations", json=stay(seeded.loft_id, "2030-06-15", "2030-06-16"))
        assert response.status_code == 201

    async def test_reserve_overlapping_staged_stay(self, client: AsyncClient, seeded):
        first = await client.post("/api/v1/reservations", json=stay(seeded.studio_id, "2030-07-01", "2030-07-05"))
        assert first.status_code == 201

        second = await client.post("/api/v1/reservations", json=stay(seeded.studio_id, "2030-07-03", "2030-07-04"))
        assert second.status_code == 409
        assert (await client.get("/api/v1/reservations/count")).json()["count"] == 1

    async def test_reserve_end_before_start(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-03", "2030-07-01"))
        assert response.status_code == 422

    async def test_reserve_missing_residence(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations", json=stay(999, "2030-07-01", "2030-07-03"))
        assert response.status_code == 404

    async def test_success_message_shown_once(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))

        page = await client.get("/api/v1/home")
        assert page.json()["message"] == "Reservation completed successfully!"
        page = await client.get("/api/v1/home")
        assert page.json()["message"] is None


class TestStagedReservations:
    async def test_list_staged(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))
        await client.post("/api/v1/reservations", json=stay(seeded.studio_id, "2030-07-01", "2030-07-03"))

        response = await client.get("/api/v1/reservations")
        assert response.status_code == 200
        reservations = response.json()["reservations"]
        assert [r["residence"]["name"] for r in reservations] == ["Wicker Park House", "Midtown Studio"]
        assert reservations[1]["residence"]["location"]["name"] == "New York"

    async def test_empty_list(self, client: AsyncClient, seeded):
        response = await client.get("/api/v1/reservations")
        assert response.json()["reservations"] == []
        assert (await client.get("/api/v1/reservations/count")).json() == {"count": 0}

    async def test_cancel_by_residence(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))
        await client.get("/api/v1/reservations")

        response = await client.post("/api/v1/reservations/cancel", json={"residence_id": seeded.house_id})
        assert response.status_code == 200
        assert response.json()["reservations"] == []
        assert response.json()["message"] == "Reservation cancelled successfully!"

    async def test_cancel_unknown_is_a_no_op(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))

        response = await client.post("/api/v1/reservations/cancel", json={"residence_id": seeded.studio_id})
        assert response.status_code == 200
        assert len(response.json()["reservations"]) == 1

    async def test_cancelled_stay_can_be_reserved_again(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))
        await client.post("/api/v1/reservations/cancel", json={"residence_id": seeded.house_id})

        response = await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))
        assert response.status_code == 201


class TestConfirm:
    async def test_confirm_persists_staged(self, client: AsyncClient, seeded):
        await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-01", "2030-07-03"))

        response = await client.post("/api/v1/reservations/confirm")
        assert response.status_code == 200
        data = response.json()
        assert len(data["confirmed"]) == 1
        assert data["confirmed"][0]["reservation_id"] is not None
        assert data["conflicts"] == []
        assert (await client.get("/api/v1/reservations/count")).json() == {"count": 0}

        # The confirmed stay now blocks the search and new reservations
        search = await client.post(
            "/api/v1/home/filter", json={"check_in_date": "2030-07-02", "check_out_date": "2030-07-03"}
        )
        assert "Wicker Park House" not in {r["name"] for r in search.json()["residences"]}
        again = await client.post("/api/v1/reservations", json=stay(seeded.house_id, "2030-07-02", "2030-07-04"))
        assert again.status_code == 409

    async def test_confirm_nothing_staged(self, client: AsyncClient, seeded):
        response = await client.post("/api/v1/reservations/confirm")
        assert response.json()["confirmed"] == []
        assert response.json()["conflicts"] == []
