"""Tests for doctor management."""

import pytest
from httpx import AsyncClient

from doctors_portal.models.user import User

DOCTOR = {
    "name": "Dr. Grey",
    "email": "grey@x.com",
    "specialty": "Checkup",
    "img": "https://img.example.com/grey.png",
}


@pytest.mark.asyncio
async def test_admin_can_register_doctor(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.post("/doctor", json=DOCTOR, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "grey@x.com"
    assert body["specialty"] == "Checkup"


@pytest.mark.asyncio
async def test_patient_cannot_register_doctor(
    client: AsyncClient, patient_headers: dict[str, str]
) -> None:
    response = await client.post("/doctor", json=DOCTOR, headers=patient_headers)

    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


@pytest.mark.asyncio
async def test_register_doctor_requires_credentials(client: AsyncClient) -> None:
    response = await client.post("/doctor", json=DOCTOR)

    assert response.status_code == 403
    assert response.json()["code"] == "unauthenticated"


@pytest.mark.asyncio
async def test_duplicate_doctor_email_conflicts(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    await client.post("/doctor", json=DOCTOR, headers=admin_headers)
    response = await client.post("/doctor", json=DOCTOR, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["code"] == "conflict"


@pytest.mark.asyncio
async def test_list_and_remove_doctor(
    client: AsyncClient, admin_headers: dict[str, str], admin_user: User
) -> None:
    await client.post("/doctor", json=DOCTOR, headers=admin_headers)

    listed = await client.get("/doctor")
    assert [d["email"] for d in listed.json()] == ["grey@x.com"]

    removed = await client.delete("/doctor/grey@x.com")
    assert removed.json() == {"deletedCount": 1}

    listed = await client.get("/doctor")
    assert listed.json() == []


@pytest.mark.asyncio
async def test_remove_unknown_doctor_deletes_nothing(client: AsyncClient) -> None:
    response = await client.delete("/doctor/nobody@x.com")

    assert response.status_code == 200
    assert response.json() == {"deletedCount": 0}
