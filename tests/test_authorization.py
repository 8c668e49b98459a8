"""Tests for the authenticated and admin guards and the self-match rule."""

import logging
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.security import TokenService
from doctors_portal.models.booking import Booking
from doctors_portal.models.user import User


class TestAuthenticatedGuard:
    """Tests for bearer credential checks."""

    @pytest.mark.asyncio
    async def test_missing_header_is_unauthenticated(self, client: AsyncClient) -> None:
        response = await client.get("/user")

        assert response.status_code == 403
        assert response.json()["code"] == "unauthenticated"
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_empty_header_is_unauthenticated(self, client: AsyncClient) -> None:
        response = await client.get("/user", headers={"Authorization": ""})

        assert response.status_code == 403
        assert response.json()["code"] == "unauthenticated"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header",
        ["Basic YTpi", "Token abc.def.ghi", "Bearer", "garbage"],
    )
    async def test_malformed_header_is_invalid_credential(
        self, client: AsyncClient, header: str
    ) -> None:
        response = await client.get("/user", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credential"

    @pytest.mark.asyncio
    async def test_wrongly_signed_token_is_invalid(self, client: AsyncClient) -> None:
        forged = TokenService(secret_key="not-the-server-secret").issue("a@x.com")

        response = await client.get("/user", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credential"

    @pytest.mark.asyncio
    async def test_expired_token_is_invalid(
        self, client: AsyncClient, token_service: TokenService
    ) -> None:
        expired = token_service.issue("a@x.com", expires_delta=timedelta(minutes=-1))

        response = await client.get("/user", headers={"Authorization": f"Bearer {expired}"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_token_lists_users(
        self, client: AsyncClient, patient_headers: dict[str, str], patient_user: User
    ) -> None:
        response = await client.get("/user", headers=patient_headers)

        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == [patient_user.email]


class TestAdminGuard:
    """Tests for admin-only routes."""

    @pytest.mark.asyncio
    async def test_user_without_role_is_forbidden(
        self, client: AsyncClient, patient_headers: dict[str, str]
    ) -> None:
        response = await client.put("/user/admin/b@x.com", headers=patient_headers)

        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    @pytest.mark.asyncio
    async def test_denied_admin_access_is_logged_with_email(
        self,
        client: AsyncClient,
        patient_headers: dict[str, str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="doctors_portal.api.deps"):
            await client.put("/user/admin/b@x.com", headers=patient_headers)

        denied = [r for r in caplog.records if r.getMessage() == "Admin access denied"]
        assert denied
        assert denied[0].email == "a@x.com"

    @pytest.mark.asyncio
    async def test_caller_without_user_record_is_forbidden(
        self, client: AsyncClient, token_service: TokenService
    ) -> None:
        token = token_service.issue("ghost@x.com")

        response = await client.put(
            "/user/admin/a@x.com", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    @pytest.mark.asyncio
    async def test_admin_can_promote_user(
        self,
        client: AsyncClient,
        async_session: AsyncSession,
        admin_headers: dict[str, str],
        patient_user: User,
    ) -> None:
        response = await client.put(f"/user/admin/{patient_user.email}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"matchedCount": 1, "modifiedCount": 1}

        await async_session.refresh(patient_user)
        assert patient_user.role == "admin"

    @pytest.mark.asyncio
    async def test_promoting_unknown_user_matches_nothing(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.put("/user/admin/nobody@x.com", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"matchedCount": 0, "modifiedCount": 0}

    @pytest.mark.asyncio
    async def test_promote_requires_credentials(self, client: AsyncClient) -> None:
        response = await client.put("/user/admin/a@x.com")

        assert response.status_code == 403
        assert response.json()["code"] == "unauthenticated"


class TestBookingListSelfMatch:
    """A caller can only list their own bookings."""

    @pytest.mark.asyncio
    async def test_other_patients_bookings_are_forbidden(
        self, client: AsyncClient, patient_headers: dict[str, str]
    ) -> None:
        response = await client.get(
            "/booking", params={"patient": "b@x.com"}, headers=patient_headers
        )

        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    @pytest.mark.asyncio
    async def test_missing_patient_parameter_is_forbidden(
        self, client: AsyncClient, patient_headers: dict[str, str]
    ) -> None:
        response = await client.get("/booking", headers=patient_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_own_bookings_are_listed(
        self,
        client: AsyncClient,
        async_session: AsyncSession,
        patient_headers: dict[str, str],
    ) -> None:
        async_session.add_all(
            [
                Booking(treatment="Checkup", date="2024-01-01", slot="09:00", patient="a@x.com"),
                Booking(treatment="Checkup", date="2024-01-01", slot="10:00", patient="b@x.com"),
            ]
        )
        await async_session.commit()

        response = await client.get(
            "/booking", params={"patient": "a@x.com"}, headers=patient_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["patient"] == "a@x.com"
        assert data[0]["paid"] is False

    @pytest.mark.asyncio
    async def test_self_match_ignores_email_case(
        self,
        client: AsyncClient,
        async_session: AsyncSession,
        patient_headers: dict[str, str],
    ) -> None:
        async_session.add(
            Booking(treatment="Checkup", date="2024-01-01", slot="09:00", patient="a@x.com")
        )
        await async_session.commit()

        response = await client.get(
            "/booking", params={"patient": "A@X.com"}, headers=patient_headers
        )

        assert response.status_code == 200
        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_booking_list_requires_credentials(self, client: AsyncClient) -> None:
        response = await client.get("/booking", params={"patient": "a@x.com"})

        assert response.status_code == 403
        assert response.json()["code"] == "unauthenticated"
