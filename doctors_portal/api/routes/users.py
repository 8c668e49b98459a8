"""User login, listing and admin role endpoints."""

from fastapi import APIRouter

from doctors_portal.api.deps import AdminUser, CurrentClaim, DbSession, Tokens
from doctors_portal.schemas.auth import LenientEmail
from doctors_portal.schemas.user import (
    AdminStatusResponse,
    UpdateResult,
    UserProfileUpdate,
    UserResponse,
    UserSessionResponse,
)
from doctors_portal.services.users import UserDirectory

router = APIRouter()


@router.put(
    "/user/admin/{email}",
    response_model=UpdateResult,
    summary="Promote user to admin",
    description="Grant the admin role to an existing user. Admin only.",
)
async def make_admin(
    email: LenientEmail,
    admin: AdminUser,
    session: DbSession,
) -> UpdateResult:
    return await UserDirectory(session).promote_to_admin(email, promoted_by=admin.email)


@router.put(
    "/user/{email}",
    response_model=UserSessionResponse,
    summary="Log in",
    description="Create or refresh the user's profile and issue a session token",
)
async def upsert_user(
    email: LenientEmail,
    profile: UserProfileUpdate,
    session: DbSession,
    tokens: Tokens,
) -> UserSessionResponse:
    """Upsert the user keyed by ``email`` and return a one-hour token."""
    result = await UserDirectory(session).upsert_profile(email, profile)
    return UserSessionResponse(result=result, token=tokens.issue(email))


@router.get(
    "/admin/{email}",
    response_model=AdminStatusResponse,
    summary="Check admin role",
)
async def check_admin(email: str, session: DbSession) -> AdminStatusResponse:
    return AdminStatusResponse(admin=await UserDirectory(session).is_admin(email))


@router.get(
    "/user",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(claim: CurrentClaim, session: DbSession) -> list[UserResponse]:
    users = await UserDirectory(session).list_users()
    return [UserResponse.model_validate(u) for u in users]
