"""Doctor management endpoints."""

from fastapi import APIRouter, status

from doctors_portal.api.deps import AdminUser, DbSession
from doctors_portal.schemas.doctor import DeleteResult, DoctorCreate, DoctorResponse
from doctors_portal.services.doctors import DoctorService

router = APIRouter()


@router.post(
    "/doctor",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register doctor",
    description="Admin only",
)
async def add_doctor(
    data: DoctorCreate,
    admin: AdminUser,
    session: DbSession,
) -> DoctorResponse:
    doctor = await DoctorService(session).add_doctor(data, added_by=admin.email)
    return DoctorResponse.model_validate(doctor)


@router.get(
    "/doctor",
    response_model=list[DoctorResponse],
    summary="List doctors",
)
async def list_doctors(session: DbSession) -> list[DoctorResponse]:
    doctors = await DoctorService(session).list_doctors()
    return [DoctorResponse.model_validate(d) for d in doctors]


# Removal is open to any caller; only registration requires an admin.
@router.delete(
    "/doctor/{email}",
    response_model=DeleteResult,
    summary="Remove doctor",
)
async def remove_doctor(email: str, session: DbSession) -> DeleteResult:
    deleted = await DoctorService(session).remove_doctor(email)
    return DeleteResult(deleted_count=deleted)
