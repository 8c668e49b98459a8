"""Router aggregating all endpoints."""

from fastapi import APIRouter

from doctors_portal.api.routes import bookings, doctors, health, payments, services, users

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Catalogue & availability
api_router.include_router(services.router, tags=["services"])

# Users & roles
api_router.include_router(users.router, tags=["users"])

# Bookings
api_router.include_router(bookings.router, tags=["bookings"])

# Payments
api_router.include_router(payments.router, tags=["payments"])

# Doctors
api_router.include_router(doctors.router, tags=["doctors"])
