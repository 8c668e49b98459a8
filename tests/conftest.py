"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from doctors_portal.api.deps import get_payment_gateway, get_token_service
from doctors_portal.core.security import TokenService
from doctors_portal.db.base import Base
from doctors_portal.db.session import get_db
from doctors_portal.main import app
from doctors_portal.models.booking import Booking
from doctors_portal.models.service import Service
from doctors_portal.models.user import User, UserRole
from doctors_portal.services.payments import PaymentGateway

# Use SQLite for testing (simpler than spinning up postgres)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET = "test-signing-secret"


class FakePaymentGateway(PaymentGateway):
    """Records requested prices instead of calling Stripe."""

    def __init__(self) -> None:
        self.prices: list[float] = []

    async def create_payment_intent(self, price: float) -> str:
        self.prices.append(price)
        return f"pi_test_{len(self.prices)}_secret"


@pytest.fixture(scope="function")
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async database session for tests."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_SECRET, expires_delta=timedelta(hours=1))


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture(scope="function")
async def client(
    async_session: AsyncSession,
    token_service: TokenService,
    payment_gateway: FakePaymentGateway,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an HTTP client bound to the app with overridden dependencies."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
async def patient_user(async_session: AsyncSession) -> User:
    """Create a user without a role."""
    user = User(email="a@x.com", name="Alice Patient", profile={})
    async_session.add(user)
    await async_session.commit()
    await async_session.refresh(user)
    return user


@pytest.fixture
async def admin_user(async_session: AsyncSession) -> User:
    """Create an admin user."""
    user = User(email="admin@x.com", name="Ada Admin", role=UserRole.ADMIN.value, profile={})
    async_session.add(user)
    await async_session.commit()
    await async_session.refresh(user)
    return user


@pytest.fixture
def patient_headers(token_service: TokenService, patient_user: User) -> dict[str, str]:
    """Authorization headers for the patient user."""
    return {"Authorization": f"Bearer {token_service.issue(patient_user.email)}"}


@pytest.fixture
def admin_headers(token_service: TokenService, admin_user: User) -> dict[str, str]:
    """Authorization headers for the admin user."""
    return {"Authorization": f"Bearer {token_service.issue(admin_user.email)}"}


@pytest.fixture
async def checkup_service(async_session: AsyncSession) -> Service:
    """Create a service with two slots."""
    service = Service(name="Checkup", price=50, slots=["09:00", "10:00"])
    async_session.add(service)
    await async_session.commit()
    await async_session.refresh(service)
    return service


@pytest.fixture
async def unpaid_booking(async_session: AsyncSession, patient_user: User) -> Booking:
    """Create an unpaid booking for the patient user."""
    booking = Booking(
        treatment="Checkup",
        date="2024-01-01",
        slot="09:00",
        patient=patient_user.email,
        price=50,
    )
    async_session.add(booking)
    await async_session.commit()
    await async_session.refresh(booking)
    return booking
