"""Database initialization utilities."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.config import settings
from doctors_portal.db.base import Base
from doctors_portal.db.session import engine
from doctors_portal.models.user import User, UserRole

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    """Create all database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def create_initial_admin(session: AsyncSession, email: str) -> User | None:
    """Ensure ``email`` exists and holds the admin role.

    Promotion is otherwise admin-only, so the first admin has to be
    bootstrapped here.

    Args:
        session: Database session
        email: Email of the bootstrap admin

    Returns:
        The admin user, or None if an admin already exists
    """
    result = await session.execute(
        select(User).where(User.role == UserRole.ADMIN.value).limit(1)
    )
    if result.scalar_one_or_none():
        logger.info("Admin user already exists, skipping creation")
        return None

    email = email.lower()
    result = await session.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if user is None:
        user = User(email=email, profile={})
        session.add(user)

    user.role = UserRole.ADMIN.value
    await session.commit()
    await session.refresh(user)

    logger.warning(f"Bootstrapped initial admin {email}")
    return user


async def init_db(session: AsyncSession) -> None:
    """Initialize database schema and bootstrap data.

    Args:
        session: Database session
    """
    await create_tables()
    if settings.initial_admin_email:
        await create_initial_admin(session, settings.initial_admin_email)
    logger.info("Database initialization complete")
