"""Role directory: user records and admin roles keyed by email."""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.logging import audit_logger
from doctors_portal.models.user import User, UserRole
from doctors_portal.schemas.user import UpdateResult, UpsertResult, UserProfileUpdate

logger = logging.getLogger(__name__)


class UserDirectory:
    """Service for looking up and maintaining user records."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address.

        Args:
            email: User email address

        Returns:
            User if found, None otherwise
        """
        result = await self.session.execute(
            select(User).where(User.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def list_users(self) -> Sequence[User]:
        """List all users ordered by creation time."""
        result = await self.session.execute(select(User).order_by(User.created_at))
        return result.scalars().all()

    async def is_admin(self, email: str) -> bool:
        """Check whether an email belongs to an admin.

        Unknown emails are not admins.
        """
        user = await self.get_by_email(email)
        return user is not None and user.is_admin

    async def upsert_profile(self, email: str, profile: UserProfileUpdate) -> UpsertResult:
        """Create the user or refresh their profile.

        Only fields present in ``profile`` are written. ``role`` is never
        touched here.

        Args:
            email: Key of the user record
            profile: Profile fields sent by the client

        Returns:
            UpsertResult with the matched count and new id when created
        """
        email = email.lower()
        user = await self.get_by_email(email)

        if user is None:
            user = User(
                email=email,
                name=profile.name,
                profile=profile.extra_fields,
            )
            self.session.add(user)
            try:
                await self.session.commit()
            except IntegrityError:
                # Another request created the record first
                await self.session.rollback()
                logger.info(f"Concurrent user creation for {email}, updating instead")
                return await self.upsert_profile(email, profile)

            await self.session.refresh(user)
            logger.info(f"Created user {email}")
            return UpsertResult(matched_count=0, upserted_id=user.id)

        if "name" in profile.model_fields_set:
            user.name = profile.name
        if profile.extra_fields:
            # Reassign so the JSON column is flagged dirty
            user.profile = {**(user.profile or {}), **profile.extra_fields}

        await self.session.commit()
        return UpsertResult(matched_count=1)

    async def promote_to_admin(self, email: str, promoted_by: str) -> UpdateResult:
        """Grant the admin role to an existing user.

        Args:
            email: Email of the user to promote
            promoted_by: Email of the admin performing the promotion

        Returns:
            UpdateResult; matched_count is 0 when the user does not exist
        """
        user = await self.get_by_email(email)

        if user is None:
            logger.warning(f"Admin promotion requested for unknown user {email}")
            return UpdateResult(matched_count=0, modified_count=0)

        if user.is_admin:
            return UpdateResult(matched_count=1, modified_count=0)

        user.role = UserRole.ADMIN.value
        await self.session.commit()

        audit_logger.log(
            action="user_promoted_admin",
            actor=promoted_by,
            entity_type="user",
            entity_id=user.id,
            metadata={"email": user.email},
        )
        return UpdateResult(matched_count=1, modified_count=1)
