"""
User Repository for ClickNGoAI

Identity lookups, sign-in upsert and entitlement counters.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import UserRole
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User records.

    Extends base repository with:
    - get_by_open_id: Resolve the token subject to a user
    - upsert: Create on first sign-in, refresh profile fields afterwards
    - get_for_update: Row-locked read used by quota checks
    """

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_open_id(self, open_id: str) -> Optional[User]:
        stmt = select(User).where(User.open_id == open_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_update(self, user_id: int) -> Optional[User]:
        """
        Load a user and lock its row until the transaction ends.

        Serializes concurrent quota checks for the same user. SQLite
        ignores the lock clause.
        """
        stmt = (
            select(User)
            .where(User.id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        open_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        login_method: Optional[str] = None,
        owner_open_id: Optional[str] = None,
    ) -> User:
        """
        Insert or refresh a user keyed by ``open_id``.

        Profile fields are only overwritten when provided. The configured
        owner identity is always stored as superadmin.

        Args:
            open_id: External identity (token subject)
            name / email / login_method: Claims from the identity token
            owner_open_id: Identity to promote to superadmin

        Returns:
            The stored user
        """
        now = datetime.now(timezone.utc)
        user = await self.get_by_open_id(open_id)

        if user is None:
            user = User(open_id=open_id, last_signed_in=now)
            self.session.add(user)

        if name is not None:
            user.name = name
        if email is not None:
            user.email = email
        if login_method is not None:
            user.login_method = login_method
        if owner_open_id and open_id == owner_open_id:
            user.role = UserRole.SUPERADMIN.value
        user.last_signed_in = now

        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def increment_apps_created(self, user_id: int) -> None:
        await self.increment(user_id, "apps_created")

    async def list_users(self, limit: int = 100, offset: int = 0) -> List[User]:
        """All users, newest first."""
        return await self.get_all(skip=offset, limit=limit)
