"""
Subscription Repository

Data access layer for subscription persistence.
"""

import logging
from typing import Optional

from sqlmodel import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.subscription import SubscriptionStatus
from app.infrastructure.db.models.subscription import SubscriptionModel
from app.infrastructure.db.repositories.base_repository import BaseRepository


logger = logging.getLogger(__name__)


class SubscriptionRepository(BaseRepository[SubscriptionModel]):
    """
    Repository for subscription data access.

    A user may accumulate several subscription rows; reads return the
    most recently created active one.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(SubscriptionModel, session)

    # =========================================================================
    # Query Methods
    # =========================================================================

    async def get_active_for_user(self, user_id: int) -> Optional[SubscriptionModel]:
        """
        Get the newest active subscription of a user.

        Args:
            user_id: Internal user ID

        Returns:
            SubscriptionModel or None
        """
        statement = (
            select(SubscriptionModel)
            .where(
                SubscriptionModel.user_id == user_id,
                SubscriptionModel.status == SubscriptionStatus.ACTIVE.value,
            )
            .order_by(SubscriptionModel.created_at.desc(), SubscriptionModel.id.desc())
            .limit(1)
        )
        result = await self._session.execute(statement)
        return result.scalars().first()

    # =========================================================================
    # Command Methods
    # =========================================================================

    async def cancel(self, subscription_id: int) -> Optional[SubscriptionModel]:
        """
        Mark a subscription cancelled and stop renewal.

        Returns:
            The updated row, or None when the id is unknown
        """
        subscription = await self.update(
            subscription_id,
            {
                "status": SubscriptionStatus.CANCELLED.value,
                "auto_renew": False,
            },
        )
        if subscription is None:
            logger.info(f"Cancel requested for unknown subscription {subscription_id}")
        return subscription
