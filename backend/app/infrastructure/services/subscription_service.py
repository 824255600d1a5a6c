"""
Subscription Service

Plan purchases, cancellation and the public pricing catalog.
No payment is taken; a purchase activates immediately.
"""

import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import ActivityAction
from app.domain.subscription import (
    DEFAULT_PRICING_CATALOG,
    FREE_APP_LIMIT,
    SUBSCRIPTION_PERIOD_DAYS,
    PricingPlanInfo,
    SubscriptionStatus,
    SubscriptionTier,
    get_tier_plan,
)
from app.infrastructure.db.models.base import utcnow
from app.infrastructure.db.models.subscription import SubscriptionCreate, SubscriptionModel
from app.infrastructure.db.models.user import User
from app.infrastructure.db.repositories.pricing_plan_repository import PricingPlanRepository
from app.infrastructure.db.repositories.subscription_repository import SubscriptionRepository
from app.infrastructure.db.repositories.user_repository import UserRepository
from app.infrastructure.services.activity_service import ActivityService


logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Service for subscription changes.

    The user row carries the effective tier and app limit; subscription
    rows are the purchase history.
    """

    def __init__(self, session: AsyncSession):
        self._subscriptions = SubscriptionRepository(session)
        self._plans = PricingPlanRepository(session)
        self._users = UserRepository(session)
        self._activity = ActivityService(session)

    async def get_pricing(self) -> List[PricingPlanInfo]:
        """Stored active plans, or the built-in catalog when none are stored."""
        plans = await self._plans.list_active()
        if not plans:
            return list(DEFAULT_PRICING_CATALOG)
        return [
            PricingPlanInfo.model_validate({**plan.model_dump(), "features": plan.features or []})
            for plan in plans
        ]

    async def get_for_user(self, actor: User) -> Optional[SubscriptionModel]:
        return await self._subscriptions.get_active_for_user(actor.id)

    async def create(self, actor: User, data: SubscriptionCreate) -> SubscriptionModel:
        """
        Activate a 30-day subscription and apply its limit to the user.

        Prices and limits come from the fixed tier table.
        """
        plan = get_tier_plan(data.tier.value)
        now = utcnow()

        subscription = await self._subscriptions.add(
            SubscriptionModel(
                user_id=actor.id,
                tier=data.tier.value,
                price_inr=plan.price_inr,
                price_usd=plan.price_usd,
                currency=data.currency.value,
                status=SubscriptionStatus.ACTIVE.value,
                start_date=now,
                end_date=now + timedelta(days=SUBSCRIPTION_PERIOD_DAYS),
            )
        )

        await self._users.apply(
            actor,
            {"subscription_tier": data.tier.value, "app_limit": plan.app_limit},
        )

        await self._activity.log(
            actor.id,
            ActivityAction.SUBSCRIPTION_CREATED,
            entity_type="subscription",
            entity_id=subscription.id,
            details={"tier": data.tier.value, "currency": data.currency.value},
        )

        logger.info(
            f"[SUBSCRIPTIONS] User {actor.id} subscribed to {data.tier.value} "
            f"(limit {plan.app_limit})"
        )
        return subscription

    async def cancel(self, actor: User, subscription_id: int) -> None:
        """
        Cancel a subscription and drop the caller back to the free tier.

        The subscription is not checked against the caller: any id is
        cancelled and the caller is the one downgraded. Unknown ids
        still downgrade the caller.
        """
        await self._subscriptions.cancel(subscription_id)

        await self._users.apply(
            actor,
            {
                "subscription_tier": SubscriptionTier.FREE.value,
                "app_limit": FREE_APP_LIMIT,
            },
        )

        await self._activity.log(
            actor.id,
            ActivityAction.SUBSCRIPTION_CANCELLED,
            entity_type="subscription",
            entity_id=subscription_id,
        )

        logger.info(f"[SUBSCRIPTIONS] User {actor.id} cancelled subscription {subscription_id}")
