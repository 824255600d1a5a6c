"""
Subscription API Routes

Pricing catalog, plan purchase and cancellation.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.dependencies import CurrentUser, SessionDep
from app.domain.subscription import PricingPlanInfo
from app.infrastructure.db.models.subscription import SubscriptionCreate, SubscriptionRead
from app.infrastructure.services.subscription_service import SubscriptionService


logger = logging.getLogger(__name__)

router = APIRouter()


class SubscriptionCreated(BaseModel):
    id: int


class SuccessResponse(BaseModel):
    success: bool = True


# =============================================================================
# Pricing Endpoints
# =============================================================================

@router.get("/subscriptions/pricing", response_model=List[PricingPlanInfo])
async def get_pricing(session: SessionDep):
    """Active plans, cheapest first. Falls back to the built-in catalog."""
    return await SubscriptionService(session).get_pricing()


# =============================================================================
# Subscription Endpoints
# =============================================================================

@router.get("/subscriptions/me", response_model=Optional[SubscriptionRead])
async def get_my_subscription(user: CurrentUser, session: SessionDep):
    """The caller's newest active subscription, or null."""
    return await SubscriptionService(session).get_for_user(user)


@router.post("/subscriptions", response_model=SubscriptionCreated)
async def create_subscription(
    data: SubscriptionCreate,
    user: CurrentUser,
    session: SessionDep,
):
    """
    Activate a plan for 30 days.

    The caller's tier and app limit switch to the plan immediately.
    """
    subscription = await SubscriptionService(session).create(user, data)
    return SubscriptionCreated(id=subscription.id)


@router.post("/subscriptions/{subscription_id}/cancel", response_model=SuccessResponse)
async def cancel_subscription(subscription_id: int, user: CurrentUser, session: SessionDep):
    """Cancel a subscription and return the caller to the free tier."""
    await SubscriptionService(session).cancel(user, subscription_id)
    return SuccessResponse()
