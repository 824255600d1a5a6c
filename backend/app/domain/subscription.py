"""
Subscription Domain Models

Enums, tier tables and the default pricing catalog for the
subscription bounded context.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel


class SubscriptionTier(str, Enum):
    """Subscription tier levels."""
    FREE = "free"
    SINGLE = "single"
    MULTIPLE = "multiple"
    UNLIMITED = "unlimited"


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle status."""
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    PENDING = "pending"


class Currency(str, Enum):
    """Supported payment currencies."""
    INR = "INR"
    USD = "USD"


class PurchasableTier(str, Enum):
    """Tiers that can be bought through subscriptions.create."""
    SINGLE = "single"
    MULTIPLE = "multiple"
    UNLIMITED = "unlimited"


SUBSCRIPTION_PERIOD_DAYS = 30

FREE_APP_LIMIT = 1

# Sentinel limit for the unlimited tier; the tier itself grants the bypass
UNLIMITED_APP_LIMIT = 9999


class TierPlan(BaseModel):
    """Price and quota granted by a purchasable tier."""
    price_inr: int
    price_usd: int
    app_limit: int


# =============================================================================
# Tier Configuration (Business Logic)
# =============================================================================

TIER_PLANS = {
    SubscriptionTier.SINGLE: TierPlan(price_inr=3999, price_usd=49, app_limit=1),
    SubscriptionTier.MULTIPLE: TierPlan(price_inr=24999, price_usd=79, app_limit=15),
    SubscriptionTier.UNLIMITED: TierPlan(
        price_inr=34999, price_usd=199, app_limit=UNLIMITED_APP_LIMIT
    ),
}


def get_tier_plan(tier: str) -> TierPlan:
    """Get the price/limit entry for a purchasable tier."""
    return TIER_PLANS[SubscriptionTier(tier)]


class PricingPlanInfo(BaseModel):
    """Public pricing catalog entry."""
    tier: SubscriptionTier
    name_en: str
    name_hi: Optional[str] = None
    description_en: Optional[str] = None
    description_hi: Optional[str] = None
    price_inr: int
    price_usd: int
    app_limit: int
    features: List[str]
    is_popular: bool = False


DEFAULT_PRICING_CATALOG: List[PricingPlanInfo] = [
    PricingPlanInfo(
        tier=SubscriptionTier.FREE,
        name_en="Free Trial",
        price_inr=0,
        price_usd=0,
        app_limit=FREE_APP_LIMIT,
        features=["1 App", "Basic Templates", "Community Support"],
        is_popular=False,
    ),
    PricingPlanInfo(
        tier=SubscriptionTier.SINGLE,
        name_en="Single App",
        price_inr=3999,
        price_usd=49,
        app_limit=1,
        features=["1 Premium App", "All Templates", "Priority Support", "Custom Branding"],
        is_popular=False,
    ),
    PricingPlanInfo(
        tier=SubscriptionTier.MULTIPLE,
        name_en="15 Apps Pack",
        price_inr=24999,
        price_usd=79,
        app_limit=15,
        features=[
            "15 Premium Apps",
            "All Templates",
            "Priority Support",
            "Custom Branding",
            "Analytics Dashboard",
        ],
        is_popular=True,
    ),
    PricingPlanInfo(
        tier=SubscriptionTier.UNLIMITED,
        name_en="Unlimited",
        price_inr=34999,
        price_usd=199,
        app_limit=UNLIMITED_APP_LIMIT,
        features=[
            "Unlimited Apps",
            "All Templates",
            "24/7 Support",
            "Custom Branding",
            "Analytics Dashboard",
            "API Access",
            "White Label",
        ],
        is_popular=False,
    ),
]
