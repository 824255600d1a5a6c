"""
Subscription Database Model

SQLModel table for billing-period records.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.domain.subscription import (
    Currency,
    PurchasableTier,
    SubscriptionStatus,
    SubscriptionTier,
)
from app.infrastructure.db.models.base import BaseModel, utcnow


class SubscriptionBase(SQLModel):
    """Shared subscription fields."""

    user_id: int = Field(..., foreign_key="users.id", index=True)
    tier: str = Field(default=SubscriptionTier.FREE.value, max_length=20)
    price_inr: int = Field(default=0)
    price_usd: int = Field(default=0)
    currency: str = Field(default=Currency.INR.value, max_length=3)
    status: str = Field(default=SubscriptionStatus.PENDING.value, max_length=20)
    payment_method: Optional[str] = Field(default=None, max_length=50)
    payment_id: Optional[str] = Field(default=None, max_length=255)
    start_date: datetime = Field(default_factory=utcnow, nullable=False)
    end_date: Optional[datetime] = Field(default=None)
    auto_renew: bool = Field(default=True)


class SubscriptionModel(BaseModel, SubscriptionBase, table=True):
    """
    Subscription table.

    A user may hold several active rows; the most recent one is authoritative.
    """

    __tablename__ = "subscriptions"


class SubscriptionRead(SubscriptionBase):
    """Subscription response schema."""

    id: int
    created_at: datetime
    updated_at: datetime


class SubscriptionCreate(SQLModel):
    """Purchase request. Prices come from the tier table, never the client."""

    tier: PurchasableTier
    currency: Currency
