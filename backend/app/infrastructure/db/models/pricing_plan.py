"""
Pricing Plan Model

Static catalog entry per subscription tier.
"""

from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import BaseModel


class PricingPlanBase(SQLModel):
    """Shared pricing plan fields."""

    tier: str = Field(..., max_length=20, unique=True)
    name_en: str = Field(..., max_length=100)
    name_hi: Optional[str] = Field(default=None, max_length=100)
    description_en: Optional[str] = Field(default=None)
    description_hi: Optional[str] = Field(default=None)
    price_inr: int = Field(default=0)
    price_usd: int = Field(default=0)
    app_limit: int = Field(default=1)
    features: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    is_popular: bool = Field(default=False)
    is_active: bool = Field(default=True)


class PricingPlan(BaseModel, PricingPlanBase, table=True):
    """Pricing plan table."""

    __tablename__ = "pricing_plans"


class PricingPlanCreate(PricingPlanBase):
    """Schema for upserting a pricing plan."""
    pass
