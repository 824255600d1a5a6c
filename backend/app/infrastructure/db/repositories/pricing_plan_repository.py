"""
Pricing Plan Repository

Stored pricing catalog.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.pricing_plan import PricingPlan, PricingPlanCreate
from app.infrastructure.db.repositories.base_repository import BaseRepository


class PricingPlanRepository(BaseRepository[PricingPlan]):
    """Repository for pricing catalog entries."""

    def __init__(self, session: AsyncSession):
        super().__init__(PricingPlan, session)

    async def list_active(self) -> List[PricingPlan]:
        """Active plans, cheapest first."""
        stmt = (
            select(PricingPlan)
            .where(PricingPlan.is_active.is_(True))
            .order_by(PricingPlan.price_inr.asc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_tier(self, tier: str) -> Optional[PricingPlan]:
        stmt = select(PricingPlan).where(PricingPlan.tier == tier)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, data: PricingPlanCreate) -> PricingPlan:
        """Insert a plan or overwrite the one stored for the same tier."""
        existing = await self.get_by_tier(data.tier)
        if existing is None:
            return await self.add(PricingPlan.model_validate(data))
        return await self.apply(existing, data.model_dump(exclude={"tier"}))
