"""
Template Repository

Marketplace template queries, most used first.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.models.template import Template
from app.infrastructure.db.repositories.base_repository import BaseRepository


class TemplateRepository(BaseRepository[Template]):
    """Repository for project templates."""

    def __init__(self, session: AsyncSession):
        super().__init__(Template, session)

    async def list_templates(self, active_only: bool = True) -> List[Template]:
        stmt = select(Template)
        if active_only:
            stmt = stmt.where(Template.is_active.is_(True))
        stmt = stmt.order_by(Template.usage_count.desc(), Template.id.asc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_category(self, category: str) -> List[Template]:
        """Active templates in one category."""
        stmt = (
            select(Template)
            .where(
                Template.category == category,
                Template.is_active.is_(True),
            )
            .order_by(Template.usage_count.desc(), Template.id.asc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_slug(self, slug: str) -> Optional[Template]:
        stmt = select(Template).where(Template.slug == slug)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_usage(self, template_id: int) -> None:
        await self.increment(template_id, "usage_count")
