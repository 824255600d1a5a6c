"""
Template Service

Marketplace template reads and admin creation.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.lifecycle import generate_slug
from app.domain.models import TemplateCategory
from app.infrastructure.db.models.template import Template, TemplateCreate
from app.infrastructure.db.repositories.template_repository import TemplateRepository
from app.infrastructure.exceptions import NotFoundError


logger = logging.getLogger(__name__)


class TemplateService:
    """Service for template operations."""

    def __init__(self, session: AsyncSession):
        self._templates = TemplateRepository(session)

    async def list_templates(self, active_only: bool = True) -> List[Template]:
        return await self._templates.list_templates(active_only=active_only)

    async def get(self, template_id: int) -> Template:
        template = await self._templates.get_by_id(template_id)
        if template is None:
            raise NotFoundError("Template not found", operation="get", table="templates")
        return template

    async def list_by_category(self, category: TemplateCategory) -> List[Template]:
        return await self._templates.list_by_category(category.value)

    async def create(self, data: TemplateCreate) -> Template:
        """Create a template with a generated slug. Unset colors use the defaults."""
        values = data.model_dump(exclude_none=True, mode="json")
        template = await self._templates.add(
            Template(slug=generate_slug(data.name), **values)
        )
        logger.info(f"[TEMPLATES] Created template {template.id} ({template.slug})")
        return template
