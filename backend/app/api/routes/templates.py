"""
Template API Routes

Public template marketplace and admin template creation.
"""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.dependencies import AdminUser, SessionDep
from app.domain.models import TemplateCategory
from app.infrastructure.db.models.template import TemplateCreate, TemplateRead
from app.infrastructure.services.template_service import TemplateService


router = APIRouter()


class TemplateCreated(BaseModel):
    id: int
    slug: str


@router.get("/templates", response_model=List[TemplateRead])
async def list_templates(session: SessionDep, active_only: bool = True):
    """Templates ordered by usage, most used first."""
    return await TemplateService(session).list_templates(active_only=active_only)


@router.get("/templates/category/{category}", response_model=List[TemplateRead])
async def list_templates_by_category(category: TemplateCategory, session: SessionDep):
    return await TemplateService(session).list_by_category(category)


@router.get("/templates/{template_id}", response_model=TemplateRead)
async def get_template(template_id: int, session: SessionDep):
    return await TemplateService(session).get(template_id)


@router.post("/templates", response_model=TemplateCreated)
async def create_template(data: TemplateCreate, admin: AdminUser, session: SessionDep):
    """Create a template (admin only)."""
    template = await TemplateService(session).create(data)
    return TemplateCreated(id=template.id, slug=template.slug)
