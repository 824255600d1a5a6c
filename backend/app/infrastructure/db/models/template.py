"""
Template SQLModel

Reusable starting configuration for a project.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from app.domain.models import (
    TemplateCategory,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
)
from app.infrastructure.db.models.base import BaseModel


class TemplateBase(SQLModel):
    """Shared template fields."""

    name: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255, unique=True, index=True)
    description: Optional[str] = Field(default=None)
    category: str = Field(default=TemplateCategory.OTHER.value, max_length=30, index=True)
    icon: Optional[str] = Field(default=None)
    preview_image: Optional[str] = Field(default=None)
    features: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    default_prompt: Optional[str] = Field(default=None)
    primary_color: Optional[str] = Field(default=DEFAULT_PRIMARY_COLOR, max_length=7)
    secondary_color: Optional[str] = Field(default=DEFAULT_SECONDARY_COLOR, max_length=7)
    usage_count: int = Field(default=0)
    is_premium: bool = Field(default=False)
    is_active: bool = Field(default=True)


class Template(BaseModel, TemplateBase, table=True):
    """Template table."""

    __tablename__ = "templates"


class TemplateRead(TemplateBase):
    """Template response schema."""

    id: int
    created_at: datetime
    updated_at: datetime


class TemplateCreate(SQLModel):
    """Admin input for a new template. The slug is generated."""

    name: str = Field(..., min_length=1, max_length=255)
    category: TemplateCategory
    description: Optional[str] = None
    icon: Optional[str] = None
    preview_image: Optional[str] = None
    features: Optional[List[str]] = None
    default_prompt: Optional[str] = None
    primary_color: Optional[str] = Field(default=None, max_length=7)
    secondary_color: Optional[str] = Field(default=None, max_length=7)
    is_premium: bool = False
