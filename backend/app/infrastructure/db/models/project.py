"""
Project SQLModel

One generated-app request. Status and build progress change only through
the build-processing operations.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from pydantic import field_validator
from sqlmodel import Field, SQLModel

from app.domain.models import (
    AppType,
    ProjectStatus,
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
)
from app.infrastructure.db.models.base import BaseModel


class ProjectBase(SQLModel):
    """Shared project fields."""

    user_id: int = Field(..., foreign_key="users.id", index=True)
    name: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255, unique=True, index=True)
    description: Optional[str] = Field(default=None)
    prompt: Optional[str] = Field(default=None)
    app_type: str = Field(default=AppType.HYBRID.value, max_length=20)
    status: str = Field(default=ProjectStatus.PENDING.value, max_length=20, index=True)
    build_progress: int = Field(default=0, ge=0, le=100)
    template_id: Optional[int] = Field(default=None)

    # App configuration
    app_icon: Optional[str] = Field(default=None)
    primary_color: Optional[str] = Field(default=DEFAULT_PRIMARY_COLOR, max_length=7)
    secondary_color: Optional[str] = Field(default=DEFAULT_SECONDARY_COLOR, max_length=7)
    features: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    screenshots: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))

    # Build outputs
    apk_url: Optional[str] = Field(default=None)
    ipa_url: Optional[str] = Field(default=None)
    pwa_url: Optional[str] = Field(default=None)
    web_url: Optional[str] = Field(default=None)
    source_code_url: Optional[str] = Field(default=None)

    # Landing page
    landing_page_enabled: bool = Field(default=True)
    landing_page_views: int = Field(default=0)
    download_count: int = Field(default=0)

    # Metadata
    version: Optional[str] = Field(default="1.0.0", max_length=20)
    package_name: Optional[str] = Field(default=None, max_length=255)
    build_number: Optional[int] = Field(default=1)
    completed_at: Optional[datetime] = Field(default=None)


class Project(BaseModel, ProjectBase, table=True):
    """Project table."""

    __tablename__ = "projects"


class ProjectRead(ProjectBase):
    """Project response schema."""

    id: int
    created_at: datetime
    updated_at: datetime


class ProjectUpdate(SQLModel):
    """Owner-editable project fields. Slug and status are not editable."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    primary_color: Optional[str] = Field(default=None, max_length=7)
    secondary_color: Optional[str] = Field(default=None, max_length=7)
    features: Optional[List[str]] = None
    landing_page_enabled: Optional[bool] = None

    @field_validator("name", "landing_page_enabled")
    @classmethod
    def reject_null(cls, v):
        # May be omitted, but never cleared: the columns are NOT NULL
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ProjectCreate(SQLModel):
    """Input for creating a project. Template values fill unset fields."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    prompt: Optional[str] = None
    app_type: AppType = AppType.HYBRID
    template_id: Optional[int] = None
    primary_color: Optional[str] = Field(default=None, max_length=7)
    secondary_color: Optional[str] = Field(default=None, max_length=7)
    features: Optional[List[str]] = None
