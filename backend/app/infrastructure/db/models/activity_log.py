"""
Activity Log Model

Append-only audit trail of user and admin actions.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from app.infrastructure.db.models.base import IDMixin, utcnow


class ActivityLogBase(SQLModel):
    """Shared activity log fields."""

    user_id: Optional[int] = Field(default=None, index=True)
    action: str = Field(..., max_length=100)
    entity_type: Optional[str] = Field(default=None, max_length=50)
    entity_id: Optional[int] = Field(default=None)
    details: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None)


class ActivityLog(IDMixin, ActivityLogBase, table=True):
    """Activity log table. Rows are never updated."""

    __tablename__ = "activity_logs"

    created_at: datetime = Field(default_factory=utcnow, nullable=False, index=True)


class ActivityLogCreate(ActivityLogBase):
    """Schema for appending an activity entry."""
    pass


class ActivityLogRead(ActivityLogBase):
    """Activity log response schema."""

    id: int
    created_at: datetime
