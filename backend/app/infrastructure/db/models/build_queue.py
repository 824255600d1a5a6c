"""
Build Queue SQLModel

One build attempt for a project. A project may accumulate several
entries; the most recently created one is its current build.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.domain.models import BuildStatus
from app.infrastructure.db.models.base import BaseModel


class BuildQueueBase(SQLModel):
    """Shared build queue fields."""

    # No foreign key: deleting a project keeps its build history
    project_id: int = Field(..., index=True)
    user_id: int = Field(..., index=True)
    priority: int = Field(default=0)
    status: str = Field(default=BuildStatus.QUEUED.value, max_length=20, index=True)
    progress: int = Field(default=0)
    current_step: Optional[str] = Field(default=None, max_length=255)
    error_message: Optional[str] = Field(default=None)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)
    estimated_time: Optional[int] = Field(default=None, description="Seconds")


class BuildQueueEntry(BaseModel, BuildQueueBase, table=True):
    """Build queue table."""

    __tablename__ = "build_queue"


class BuildQueueRead(BuildQueueBase):
    """Build queue entry response schema."""

    id: int
    created_at: datetime
    updated_at: datetime
