"""
User SQLModel

Identity and entitlement record. Role and subscription tier are
independent axes.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.domain.models import UserRole
from app.domain.subscription import FREE_APP_LIMIT, SubscriptionTier
from app.infrastructure.db.models.base import BaseModel, utcnow


class UserBase(SQLModel):
    """Shared user fields."""

    open_id: str = Field(
        ...,
        max_length=64,
        unique=True,
        index=True,
        description="External identity (token subject)"
    )
    name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=20)
    avatar: Optional[str] = Field(default=None)
    login_method: Optional[str] = Field(default=None, max_length=64)
    role: str = Field(default=UserRole.USER.value, max_length=20)
    subscription_tier: str = Field(default=SubscriptionTier.FREE.value, max_length=20)
    app_limit: int = Field(default=FREE_APP_LIMIT)
    apps_created: int = Field(default=0, description="Only ever increases")
    is_active: bool = Field(default=True)


class User(BaseModel, UserBase, table=True):
    """User table."""

    __tablename__ = "users"

    last_signed_in: datetime = Field(default_factory=utcnow, nullable=False)


class UserRead(UserBase):
    """User response schema."""

    id: int
    last_signed_in: datetime
    created_at: datetime
    updated_at: datetime


class UserUpdate(SQLModel):
    """Admin-editable user fields. All optional."""

    role: Optional[UserRole] = None
    subscription_tier: Optional[SubscriptionTier] = None
    app_limit: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
