"""
Domain Models for ClickNGoAI

Pure Python/Pydantic models with no framework dependencies.
These models define the core enumerations and value objects.
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Account role. Independent of the subscription tier."""
    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class AppType(str, Enum):
    """Target platform for a generated app."""
    ANDROID = "android"
    IOS = "ios"
    PWA = "pwa"
    HYBRID = "hybrid"
    WEB = "web"
    DESKTOP = "desktop"


class ProjectStatus(str, Enum):
    """Project lifecycle status."""
    PENDING = "pending"
    BUILDING = "building"
    COMPLETED = "completed"
    FAILED = "failed"


class BuildStatus(str, Enum):
    """Build queue entry status."""
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class TemplateCategory(str, Enum):
    """Closed set of marketplace template categories."""
    FOOD_DELIVERY = "food_delivery"
    ECOMMERCE = "ecommerce"
    SOCIAL_MEDIA = "social_media"
    BOOKING = "booking"
    FITNESS = "fitness"
    TASK_MANAGER = "task_manager"
    CHAT = "chat"
    LMS = "lms"
    CRM = "crm"
    NEWS = "news"
    OTHER = "other"


class ActivityAction(str, Enum):
    """Audit trail action names."""
    PROJECT_CREATED = "project_created"
    PROJECT_UPDATED = "project_updated"
    PROJECT_DELETED = "project_deleted"
    SUBSCRIPTION_CREATED = "subscription_created"
    SUBSCRIPTION_CANCELLED = "subscription_cancelled"
    USER_UPDATED = "user_updated"


DEFAULT_PRIMARY_COLOR = "#6366f1"
DEFAULT_SECONDARY_COLOR = "#8b5cf6"


class AppIdea(BaseModel):
    """Structured app suggestion returned by the idea generator."""
    name: str = Field(..., description="Creative and catchy app name")
    description: str = Field(..., description="Two or three sentence summary")
    features: List[str] = Field(default_factory=list, description="Key features")
    primary_color: str = Field(..., description="Primary hex color")
    secondary_color: str = Field(..., description="Secondary hex color")
    target_audience: str = Field(..., description="Who the app is for")


FALLBACK_APP_IDEA = AppIdea(
    name="My Awesome App",
    description="A powerful application built with ClickNGoAI",
    features=[
        "User Authentication",
        "Dashboard",
        "Settings",
        "Notifications",
        "Profile Management",
    ],
    primary_color=DEFAULT_PRIMARY_COLOR,
    secondary_color=DEFAULT_SECONDARY_COLOR,
    target_audience="General users",
)
