"""
SQLModel ORM Models for ClickNGoAI

Exports all database models for Alembic autogenerate and application use.
Import models here to register them with SQLModel.metadata.
"""

from app.infrastructure.db.models.base import (
    BaseModel,
    IDMixin,
    TimestampMixin,
)
from app.infrastructure.db.models.user import (
    User,
    UserBase,
    UserRead,
    UserUpdate,
)
from app.infrastructure.db.models.project import (
    Project,
    ProjectBase,
    ProjectRead,
    ProjectCreate,
    ProjectUpdate,
)
from app.infrastructure.db.models.template import (
    Template,
    TemplateBase,
    TemplateRead,
    TemplateCreate,
)
from app.infrastructure.db.models.subscription import (
    SubscriptionModel,
    SubscriptionRead,
    SubscriptionCreate,
)
from app.infrastructure.db.models.build_queue import (
    BuildQueueEntry,
    BuildQueueRead,
)
from app.infrastructure.db.models.activity_log import (
    ActivityLog,
    ActivityLogCreate,
    ActivityLogRead,
)
from app.infrastructure.db.models.pricing_plan import (
    PricingPlan,
    PricingPlanCreate,
)


__all__ = [
    # Base
    "BaseModel",
    "IDMixin",
    "TimestampMixin",
    # User
    "User",
    "UserBase",
    "UserRead",
    "UserUpdate",
    # Project
    "Project",
    "ProjectBase",
    "ProjectRead",
    "ProjectCreate",
    "ProjectUpdate",
    # Template
    "Template",
    "TemplateBase",
    "TemplateRead",
    "TemplateCreate",
    # Subscription
    "SubscriptionModel",
    "SubscriptionRead",
    "SubscriptionCreate",
    # Build queue
    "BuildQueueEntry",
    "BuildQueueRead",
    # Activity
    "ActivityLog",
    "ActivityLogCreate",
    "ActivityLogRead",
    # Pricing
    "PricingPlan",
    "PricingPlanCreate",
]
