"""
Repository Layer for ClickNGoAI

Exports all repository classes for dependency injection.
"""

from app.infrastructure.db.repositories.base_repository import BaseRepository
from app.infrastructure.db.repositories.user_repository import UserRepository
from app.infrastructure.db.repositories.project_repository import ProjectRepository
from app.infrastructure.db.repositories.template_repository import TemplateRepository
from app.infrastructure.db.repositories.subscription_repository import (
    SubscriptionRepository,
)
from app.infrastructure.db.repositories.build_queue_repository import (
    BuildQueueRepository,
)
from app.infrastructure.db.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.infrastructure.db.repositories.pricing_plan_repository import (
    PricingPlanRepository,
)


__all__ = [
    # Base
    "BaseRepository",
    # Repositories
    "UserRepository",
    "ProjectRepository",
    "TemplateRepository",
    "SubscriptionRepository",
    "BuildQueueRepository",
    "ActivityLogRepository",
    "PricingPlanRepository",
]
