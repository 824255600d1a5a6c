#!/usr/bin/env python3
"""
Seed Catalog Script

Loads the pricing plans and the starter templates into the database.
Safe to re-run: plans are upserted by tier, templates are skipped when
their slug already exists.

Usage:
    python -m scripts.seed_catalog
"""

import asyncio
import logging

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config.settings import settings
from app.domain.models import TemplateCategory
from app.domain.subscription import DEFAULT_PRICING_CATALOG
from app.infrastructure.db.database import DatabaseManager
from app.infrastructure.db.models.pricing_plan import PricingPlanCreate
from app.infrastructure.db.models.template import Template
from app.infrastructure.db.repositories.pricing_plan_repository import PricingPlanRepository
from app.infrastructure.db.repositories.template_repository import TemplateRepository

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


STARTER_TEMPLATES = [
    {
        "name": "Food Delivery App",
        "slug": "food-delivery",
        "category": TemplateCategory.FOOD_DELIVERY,
        "description": "Complete food ordering system with restaurant listings, cart, order tracking, and payment integration.",
        "features": ["Restaurant Listings", "Order Tracking", "Payment Gateway", "Reviews & Ratings", "Push Notifications"],
        "primary_color": "#ef4444",
        "secondary_color": "#f97316",
        "is_premium": False,
    },
    {
        "name": "E-Commerce Store",
        "slug": "ecommerce",
        "category": TemplateCategory.ECOMMERCE,
        "description": "Full-featured online store with product catalog, shopping cart, checkout, and inventory management.",
        "features": ["Product Catalog", "Shopping Cart", "Secure Checkout", "Inventory Management", "Order History"],
        "primary_color": "#8b5cf6",
        "secondary_color": "#a855f7",
        "is_premium": False,
    },
    {
        "name": "Social Network",
        "slug": "social-media",
        "category": TemplateCategory.SOCIAL_MEDIA,
        "description": "Modern social platform with posts, stories, messaging, and user profiles.",
        "features": ["User Profiles", "Posts & Stories", "Direct Messaging", "Notifications", "Follow System"],
        "primary_color": "#3b82f6",
        "secondary_color": "#6366f1",
        "is_premium": True,
    },
    {
        "name": "Booking System",
        "slug": "booking",
        "category": TemplateCategory.BOOKING,
        "description": "Appointment and reservation system with calendar, availability management, and reminders.",
        "features": ["Calendar View", "Availability Management", "Email Reminders", "Payment Integration", "Customer Management"],
        "primary_color": "#10b981",
        "secondary_color": "#14b8a6",
        "is_premium": False,
    },
    {
        "name": "Fitness Tracker",
        "slug": "fitness",
        "category": TemplateCategory.FITNESS,
        "description": "Health and fitness app with workout plans, meal tracking, and progress analytics.",
        "features": ["Workout Plans", "Meal Tracking", "Progress Charts", "Goal Setting", "Social Challenges"],
        "primary_color": "#f59e0b",
        "secondary_color": "#eab308",
        "is_premium": False,
    },
    {
        "name": "Task Manager",
        "slug": "task-manager",
        "category": TemplateCategory.TASK_MANAGER,
        "description": "Productivity app with kanban boards, task lists, deadlines, and team collaboration.",
        "features": ["Kanban Boards", "Task Lists", "Deadlines", "Team Collaboration", "File Attachments"],
        "primary_color": "#6366f1",
        "secondary_color": "#8b5cf6",
        "is_premium": False,
    },
    {
        "name": "Chat Application",
        "slug": "chat",
        "category": TemplateCategory.CHAT,
        "description": "Real-time messaging app with group chats, media sharing, and end-to-end encryption.",
        "features": ["Real-time Messaging", "Group Chats", "Media Sharing", "Voice Messages", "Read Receipts"],
        "primary_color": "#22c55e",
        "secondary_color": "#10b981",
        "is_premium": True,
    },
    {
        "name": "Learning Platform",
        "slug": "lms",
        "category": TemplateCategory.LMS,
        "description": "Online learning system with courses, quizzes, certificates, and progress tracking.",
        "features": ["Course Management", "Video Lessons", "Quizzes", "Certificates", "Progress Tracking"],
        "primary_color": "#0ea5e9",
        "secondary_color": "#06b6d4",
        "is_premium": True,
    },
    {
        "name": "CRM System",
        "slug": "crm",
        "category": TemplateCategory.CRM,
        "description": "Customer relationship management with leads, pipeline, contacts, and analytics.",
        "features": ["Lead Management", "Sales Pipeline", "Contact Database", "Analytics Dashboard", "Email Integration"],
        "primary_color": "#ec4899",
        "secondary_color": "#f43f5e",
        "is_premium": True,
    },
    {
        "name": "News App",
        "slug": "news",
        "category": TemplateCategory.NEWS,
        "description": "News aggregator with categories, bookmarks, offline reading, and personalized feed.",
        "features": ["Category Filters", "Bookmarks", "Offline Reading", "Personalized Feed", "Push Notifications"],
        "primary_color": "#64748b",
        "secondary_color": "#475569",
        "is_premium": False,
    },
]


async def seed_catalog(db: DatabaseManager) -> dict:
    """
    Upsert pricing plans and insert missing starter templates.

    Returns:
        Dict with seeding statistics
    """
    stats = {"plans_upserted": 0, "templates_created": 0, "templates_skipped": 0}

    async with db.session_scope() as session:
        plans = PricingPlanRepository(session)
        for plan in DEFAULT_PRICING_CATALOG:
            await plans.upsert(PricingPlanCreate(**plan.model_dump(mode="json")))
            stats["plans_upserted"] += 1

        templates = TemplateRepository(session)
        for data in STARTER_TEMPLATES:
            if await templates.get_by_slug(data["slug"]):
                stats["templates_skipped"] += 1
                continue
            await templates.add(Template(**{**data, "category": data["category"].value}))
            stats["templates_created"] += 1

    return stats


async def main():
    """Main entry point."""
    db = DatabaseManager.from_settings(settings)
    try:
        if db.is_sqlite:
            await db.create_tables()

        stats = await seed_catalog(db)

        print("\n" + "=" * 50)
        print("CATALOG SEED COMPLETE")
        print("=" * 50)
        print(f"Pricing plans upserted: {stats['plans_upserted']}")
        print(f"Templates created:      {stats['templates_created']}")
        print(f"Templates skipped:      {stats['templates_skipped']}")
        print("=" * 50)
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(main())
