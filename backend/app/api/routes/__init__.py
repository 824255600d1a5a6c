# API Routes Module
from app.api.routes import (
    auth,
    projects,
    templates,
    builds,
    subscriptions,
    admin,
    ai,
)

__all__ = [
    "auth",
    "projects",
    "templates",
    "builds",
    "subscriptions",
    "admin",
    "ai",
]
