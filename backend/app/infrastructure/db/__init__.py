"""
Database Infrastructure Package for ClickNGoAI

Exports database utilities and the session dependency.
"""

from app.infrastructure.db.database import (
    DatabaseManager,
    normalize_database_url,
    get_db_manager,
    get_session,
)

from app.infrastructure.db.dependencies import SessionDep


__all__ = [
    # Database management
    "DatabaseManager",
    "normalize_database_url",
    "get_db_manager",
    "get_session",
    # Dependencies
    "SessionDep",
]
