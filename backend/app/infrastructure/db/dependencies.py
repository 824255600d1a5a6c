"""
Dependency Injection Providers for ClickNGoAI

Provides the FastAPI dependency for per-request database sessions.
Routers import it through app.api.dependencies.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.db.database import get_session


# Type alias for session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]
