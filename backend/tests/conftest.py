"""
Test configuration and fixtures for ClickNGoAI.

Provides shared fixtures for unit and integration tests. Every test gets
its own SQLite database file, created from SQLModel metadata.
"""

import time
from typing import AsyncGenerator, Callable, Dict

import jwt
import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config.settings import get_settings
from app.domain.models import UserRole
from app.domain.subscription import SubscriptionTier
from app.infrastructure.db.database import DatabaseManager
from app.infrastructure.db.models import Template, User


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
async def db_manager(tmp_path) -> AsyncGenerator[DatabaseManager, None]:
    """DatabaseManager over a fresh SQLite file."""
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
def session_factory(db_manager) -> async_sessionmaker[AsyncSession]:
    return db_manager.session_factory


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for service-level tests. Call commit() to persist."""
    async with session_factory() as s:
        yield s


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(db_manager):
    """Get the FastAPI application bound to the test database."""
    from app.main import app
    app.state.db_manager = db_manager
    return app


@pytest.fixture
def client():
    """Synchronous test client for endpoints that never touch the database."""
    from app.main import app
    return TestClient(app)


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Get async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Auth Helpers
# =============================================================================

def make_token(open_id: str, expires_in: int = 3600, **claims) -> str:
    """HS256 token signed with the configured secret."""
    settings = get_settings()
    payload = {
        "sub": open_id,
        "aud": settings.jwt_audience,
        "exp": int(time.time()) + expires_in,
        **claims,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm="HS256")


def _auth_headers(open_id: str, **claims) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(open_id, **claims)}"}


@pytest.fixture
def token_factory() -> Callable[..., str]:
    return make_token


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Build an Authorization header for an open_id."""
    return _auth_headers


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def make_user(session_factory) -> Callable:
    """Factory inserting a committed user. Returns the detached User."""

    async def _make_user(
        open_id: str,
        role: UserRole = UserRole.USER,
        tier: SubscriptionTier = SubscriptionTier.FREE,
        app_limit: int = 1,
        name: str = "Test User",
    ) -> User:
        async with session_factory() as s:
            user = User(
                open_id=open_id,
                name=name,
                role=role.value,
                subscription_tier=tier.value,
                app_limit=app_limit,
            )
            s.add(user)
            await s.commit()
            await s.refresh(user)
            return user

    return _make_user


@pytest.fixture
def make_template(session_factory) -> Callable:
    """Factory inserting a committed template."""

    async def _make_template(**overrides) -> Template:
        values = {
            "name": "Food Delivery App",
            "slug": "food-delivery",
            "category": "food_delivery",
            "description": "Order food from restaurants",
            "default_prompt": "Build a food delivery app",
            "features": ["Restaurant Listings", "Order Tracking"],
            "primary_color": "#ef4444",
            "secondary_color": "#f97316",
        }
        values.update(overrides)
        async with session_factory() as s:
            template = Template(**values)
            s.add(template)
            await s.commit()
            await s.refresh(template)
            return template

    return _make_template
