"""
Auth API Routes

Current-user lookup and logout.
"""

from typing import Optional

from fastapi import APIRouter, Response

from app.api.dependencies import OptionalUser
from app.config.settings import get_settings
from app.infrastructure.db.models.user import UserRead


router = APIRouter()


@router.get("/auth/me", response_model=Optional[UserRead])
async def get_me(user: OptionalUser):
    """The signed-in user, or null for anonymous callers."""
    return user


@router.post("/auth/logout")
async def logout(response: Response):
    """Clear the session cookie."""
    response.delete_cookie(get_settings().session_cookie_name, path="/")
    return {"success": True}
