"""
AI API Routes

App idea generation.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.api.dependencies import CurrentUser
from app.domain.models import AppIdea
from app.infrastructure.ai.gemini_service import AppIdeaGenerator, get_app_idea_generator


router = APIRouter()


class AppIdeaRequest(BaseModel):
    prompt: str = Field(..., min_length=10, description="Free-text app idea")


@router.post("/ai/generate-app-idea", response_model=AppIdea)
async def generate_app_idea(
    request: AppIdeaRequest,
    user: CurrentUser,
    generator: AppIdeaGenerator = Depends(get_app_idea_generator),
):
    """
    Turn a short idea into a structured app suggestion.

    Never fails on generator errors; a fixed default idea is returned
    instead.
    """
    return await generator.generate(request.prompt)
