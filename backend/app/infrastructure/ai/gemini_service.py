"""
Gemini App Idea Generator for ClickNGoAI

Turns a free-text app idea into a structured suggestion (name,
description, features, colors, audience) using the google.genai SDK.

Generation never fails from the caller's point of view: any
configuration, transport or parsing problem yields FALLBACK_APP_IDEA.
"""

import asyncio
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from app.config.settings import settings
from app.domain.models import AppIdea, FALLBACK_APP_IDEA
from app.infrastructure.exceptions import AIServiceError, ConfigurationError


logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an expert app designer. Given a user's app idea, generate a detailed app specification including:
- App name (creative and catchy)
- Description (2-3 sentences)
- Key features (5-7 features)
- Suggested colors (primary and secondary hex codes)
- Target audience

Respond in JSON with the keys: name, description, features, primary_color, secondary_color, target_audience."""


class AppIdeaGenerator:
    """
    App idea generation backed by Gemini.

    Args:
        api_key: Google AI key; None leaves the generator in fallback mode
        model: Gemini model name
        temperature: Sampling temperature
        max_output_tokens: Response size cap
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.0-flash",
        temperature: float = 0.8,
        max_output_tokens: int = 2048,
    ):
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        """Get the Gemini client, creating it on first use."""
        if self._client is None:
            if not self._api_key:
                raise ConfigurationError(
                    "Missing GOOGLE_API_KEY environment variable",
                    missing_keys=["GOOGLE_API_KEY"]
                )
            self._client = genai.Client(api_key=self._api_key)
            logger.info(f"AppIdeaGenerator initialized with model: {self._model}")
        return self._client

    async def generate_raw(self, prompt: str) -> AppIdea:
        """
        Ask Gemini for an app idea.

        Raises:
            ConfigurationError: No API key configured
            AIServiceError: Empty, malformed or failed response
        """
        try:
            response = await asyncio.to_thread(
                lambda: self.client.models.generate_content(
                    model=self._model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        system_instruction=SYSTEM_PROMPT,
                        temperature=self._temperature,
                        max_output_tokens=self._max_output_tokens,
                        response_mime_type="application/json",
                        response_schema=AppIdea,
                    )
                )
            )
        except ConfigurationError:
            raise
        except Exception as e:
            raise AIServiceError(
                f"Failed to generate app idea: {str(e)}",
                model=self._model,
                operation="generate_app_idea",
                original_error=e
            )

        if not response.text:
            raise AIServiceError(
                "Empty response from Gemini",
                model=self._model,
                operation="generate_app_idea"
            )

        try:
            return AppIdea.model_validate(self._parse_json_response(response.text))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise AIServiceError(
                "Gemini response did not match the app idea format",
                model=self._model,
                operation="parse_app_idea",
                original_error=e
            )

    async def generate(self, prompt: str) -> AppIdea:
        """Generate an app idea, substituting the fallback on any failure."""
        try:
            return await self.generate_raw(prompt)
        except (AIServiceError, ConfigurationError) as e:
            logger.warning(f"App idea generation failed, using fallback: {e.message}")
        except Exception as e:
            logger.error(f"Unexpected app idea generation error, using fallback: {e}")
        return FALLBACK_APP_IDEA.model_copy(deep=True)

    def _parse_json_response(self, response_text: str) -> Dict[str, Any]:
        """Parse JSON from response, handling markdown code blocks."""
        text = response_text.strip()

        # Remove markdown code blocks
        if text.startswith("```json"):
            text = text[7:]
        elif text.startswith("```"):
            text = text[3:]

        if text.endswith("```"):
            text = text[:-3]

        return json.loads(text.strip())


@lru_cache
def get_app_idea_generator() -> AppIdeaGenerator:
    """Process-wide generator built from settings."""
    return AppIdeaGenerator(
        api_key=settings.google_api_key,
        model=settings.gemini_model,
        temperature=settings.ai_temperature,
        max_output_tokens=settings.ai_max_output_tokens,
    )
