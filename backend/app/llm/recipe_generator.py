"""
Recipe Generator
================

The single outbound call of InsightChef.

Sends the constructed prompt to the configured LLM provider exactly once,
under a hard deadline, and turns the reply into normalized recipes.

Pipeline:
1. build_recipe_prompt → prompt text
2. provider call (Anthropic Messages API over httpx, or OpenAI SDK)
3. extract_recipe_array → decoded list
4. normalize_recipes → List[Recipe]

No retries: any failure surfaces immediately as an upstream error.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import httpx
import openai
from openai import AsyncOpenAI

from ..core.config import Settings
from ..core.errors import (
    ServiceNotConfiguredError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from ..data.recipe_normalizer import normalize_recipes
from ..schemas.recipes import Recipe, RecipeQuery
from .extraction import extract_recipe_array
from .prompts import build_recipe_prompt

logger = logging.getLogger(__name__)


class RecipeGenerator:
    """
    Calls the LLM provider and returns normalized recipes.

    ``transport`` lets tests swap the network for an ``httpx.MockTransport``.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    @property
    def provider(self) -> str:
        return self.settings.llm_provider

    async def generate(self, query: RecipeQuery) -> List[Recipe]:
        prompt = build_recipe_prompt(query)
        text = await self.generate_text(prompt)
        recipes = normalize_recipes(extract_recipe_array(text))
        logger.info("Generated %d recipes via %s", len(recipes), self.provider)
        return recipes

    async def generate_text(self, prompt: str) -> str:
        """
        Run one provider call under the configured deadline.

        Raises:
            ServiceNotConfiguredError: no credential for the provider
            UpstreamTimeoutError: the deadline expired (the call is cancelled)
            UpstreamUnavailableError: any other transport or payload failure
        """
        api_key = self.settings.active_api_key
        if not api_key:
            raise ServiceNotConfiguredError(f"no API key configured for {self.provider}")

        if self.provider == "openai":
            call = self._call_openai(prompt, api_key)
        else:
            call = self._call_anthropic(prompt, api_key)

        try:
            text = await asyncio.wait_for(call, timeout=self.settings.llm_timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.warning(
                "%s call exceeded %.0fs deadline", self.provider, self.settings.llm_timeout_seconds
            )
            raise UpstreamTimeoutError("llm deadline exceeded") from e

        if not isinstance(text, str) or not text.strip():
            raise UpstreamUnavailableError(f"{self.provider} returned no text")
        return text

    async def _call_anthropic(self, prompt: str, api_key: str) -> str:
        url = f"{self.settings.anthropic_base_url.rstrip('/')}/v1/messages"
        headers = {
            "Content-Type": "application/json",
            "x-api-key": api_key,
            "anthropic-version": self.settings.anthropic_version,
        }
        body = {
            "model": self.settings.anthropic_model,
            "max_tokens": self.settings.llm_max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.llm_timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(url, headers=headers, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Anthropic request timed out: %s", e)
            raise UpstreamTimeoutError("anthropic transport timeout") from e
        except httpx.HTTPStatusError as e:
            logger.error("Anthropic API error: HTTP %s", e.response.status_code)
            raise UpstreamUnavailableError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Anthropic request failed: %s", e)
            raise UpstreamUnavailableError("anthropic transport error") from e
        except ValueError as e:
            logger.error("Anthropic response parse failed: %s", e)
            raise UpstreamUnavailableError("anthropic body not JSON") from e

        try:
            return data["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error("Anthropic response missing text content")
            raise UpstreamUnavailableError("anthropic body has no text") from e

    async def _call_openai(self, prompt: str, api_key: str) -> str:
        http_client = httpx.AsyncClient(transport=self.transport) if self.transport else None
        client = AsyncOpenAI(
            api_key=api_key,
            timeout=self.settings.llm_timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )
        try:
            response = await client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[{"role": "user", "content": prompt}],
                max_completion_tokens=self.settings.llm_max_tokens,
            )
        except openai.APITimeoutError as e:
            logger.warning("OpenAI request timed out: %s", e)
            raise UpstreamTimeoutError("openai transport timeout") from e
        except openai.APIStatusError as e:
            logger.error("OpenAI API error: HTTP %s", e.status_code)
            raise UpstreamUnavailableError(f"HTTP {e.status_code}") from e
        except openai.APIError as e:
            logger.error("OpenAI request failed: %s", e)
            raise UpstreamUnavailableError("openai transport error") from e
        finally:
            await client.close()

        if not response.choices:
            raise UpstreamUnavailableError("openai returned no choices")
        return response.choices[0].message.content or ""
