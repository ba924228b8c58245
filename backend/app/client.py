"""
InsightChef API Client
======================

Async client for POST /api/recipes, used by the smoke script and tests.
Mirrors what the browser frontend does:

- at most one generation request in flight (extra calls are ignored)
- hard 30 s deadline around the backend call, cancelled on expiry
- only fixed user-facing messages, never response bodies or exception text
- recipes are re-normalized before being handed to the caller
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx

from .data.constants import DEFAULT_COOKING_TIME
from .data.recipe_normalizer import normalize_recipes
from .schemas.recipes import Recipe

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30.0

EMPTY_INGREDIENTS_MESSAGE = "Please enter at least one ingredient to get started."
TIMEOUT_MESSAGE = "Request took too long. The server may be slow or unavailable. Please try again."
NETWORK_MESSAGE = "Unable to connect to the service. Please check your internet connection and try again."
INVALID_RESPONSE_MESSAGE = "The recipe service returned an invalid response. Please try again later."
NO_RECIPES_MESSAGE = "No recipes could be generated. Please try different ingredients or try again."
DEFAULT_STATUS_MESSAGE = "The recipe service is temporarily unavailable. Please try again later."

STATUS_MESSAGES = {
    400: "Invalid request. Please check your input and try again.",
    401: "Authentication failed. Please try again.",
    403: "Access denied. Please try again.",
    404: "Service not found. Please try again later.",
    429: "Too many requests. Please wait a moment and try again.",
    500: "The recipe service encountered an error. Please try again later.",
    502: DEFAULT_STATUS_MESSAGE,
    503: DEFAULT_STATUS_MESSAGE,
    504: "Request took too long. The server may be slow. Please try again.",
}


def user_message_for_status(status_code: int) -> str:
    return STATUS_MESSAGES.get(status_code, DEFAULT_STATUS_MESSAGE)


@dataclass
class ClientResult:
    recipes: List[Recipe] = field(default_factory=list)
    mock: bool = False
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecipeClient:
    """
    Single-flight client for the recipes endpoint.

    ``generate`` returns None when a request is already outstanding; the
    check happens before the first await, so it cannot race.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        api_prefix: str = "/api",
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.api_prefix = api_prefix
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def generate(
        self,
        ingredients: Any,
        cooking_time: Any = DEFAULT_COOKING_TIME,
        dietary: Optional[List[str]] = None,
    ) -> Optional[ClientResult]:
        if self._in_flight:
            logger.debug("Generation already in flight, ignoring duplicate request")
            return None

        self._in_flight = True
        try:
            return await self._generate(ingredients, cooking_time, dietary)
        finally:
            self._in_flight = False

    async def _generate(
        self, ingredients: Any, cooking_time: Any, dietary: Optional[List[str]]
    ) -> ClientResult:
        text = ingredients.strip() if isinstance(ingredients, str) else ""
        if not text:
            return ClientResult(error=EMPTY_INGREDIENTS_MESSAGE)

        payload = {
            "ingredients": text,
            "cookingTime": str(cooking_time).strip() if cooking_time is not None else str(DEFAULT_COOKING_TIME),
            "dietary": list(dietary) if isinstance(dietary, (list, tuple)) else [],
        }

        try:
            response = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Recipe request exceeded %.0fs", self.timeout)
            return ClientResult(error=TIMEOUT_MESSAGE, status_code=504)
        except httpx.HTTPError as e:
            logger.warning("Recipe request failed: %s", e)
            return ClientResult(error=NETWORK_MESSAGE)

        if response.status_code != 200:
            return ClientResult(
                error=user_message_for_status(response.status_code),
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            return ClientResult(error=INVALID_RESPONSE_MESSAGE, status_code=response.status_code)

        raw_recipes = data.get("recipes") if isinstance(data, dict) else None
        recipes = normalize_recipes(raw_recipes)
        mock = isinstance(data, dict) and data.get("mock") is True
        if not recipes:
            return ClientResult(mock=mock, error=NO_RECIPES_MESSAGE, status_code=response.status_code)
        return ClientResult(recipes=recipes, mock=mock, status_code=response.status_code)

    async def _post(self, payload: dict) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            return await client.post(f"{self.api_prefix}/recipes", json=payload)
