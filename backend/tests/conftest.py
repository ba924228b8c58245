"""
Shared fixtures.

Every API test runs against explicit Settings injected through FastAPI
dependency overrides. Settings-related env vars are removed for every
test and ``make_settings`` pins all provider fields, so host configuration
(API keys, base URLs, provider choice, .env) never leaks into a test.
"""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.routes import get_chef, limiter
from app.chef import InsightChef
from app.core.config import Settings, get_settings
from app.llm.recipe_generator import RecipeGenerator
from main import app

SAMPLE_MODEL_RECIPES = [
    {
        "name": "Chicken Fried Rice",
        "difficulty": "Easy",
        "prepTime": 10,
        "cookTime": 15,
        "cuisine": "Asian",
        "ingredients": ["2 cups cooked rice", "1 chicken breast, diced"],
        "instructions": ["Cook chicken.", "Add rice and stir-fry."],
    },
    {
        "name": "Lemon Chicken Pilaf",
        "difficulty": "Hard",
        "prepTime": 15,
        "cookTime": 30,
        "cuisine": "Mediterranean",
        "ingredients": ["1 cup rice", "2 chicken thighs"],
        "instructions": ["Brown chicken.", "Simmer rice in stock."],
    },
]


# Every env var Settings reads, aliases included
SETTINGS_ENV_VARS = sorted(
    {name.upper() for name in Settings.model_fields} | {"PORT", "API_PORT"}
)


def make_settings(**overrides) -> Settings:
    values = {
        "llm_provider": "anthropic",
        "llm_max_tokens": 4000,
        "llm_timeout_seconds": 90.0,
        "anthropic_api_key": "",
        "anthropic_model": "claude-sonnet-4-20250514",
        "anthropic_version": "2023-06-01",
        "anthropic_base_url": "https://api.anthropic.com",
        "openai_api_key": "",
        "openai_model": "gpt-4o-mini",
        "mock_mode": None,
        "api_prefix": "/api",
        "rate_limit": "20/minute",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def anthropic_reply(text: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={
            "id": "msg_test",
            "type": "message",
            "role": "assistant",
            "content": [{"type": "text", "text": text}],
        },
    )


def model_text(recipes=None) -> str:
    payload = json.dumps(SAMPLE_MODEL_RECIPES if recipes is None else recipes)
    return f"Here are your recipes:\n{payload}\nEnjoy!"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Hide host configuration from Settings() and the cached get_settings()."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def offline_settings() -> Settings:
    return make_settings()


@pytest.fixture
def live_settings() -> Settings:
    return make_settings(anthropic_api_key="test-key", llm_timeout_seconds=2.0)


@pytest.fixture
def api_client():
    """TestClient with dependency overrides cleared afterwards."""
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def use_settings() -> Callable[[Settings], None]:
    def _apply(settings: Settings) -> None:
        app.dependency_overrides[get_settings] = lambda: settings

    return _apply


@pytest.fixture
def use_upstream(use_settings) -> Callable:
    """
    Route the LLM call to an httpx handler.

    Returns a list that collects every outbound request.
    """

    def _apply(settings: Settings, handler) -> list:
        seen: list = []

        async def recording_handler(request: httpx.Request):
            seen.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        generator = RecipeGenerator(settings, transport=httpx.MockTransport(recording_handler))
        use_settings(settings)
        app.dependency_overrides[get_chef] = lambda: InsightChef(settings, generator=generator)
        return seen

    return _apply
