"""
Tests for prompt construction, array extraction and the outbound LLM call.

The network is replaced with httpx.MockTransport; nothing leaves the process.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.core.errors import (
    ServiceNotConfiguredError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from app.llm.extraction import extract_recipe_array
from app.llm.prompts import build_recipe_prompt
from app.llm.recipe_generator import RecipeGenerator
from app.schemas.recipes import RecipeQuery

from conftest import SAMPLE_MODEL_RECIPES, anthropic_reply, make_settings, model_text

QUERY = RecipeQuery(ingredients="chicken, rice", cooking_time_minutes=35, dietary_tags=["Vegan"])


# --- Prompt ---


def test_prompt_embeds_sanitized_fields():
    prompt = build_recipe_prompt(QUERY)
    assert "Available ingredients: chicken, rice" in prompt
    assert "Max cooking time: 35 minutes" in prompt
    assert "Dietary requirements: Vegan." in prompt
    assert '"prepTime": 10' in prompt


def test_prompt_omits_dietary_line_without_tags():
    prompt = build_recipe_prompt(RecipeQuery(ingredients="eggs", cooking_time_minutes=10))
    assert "Dietary requirements" not in prompt


# --- Extraction ---


def test_extracts_array_from_surrounding_text():
    assert extract_recipe_array(model_text()) == SAMPLE_MODEL_RECIPES


def test_extraction_is_greedy_first_to_last_bracket():
    text = 'Intro [{"name": "A", "ingredients": ["x", "y"]}] outro'
    assert extract_recipe_array(text) == [{"name": "A", "ingredients": ["x", "y"]}]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        None,
        "no array here",
        "[{'name': 'single quotes'}]",
        "[1, 2] and later ]",
        '[{"name": "A"}] then [{"name": "B"}]',
    ],
)
def test_extraction_failures_are_upstream_errors(text):
    with pytest.raises(UpstreamUnavailableError):
        extract_recipe_array(text)


# --- Anthropic provider ---


@pytest.mark.asyncio
async def test_anthropic_call_shape_and_normalized_result():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return anthropic_reply(model_text())

    settings = make_settings(anthropic_api_key="secret-key")
    generator = RecipeGenerator(settings, transport=httpx.MockTransport(handler))
    recipes = await generator.generate(QUERY)

    assert [r.name for r in recipes] == ["Chicken Fried Rice", "Lemon Chicken Pilaf"]
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url == "https://api.anthropic.com/v1/messages"
    assert request.headers["x-api-key"] == "secret-key"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body["model"] == settings.anthropic_model
    assert body["max_tokens"] == 4000
    assert body["messages"][0]["role"] == "user"
    assert "chicken, rice" in body["messages"][0]["content"]


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 529])
async def test_non_success_status_is_unavailable_and_not_retried(status_code):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(status_code, json={"error": {"message": "upstream detail"}})

    generator = RecipeGenerator(
        make_settings(anthropic_api_key="k"), transport=httpx.MockTransport(handler)
    )
    with pytest.raises(UpstreamUnavailableError):
        await generator.generate(QUERY)
    assert len(calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"content": []}),
        httpx.Response(200, json={"content": [{"type": "text", "text": "   "}]}),
        httpx.Response(200, json={"content": [{"type": "text", "text": "Sorry, no recipes."}]}),
    ],
)
async def test_undecodable_replies_are_unavailable(response):
    generator = RecipeGenerator(
        make_settings(anthropic_api_key="k"),
        transport=httpx.MockTransport(lambda request: response),
    )
    with pytest.raises(UpstreamUnavailableError):
        await generator.generate(QUERY)


@pytest.mark.asyncio
async def test_transport_error_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    generator = RecipeGenerator(
        make_settings(anthropic_api_key="k"), transport=httpx.MockTransport(handler)
    )
    with pytest.raises(UpstreamUnavailableError):
        await generator.generate(QUERY)


@pytest.mark.asyncio
async def test_deadline_cancels_in_flight_call():
    cancelled = asyncio.Event()

    async def slow_handler(request):
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return anthropic_reply(model_text())

    generator = RecipeGenerator(
        make_settings(anthropic_api_key="k", llm_timeout_seconds=0.05),
        transport=httpx.MockTransport(slow_handler),
    )
    with pytest.raises(UpstreamTimeoutError):
        await generator.generate(QUERY)
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_transport_timeout_maps_to_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    generator = RecipeGenerator(
        make_settings(anthropic_api_key="k"), transport=httpx.MockTransport(handler)
    )
    with pytest.raises(UpstreamTimeoutError):
        await generator.generate(QUERY)


@pytest.mark.asyncio
async def test_missing_credential_never_calls_out():
    def handler(request):
        raise AssertionError("no request expected")

    generator = RecipeGenerator(make_settings(), transport=httpx.MockTransport(handler))
    with pytest.raises(ServiceNotConfiguredError):
        await generator.generate(QUERY)


# --- OpenAI provider ---


@pytest.mark.asyncio
async def test_openai_provider_reads_first_choice():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "id": "chatcmpl-test",
                "object": "chat.completion",
                "created": 0,
                "model": "gpt-4o-mini",
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": model_text()},
                        "finish_reason": "stop",
                    }
                ],
            },
        )

    settings = make_settings(llm_provider="openai", openai_api_key="sk-test")
    generator = RecipeGenerator(settings, transport=httpx.MockTransport(handler))
    recipes = await generator.generate(QUERY)

    assert len(recipes) == 2
    assert len(seen) == 1
    assert seen[0].url.path.endswith("/chat/completions")
    assert seen[0].headers["authorization"] == "Bearer sk-test"


@pytest.mark.asyncio
async def test_openai_error_status_is_unavailable():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, json={"error": {"message": "boom"}})

    settings = make_settings(llm_provider="openai", openai_api_key="sk-test")
    generator = RecipeGenerator(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(UpstreamUnavailableError):
        await generator.generate(QUERY)
    assert len(calls) == 1
