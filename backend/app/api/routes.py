"""
InsightChef API Routes
======================

Endpoints:
  - POST /recipes
  - GET  /health
  - GET  /status
"""

import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..chef import InsightChef
from ..core.config import Settings, get_settings
from ..core.errors import InsightChefError, UnexpectedError
from ..data.constants import DIETARY_ALLOWLIST, DIETARY_MAX_TAGS
from ..schemas.recipes import ErrorResponse, RecipeRequest, RecipesResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recipes"])

limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return get_settings().rate_limit


def get_chef(settings: Settings = Depends(get_settings)) -> InsightChef:
    return InsightChef(settings)


ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 429, 500, 502, 503, 504)
}


@router.post("/recipes", response_model=RecipesResponse, responses=ERROR_RESPONSES)
@limiter.limit(_rate_limit)
async def create_recipes(
    request: Request,
    payload: RecipeRequest,
    chef: InsightChef = Depends(get_chef),
):
    try:
        return await chef.suggest(payload.ingredients, payload.cookingTime, payload.dietary)
    except InsightChefError:
        raise
    except Exception as e:
        logger.error("recipes error: %s", e, exc_info=True)
        raise UnexpectedError(str(e)) from e


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "mode": "mock" if settings.is_mock_mode else "live",
    }


@router.get("/status")
@limiter.limit(_rate_limit)
async def get_status(request: Request, settings: Settings = Depends(get_settings)):
    """Detailed status with configuration info. Never exposes credentials."""
    return {
        "status": "operational",
        "version": settings.app_version,
        "provider": settings.llm_provider,
        "model": settings.active_model,
        "mock": settings.is_mock_mode,
        "timeout_seconds": settings.llm_timeout_seconds,
        "dietary": {
            "allowed": list(DIETARY_ALLOWLIST),
            "max_tags": DIETARY_MAX_TAGS,
        },
    }
