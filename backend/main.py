"""
InsightChef API
===============

Main entry point for the recipe suggestion service.

Features:
- POST /api/recipes: ingredients + time budget + dietary tags -> recipes
- Mock mode with fixed sample recipes when no LLM credential is configured
- Rate limiting, CORS and security headers on every response
- Serves the static frontend
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import limiter, router as api_router
from app.core.config import get_settings
from app.core.errors import (
    GENERIC_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    NOT_FOUND_MESSAGE,
    RATE_LIMIT_MESSAGE,
    InsightChefError,
)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "; ".join(
        [
            "default-src 'self'",
            "script-src 'self'",
            "style-src 'self' 'unsafe-inline'",
            "img-src 'self' data: https:",
            "font-src 'self' data:",
            "connect-src 'self'",
            "base-uri 'self'",
            "form-action 'self'",
        ]
    ),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Provider: {settings.llm_provider} ({settings.active_model})")
    logger.info(f"Mock mode: {'ON' if settings.is_mock_mode else 'OFF'}")

    yield

    logger.info("Shutting down InsightChef.")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Recipe suggestions from the ingredients you already have",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url=None,
)

app.state.limiter = limiter

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    max_age=settings.cors_max_age,
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


# --- Error translation: every error body is {"error": <fixed message>} ---


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(InsightChefError)
async def insightchef_error_handler(request: Request, exc: InsightChefError):
    if exc.status_code >= 500:
        logger.warning("[%s] %s: %s", exc.status_code, type(exc).__name__, exc.detail)
    return _error(exc.status_code, exc.public_message)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.info("Rate limit hit for %s", request.client.host if request.client else "?")
    return _error(429, RATE_LIMIT_MESSAGE)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request body on %s", request.url.path)
    return _error(400, INVALID_REQUEST_MESSAGE)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _error(404, NOT_FOUND_MESSAGE)
    if exc.status_code >= 500:
        return _error(exc.status_code, GENERIC_ERROR_MESSAGE)
    return _error(exc.status_code, INVALID_REQUEST_MESSAGE)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return _error(500, GENERIC_ERROR_MESSAGE)


# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


# --- Static File Serving ---
FRONTEND_PATH = Path(__file__).parent.parent / "frontend"


@app.get("/css/{filename}")
async def get_css(filename: str):
    file_path = FRONTEND_PATH / "css" / filename
    if file_path.exists() and file_path.is_file():
        return FileResponse(file_path, media_type="text/css")
    return Response(status_code=404)


@app.get("/js/{filename}")
async def get_js(filename: str):
    file_path = FRONTEND_PATH / "js" / filename
    if file_path.exists() and file_path.is_file():
        return FileResponse(file_path, media_type="application/javascript")
    return Response(status_code=404)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    """Serve the frontend UI."""
    frontend_index = FRONTEND_PATH / "index.html"

    if frontend_index.exists():
        return FileResponse(frontend_index)

    return {
        "name": settings.app_name,
        "status": "running",
        "message": "Frontend index.html not found.",
    }


# Must stay last: unknown API paths are 404, everything else gets the UI
@app.api_route("/{full_path:path}", methods=["GET", "POST"])
async def spa_fallback(request: Request, full_path: str):
    api_root = settings.api_prefix.strip("/")
    is_api = full_path == api_root or full_path.startswith(f"{api_root}/")
    if is_api or request.method != "GET":
        return _error(404, NOT_FOUND_MESSAGE)
    return await root()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
