"""
FastAPI application entry point for the Lufft SMS gateway.

Serves the PromoTexter webhook and the health endpoint. Optional environment
variables are read at startup into ``app.state.config`` for route handlers.

CHANGELOG:
- 2026-10-19: Register ptexter router (STORY-114)
- 2026-10-19: Register health router (STORY-115)
- 2026-10-19: Initial creation (STORY-112)
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway.src.api.health import router as health_router
from gateway.src.api.telegram import router as telegram_router

logger = logging.getLogger(__name__)


def _load_env_config() -> dict[str, str]:
    """Load and validate gateway environment variables at startup.

    Returns:
        dict: Mapping of config key to value.

    Raises:
        RuntimeError: If MAX_MESSAGE_LENGTH is not a positive integer.
    """
    config: dict[str, str] = {
        "MAX_MESSAGE_LENGTH": os.environ.get("MAX_MESSAGE_LENGTH", "480"),
    }

    try:
        max_length = int(config["MAX_MESSAGE_LENGTH"])
    except ValueError:
        max_length = 0
    if max_length < 1:
        raise RuntimeError(
            "MAX_MESSAGE_LENGTH must be a positive integer "
            f"(got: '{config['MAX_MESSAGE_LENGTH']}')"
        )

    return config


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup validation and shutdown logging."""
    app.state.config = _load_env_config()
    logger.info(
        "Lufft gateway ready (max_message_length=%s)",
        app.state.config["MAX_MESSAGE_LENGTH"],
    )
    yield
    logger.info("Lufft gateway shutting down")


def _cors_origins() -> list[str]:
    """Allowed CORS origins from CORS_ALLOW_ORIGINS (comma-separated)."""
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    return [o.strip() for o in raw.split(",") if o.strip()]


app = FastAPI(
    title="Lufft SMS Gateway",
    description="Decodes Lufft weather-station telegrams relayed over SMS.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["GET", "POST"],
)

app.include_router(health_router)
app.include_router(telegram_router)


@app.get("/")
async def root() -> dict:
    """Root health check endpoint.

    Returns:
        dict: JSON object with application status.
    """
    return {"status": "ok"}
