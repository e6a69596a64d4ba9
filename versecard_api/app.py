"""
FastAPI application serving verse cards.

Main responsibilities:
- Draw verses in a shuffled, non-repeating rotation
- Format verse text into meaning-aware card lines
- Expose formatting cache statistics and health probes

Run locally (example):

    uvicorn versecard_api.app:app --reload --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from versecard.logging_config import get_logger, setup_logging
from versecard.settings import get_settings

from .middleware import setup_security
from .routes import cards_router, health_router

settings = get_settings()

# ---------------------------------------------------------------------------
# Logging & app setup
# ---------------------------------------------------------------------------

setup_logging(level=settings.log_level, log_file=settings.log_file)
logger = get_logger("api")

app = FastAPI(title=f"{settings.app_name} API", version=settings.app_version, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_security(app)

app.include_router(health_router, prefix="/api")
app.include_router(cards_router, prefix="/api")

logger.info(f"🚀 {settings.app_name} API v{settings.app_version} ({settings.environment.value})")
