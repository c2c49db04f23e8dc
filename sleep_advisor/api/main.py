"""
FastAPI Application — Sleep Hygiene Analysis API

Thin HTTP surface over the inference engine.

CORS: Configured via environment variables.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sleep_advisor import __version__
from sleep_advisor.config import settings
from sleep_advisor.rules import RULES
from .routes import router


# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"🚀 Starting {settings.PROJECT_NAME}")
    logger.info(f"📍 Running in {settings.ENVIRONMENT} mode")
    logger.info(f"📚 Rule catalog loaded: {len(RULES)} rules")
    yield
    # Shutdown
    logger.info(f"👋 Shutting down {settings.PROJECT_NAME}")


# Application metadata
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Rule-based sleep hygiene analysis with explainable recommendations",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# CORS Configuration: loaded from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Include API routes
app.include_router(router, tags=["Analysis"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint — points at docs."""
    return {
        "message": "Sleep Hygiene Advisor API",
        "docs": "/docs",
        "rules": "/rules"
    }


@app.get("/ping", tags=["Health"])
async def ping():
    """Lightweight heartbeat."""
    return {"status": "ok"}
