"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import companies, health, labour, orders, wages, work_assignments
from app.config import settings
from app.db import dispose_engine
from app.logging import setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(
        "Starting New Star Tailors API",
        debug=settings.debug,
        timezone=settings.timezone,
        order_id_prefix=settings.order_id_prefix,
    )

    yield

    logger.info("Shutting down New Star Tailors API")
    await dispose_engine()
    logger.info("Database connections disposed")


app = FastAPI(
    title="New Star Tailors API",
    description="Orders, companies, workforce and wages for New Star Tailors",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(orders.router, prefix="/api/v1", tags=["orders"])
app.include_router(companies.router, prefix="/api/v1")
app.include_router(labour.router, prefix="/api/v1")
app.include_router(wages.router, prefix="/api/v1")
app.include_router(work_assignments.router, prefix="/api/v1")
