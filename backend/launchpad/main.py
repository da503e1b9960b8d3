"""
LaunchPad API - Main Application Entry Point

This module initializes the FastAPI application with:
- Logging configuration
- Database schema initialization
- CORS middleware for the browser frontend
- Prometheus metrics middleware and /metrics endpoint
- API router registration

Architecture:
    FastAPI App
    ├── Lifespan Management (startup)
    ├── CORS Middleware (Settings.cors_origins)
    ├── Prometheus Middleware (/metrics)
    └── API Router
        ├── /profile - Onboarding profile, settings edits, resume skills
        ├── /roadmap - Roadmap storage, milestone status, progress
        ├── /roles - Role catalog lookup and search
        ├── /matches - Deterministic and AI-augmented role matching
        ├── /opportunities - Internship listings with fit scores
        └── /skills - Skill normalization
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from launchpad.config import get_settings
from launchpad.database import init_db
from launchpad.api import api_router
from launchpad.middleware.metrics import setup_metrics

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Startup:
        1. Configure logging
        2. Initialize database tables

    Yields:
        Control to the application during its runtime
    """
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await init_db()
    yield


app = FastAPI(
    title="LaunchPad API",
    description="Career guidance API: role matching and opportunity fit scoring",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_metrics(app)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
