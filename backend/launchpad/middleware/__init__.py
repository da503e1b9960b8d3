"""
Middleware Package

Contains FastAPI middleware for:
- Prometheus metrics collection
"""

from launchpad.middleware.metrics import (
    PrometheusMiddleware,
    setup_metrics,
    REQUEST_LATENCY,
    REQUEST_COUNT,
    ACTIVE_REQUESTS,
    AI_MATCH_ATTEMPTS,
    AI_MATCH_LATENCY,
)

__all__ = [
    "PrometheusMiddleware",
    "setup_metrics",
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "AI_MATCH_ATTEMPTS",
    "AI_MATCH_LATENCY",
]
