"""
Prometheus Metrics Middleware

Provides metrics for monitoring:
- HTTP request latency and count by endpoint and status
- Active request gauge
- AI role-match outcomes (AI result vs. algorithmic fallback) and batch latency

Usage:
    from launchpad.middleware.metrics import setup_metrics

    # In main.py
    app = FastAPI()
    setup_metrics(app)

Metrics Endpoint:
    GET /metrics - Prometheus-format metrics
"""

import time
import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    CONTENT_TYPE_LATEST,
    generate_latest,
    REGISTRY,
)
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# ==================== Prometheus Metrics ====================

REQUEST_LATENCY = Histogram(
    "launchpad_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

REQUEST_COUNT = Counter(
    "launchpad_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

ACTIVE_REQUESTS = Gauge(
    "launchpad_http_requests_active",
    "Number of active HTTP requests",
    ["method"]
)

# One increment per role per AI batch
AI_MATCH_ATTEMPTS = Counter(
    "launchpad_ai_match_attempts_total",
    "AI role-match attempts by outcome",
    ["outcome"]  # ai, timeout, invalid_payload, error, no_credentials
)

# Whole batch, slowest request included
AI_MATCH_LATENCY = Histogram(
    "launchpad_ai_match_batch_seconds",
    "Time to run one AI role-matching batch",
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0]
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for Prometheus metrics collection.

    Records:
    - Request latency
    - Request count by status code
    - Active request count
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """Process request and record metrics."""
        method = request.method

        if request.url.path == "/metrics":
            return await call_next(request)

        ACTIVE_REQUESTS.labels(method=method).inc()
        start_time = time.perf_counter()
        status = "500"

        try:
            response = await call_next(request)
            status = str(response.status_code)
        except Exception as e:
            logger.error(f"Request error on {method} {request.url.path}: {e}")
            raise
        finally:
            duration = time.perf_counter() - start_time
            # Routing has filled scope["path_params"] by now
            endpoint = route_template(request.url.path, request.scope.get("path_params"))

            REQUEST_LATENCY.labels(method=method, endpoint=endpoint, status=status).observe(duration)
            REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
            ACTIVE_REQUESTS.labels(method=method).dec()

        return response


def route_template(path: str, path_params: Optional[dict]) -> str:
    """
    Route pattern for a request path, e.g. /roles/data-analyst -> /roles/{role_id}.

    Path segments equal to a matched path parameter are replaced by the
    parameter name, keeping label cardinality bounded without depending on
    how the framework nests included routers.
    """
    if not path_params:
        return path

    names = {str(value): name for name, value in path_params.items()}
    segments = [
        f"{{{names[segment]}}}" if segment in names else segment
        for segment in path.split("/")
    ]
    return "/".join(segments)


def metrics_endpoint(request: Request) -> Response:
    """Prometheus scrape handler."""
    return PlainTextResponse(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )


def setup_metrics(app: FastAPI) -> None:
    """
    Configure Prometheus metrics for FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(PrometheusMiddleware)
    app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    logger.info("Prometheus metrics configured")


# ==================== Helper Functions ====================

def record_ai_match_attempt(outcome: str) -> None:
    """Record the outcome of one per-role AI match attempt."""
    AI_MATCH_ATTEMPTS.labels(outcome=outcome).inc()


def record_ai_match_latency(duration: float) -> None:
    """Record how long an AI matching batch took."""
    AI_MATCH_LATENCY.observe(duration)
