"""Operational endpoints - GET /health and GET /metrics."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from tripstate.config import get_settings

router = APIRouter()


@router.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Liveness check.

    The engine holds no state and has no external dependencies, so it is
    healthy whenever it can answer.
    """
    return {"status": "ok", "home_country": get_settings().home_country}


@router.get("/metrics", tags=["metrics"])
async def metrics() -> Response:
    """Prometheus scrape of derivation counts, latencies and override edits."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
