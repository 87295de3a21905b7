"""Derivation endpoints - POST /derive/{view}.

Stateless: the client sends the trip document it owns and receives the derived
view. Nothing is stored server-side.
"""

import time
from datetime import date

from fastapi import APIRouter

from tripstate.engine import (
    aggregate_itinerary,
    evaluate_readiness,
    generate_packing_lists,
    summarize_trip,
    track_completion,
)
from tripstate.models.itinerary import Itinerary
from tripstate.models.packing import PackingCategory
from tripstate.models.readiness import ReadinessItem
from tripstate.models.summary import CompletionSummary, TripSummary
from tripstate.models.trip import Trip
from tripstate.utils.logging import StructuredDerivationLogger
from tripstate.utils.metrics import PrometheusDerivationMetrics

router = APIRouter(prefix="/derive", tags=["derive"])

_log = StructuredDerivationLogger()
_metrics = PrometheusDerivationMetrics()


def _record(view: str, trip: Trip, item_count: int, started: float) -> None:
    latency_ms = (time.perf_counter() - started) * 1000
    _metrics.record_derivation(view, latency_ms)
    _log.log_derivation(view, trip.id, item_count, latency_ms)


@router.post("/readiness", response_model=list[ReadinessItem])
async def derive_readiness(trip: Trip) -> list[ReadinessItem]:
    """Visible readiness checklist with overrides applied."""
    started = time.perf_counter()
    items = evaluate_readiness(trip)
    _record("readiness", trip, len(items), started)
    return items


@router.post("/itinerary", response_model=Itinerary)
async def derive_itinerary(trip: Trip) -> Itinerary:
    """Day-by-day itinerary buckets for every trip date."""
    started = time.perf_counter()
    itinerary = aggregate_itinerary(trip)
    _record("itinerary", trip, itinerary.total_entries, started)
    return itinerary


@router.post("/packing", response_model=list[PackingCategory])
async def derive_packing(trip: Trip) -> list[PackingCategory]:
    """Packing categories with hidden, custom and checked layers applied."""
    started = time.perf_counter()
    categories = generate_packing_lists(trip)
    _record("packing", trip, sum(len(c.items) for c in categories), started)
    return categories


@router.post("/completion", response_model=CompletionSummary)
async def derive_completion(trip: Trip) -> CompletionSummary:
    """Progress, status bucket and next steps of the readiness checklist."""
    started = time.perf_counter()
    completion = track_completion(evaluate_readiness(trip))
    _record("completion", trip, len(completion.next_steps), started)
    return completion


@router.post("/summary", response_model=TripSummary)
async def derive_summary(trip: Trip, today: date | None = None) -> TripSummary:
    """Dashboard card; ``today`` pins the days-until calculation."""
    started = time.perf_counter()
    summary = summarize_trip(trip, today=today)
    _record("summary", trip, summary.pending_tasks, started)
    return summary
