"""Override edit endpoints - POST /overrides/readiness, POST /overrides/packing.

Each request carries the trip and one edit; the response is the updated trip
document for the client to persist.
"""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from tripstate.engine import apply_packing_edit, apply_readiness_edit
from tripstate.models.edits import PackingEdit, ReadinessEdit
from tripstate.models.trip import Trip
from tripstate.overrides.store import OverrideStore
from tripstate.utils.logging import StructuredDerivationLogger
from tripstate.utils.metrics import PrometheusDerivationMetrics

router = APIRouter(prefix="/overrides", tags=["overrides"])

_log = StructuredDerivationLogger()
_metrics = PrometheusDerivationMetrics()


class ReadinessEditRequest(BaseModel):
    """Trip plus one readiness edit."""

    trip: Trip
    edit: ReadinessEdit


class PackingEditRequest(BaseModel):
    """Trip plus one packing edit."""

    trip: Trip
    edit: PackingEdit


def _record(layer: str, op: str, before: Trip, after: Trip) -> None:
    changed = OverrideStore.from_trip(before) != OverrideStore.from_trip(after)
    _metrics.inc_edit(layer, op)
    _log.log_edit(layer, op, before.id, changed)


@router.post("/readiness", response_model=None)
async def edit_readiness(request: ReadinessEditRequest) -> dict[str, Any]:
    """Apply a readiness edit and return the updated trip document."""
    updated = apply_readiness_edit(request.trip, request.edit)
    _record("readiness", request.edit.op, request.trip, updated)
    return updated.to_document()


@router.post("/packing", response_model=None)
async def edit_packing(request: PackingEditRequest) -> dict[str, Any]:
    """Apply a packing edit and return the updated trip document."""
    updated = apply_packing_edit(request.trip, request.edit)
    _record("packing", request.edit.op, request.trip, updated)
    return updated.to_document()
