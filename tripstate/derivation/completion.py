"""Completion tracking over the readiness checklist."""

from collections.abc import Sequence

from tripstate.config import Settings, get_settings
from tripstate.derivation.dates import percent
from tripstate.models.common import TripStatus
from tripstate.models.readiness import ReadinessItem
from tripstate.models.summary import CompletionSummary

TITLE_SUFFIXES = (" Confirmed", " Booked", " Secured")

NEXT_STEP_ACTIONS = {
    "hotel": "Book accommodations",
    "transport": "Arrange local transportation",
    "insurance": "Get travel insurance",
    "packing": "Complete packing checklist",
    "documents": "Prepare travel documents",
    "health-info": "Add health info for all family members",
}


def strip_title_suffix(title: str) -> str:
    """Drop trailing "Confirmed"/"Booked"/"Secured" from a readiness title."""
    for suffix in TITLE_SUFFIXES:
        title = title.removesuffix(suffix)
    return title


def next_step_for(item: ReadinessItem) -> str:
    """Action phrase for an incomplete item, falling back to its title."""
    if item.id == "airfare":
        return "Book flights" if "Flights" in item.title else "Plan transportation"
    return NEXT_STEP_ACTIONS.get(item.id, item.title)


def status_for_progress(progress: int, settings: Settings | None = None) -> TripStatus:
    """Dashboard bucket: Early Planning below 30%, Planning below 70%, else Ready."""
    settings = settings or get_settings()
    if progress < settings.early_planning_below_pct:
        return TripStatus.early_planning
    if progress < settings.planning_below_pct:
        return TripStatus.planning
    return TripStatus.ready


def track_completion(
    items: Sequence[ReadinessItem], settings: Settings | None = None
) -> CompletionSummary:
    """Summarize readiness items into progress, completed titles and next steps.

    Args:
        items: Output of ``evaluate_readiness``
        settings: Status thresholds and next-step limit

    Returns:
        CompletionSummary
    """
    settings = settings or get_settings()
    complete = [item for item in items if item.is_complete]
    incomplete = [item for item in items if not item.is_complete]

    progress = percent(len(complete), len(items))
    return CompletionSummary(
        progress_percent=progress,
        completed_titles=[strip_title_suffix(item.title) for item in complete],
        next_steps=[next_step_for(item) for item in incomplete[: settings.next_steps_limit]],
        status=status_for_progress(progress, settings),
    )
