"""Summary models - completion tracking and dashboard trip summaries."""

from pydantic import Field

from tripstate.models.common import CamelModel, TripStatus


class CompletionSummary(CamelModel):
    """Progress over the readiness checklist."""

    progress_percent: int = Field(..., ge=0, le=100)
    completed_titles: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    status: TripStatus


class TripSummary(CamelModel):
    """Dashboard card for one trip."""

    trip_id: str | None = None
    city: str | None = None
    country: str | None = None
    date_range: str
    traveler_count: int
    days_until: int
    progress: int
    status: TripStatus
    completed: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    pending_tasks: int
    highlights: list[str] = Field(default_factory=list)
    smart_insight: str
