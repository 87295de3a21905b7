"""Readiness item model - derived checklist entries and user-added reminders."""

from pydantic import Field

from tripstate.models.common import CamelModel, ReadinessCategory, ReadinessStatus


class ReadinessItem(CamelModel):
    """One planning milestone on the trip readiness checklist.

    Built-in items are regenerated on every pass and identified by a stable
    semantic id (``airfare``, ``hotel`` ...). Custom items are persisted on the
    trip with ``is_custom=True`` and an id of the form ``custom-<millis>``.
    """

    id: str
    title: str
    subtitle: str = ""
    status: ReadinessStatus = ReadinessStatus.incomplete
    category: str = ReadinessCategory.planning.value
    urgent: bool = False
    is_custom: bool = False
    priority: str | None = Field(default=None, description="high | medium | low")

    @property
    def is_complete(self) -> bool:
        """Whether the item counts towards completion."""
        return self.status == ReadinessStatus.complete
