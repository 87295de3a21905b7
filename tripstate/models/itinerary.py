"""Itinerary models - unified day-by-day view over all bookable entities."""

from typing import Annotated, Literal

from pydantic import Field

from tripstate.models.common import CamelModel


class ItineraryEntryBase(CamelModel):
    """Fields every itinerary entry carries."""

    source_id: str | None = None
    date: str
    time: str
    name: str
    location: str | None = None
    status: str | None = None
    assigned_members: list[str] = Field(default_factory=list)


class ActivityEntry(ItineraryEntryBase):
    """Activity scheduled on a day."""

    kind: Literal["activity"] = "activity"
    category: str | None = None
    duration: str | None = None
    cost: str | float | None = None
    booking_required: bool | None = None
    participants: list[str] = Field(default_factory=list)
    family_notes: str | None = None


class FlightEntry(ItineraryEntryBase):
    """Flight departure on a day."""

    kind: Literal["flight"] = "flight"
    airline: str | None = None
    flight_number: str | None = None
    departure: str | None = None
    arrival: str | None = None
    confirmation_number: str | None = None


class TransportationEntry(ItineraryEntryBase):
    """Ground transportation leg on a day."""

    kind: Literal["transportation"] = "transportation"
    mode: str | None = None
    departure: str | None = None
    arrival: str | None = None
    confirmation_number: str | None = None


class AccommodationEntry(ItineraryEntryBase):
    """Check-in or check-out event of an accommodation."""

    kind: Literal["accommodation"] = "accommodation"
    event: Literal["check_in", "check_out"]
    accommodation_type: str | None = None
    address: str | None = None
    room_assignment: str | None = None


ItineraryEntry = Annotated[
    ActivityEntry | FlightEntry | TransportationEntry | AccommodationEntry,
    Field(discriminator="kind"),
]


class Itinerary(CamelModel):
    """Itinerary buckets keyed by ISO date.

    ``dates`` lists every calendar day of the trip (inclusive). ``days`` holds a
    bucket for each of those days, empty or not, plus a bucket for any other
    date an entry falls on.
    """

    dates: list[str] = Field(default_factory=list)
    days: dict[str, list[ItineraryEntry]] = Field(default_factory=dict)

    def entries_on(self, day: str) -> list[ItineraryEntry]:
        """Entries on a date (empty list when the date has no bucket)."""
        return self.days.get(day, [])

    @property
    def total_entries(self) -> int:
        """Number of entries across all buckets."""
        return sum(len(entries) for entries in self.days.values())
