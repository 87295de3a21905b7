"""Trip record models - the persisted trip document and its sub-entities."""

from typing import Any

from pydantic import Field

from tripstate.models.common import SECURED_STATUSES, CamelModel, ReadinessStatus
from tripstate.models.readiness import ReadinessItem


class FamilyMember(CamelModel):
    """Traveler on a trip (adult or child)."""

    id: str | None = None
    name: str = ""
    type: str | None = Field(default=None, description="adult | child")
    age: str | int | None = None
    relationship: str | None = None
    interests: str | None = None
    special_needs: str | None = None
    health_info: str | None = None
    dietary_info: str | None = None


class BookableItem(CamelModel):
    """Fields shared by every bookable trip entity."""

    id: str | None = None
    status: str | None = Field(default=None, description="booked | confirmed | planned | researching")
    assigned_members: list[str] = Field(default_factory=list)
    confirmation_number: str | None = None

    @property
    def is_secured(self) -> bool:
        """Whether the booking is booked or confirmed."""
        return self.status in SECURED_STATUSES


class Flight(BookableItem):
    """Flight booking. ``from``/``to`` are accepted as legacy airport keys."""

    airline: str | None = None
    flight_number: str | None = None
    departure: str | None = None
    arrival: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    departure_time: str | None = Field(default=None, description="ISO datetime, e.g. 2025-06-01T09:30")
    arrival_time: str | None = None
    date: str | None = None
    time: str | None = None


class Transportation(BookableItem):
    """Ground transportation booking."""

    type: str | None = Field(default=None, description="driving | train | bus | rental | taxi | subway ...")
    details: str | None = None
    departure: str | None = None
    arrival: str | None = None
    date: str | None = None
    time: str | None = None


class Accommodation(BookableItem):
    """Lodging booking."""

    type: str | None = Field(default=None, description="hotel | rental | family | hostel | camping")
    name: str | None = None
    address: str | None = None
    check_in: str | None = None
    check_out: str | None = None
    details: str | None = None
    room_assignment: str | None = None


class Activity(BookableItem):
    """Planned activity."""

    name: str | None = None
    type: str | None = None
    category: str | None = None
    date: str | None = None
    time: str | None = None
    duration: str | None = None
    location: str | None = None
    cost: str | float | None = None
    cost_type: str | None = None
    booking_required: bool | None = None
    participants: list[str] = Field(default_factory=list)
    family_notes: str | None = None
    priority: str | None = None


class Documents(CamelModel):
    """Travel document flags."""

    passport: bool | str | None = None
    insurance: bool | str | None = None


class EmergencyContact(CamelModel):
    """Emergency contact shared for the trip."""

    name: str | None = None
    phone: str | None = None
    relationship: str | None = None


class PackingCheck(CamelModel):
    """Checked state of one visible packing item."""

    checked: bool = False


class PackingListState(CamelModel):
    """Checked states of one packing category, keyed by visible item index."""

    items: dict[int, PackingCheck] = Field(default_factory=dict)


class Trip(CamelModel):
    """A family's travel plan and all of its user-owned override layers."""

    id: str | None = None
    city: str | None = None
    country: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    adults: list[FamilyMember] = Field(default_factory=list)
    kids: list[FamilyMember] = Field(default_factory=list)
    travel_style: str | None = None
    budget_level: str | None = None
    concerns: list[str] = Field(default_factory=list)
    flights: list[Flight] = Field(default_factory=list)
    transportation: list[Transportation] = Field(default_factory=list)
    accommodations: list[Accommodation] = Field(default_factory=list)
    hotels: list[Accommodation] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)
    documents: Documents = Field(default_factory=Documents)
    emergency_contacts: list[EmergencyContact] = Field(default_factory=list)
    currency_ready: bool | None = None

    # Override layers
    packing_lists: dict[int, PackingListState] = Field(default_factory=dict)
    custom_packing_items: dict[int, list[str]] = Field(default_factory=dict)
    hidden_packing_items: dict[int, list[str]] = Field(default_factory=dict)
    custom_readiness_items: list[ReadinessItem] = Field(default_factory=list)
    hidden_readiness_items: list[str] = Field(default_factory=list)
    readiness_item_status: dict[str, ReadinessStatus] = Field(default_factory=dict)

    @property
    def lodging(self) -> list[Accommodation]:
        """Accommodations, falling back to the legacy ``hotels`` list."""
        return self.accommodations or self.hotels

    @property
    def travelers(self) -> list[FamilyMember]:
        """Adults followed by kids."""
        return [*self.adults, *self.kids]

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase document layout the caller persists."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
