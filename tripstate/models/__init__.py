"""Models package - re-exports for convenience."""

from tripstate.models.common import (
    SECURED_STATUSES,
    BookingStatus,
    CamelModel,
    Climate,
    ReadinessCategory,
    ReadinessStatus,
    Season,
    TripStatus,
)
from tripstate.models.edits import (
    AddCustomReadinessItem,
    AddPackingItem,
    DeletePackingItem,
    HideReadinessItem,
    PackingEdit,
    ReadinessEdit,
    RemoveCustomReadinessItem,
    SetReadinessStatus,
    TogglePackingItem,
    UnhideReadinessItem,
)
from tripstate.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    FlightEntry,
    Itinerary,
    ItineraryEntry,
    TransportationEntry,
)
from tripstate.models.packing import PackingCategory, PackingContext, PackingItem
from tripstate.models.readiness import ReadinessItem
from tripstate.models.summary import CompletionSummary, TripSummary
from tripstate.models.trip import (
    Accommodation,
    Activity,
    Documents,
    EmergencyContact,
    FamilyMember,
    Flight,
    PackingCheck,
    PackingListState,
    Transportation,
    Trip,
)

__all__ = [
    # Common
    "CamelModel",
    "BookingStatus",
    "SECURED_STATUSES",
    "ReadinessStatus",
    "ReadinessCategory",
    "TripStatus",
    "Season",
    "Climate",
    # Trip
    "Trip",
    "FamilyMember",
    "Flight",
    "Transportation",
    "Accommodation",
    "Activity",
    "Documents",
    "EmergencyContact",
    "PackingCheck",
    "PackingListState",
    # Readiness
    "ReadinessItem",
    # Itinerary
    "Itinerary",
    "ItineraryEntry",
    "ActivityEntry",
    "FlightEntry",
    "TransportationEntry",
    "AccommodationEntry",
    # Packing
    "PackingContext",
    "PackingCategory",
    "PackingItem",
    # Summary
    "CompletionSummary",
    "TripSummary",
    # Edits
    "ReadinessEdit",
    "SetReadinessStatus",
    "HideReadinessItem",
    "UnhideReadinessItem",
    "AddCustomReadinessItem",
    "RemoveCustomReadinessItem",
    "PackingEdit",
    "TogglePackingItem",
    "AddPackingItem",
    "DeletePackingItem",
]
