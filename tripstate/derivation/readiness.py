"""Trip readiness checklist derivation.

Built-in checks are regenerated from trip facts on every pass, then the user's
override layers are applied in a fixed order:

    generate -> append custom items -> override status by id -> drop hidden ids
"""

from collections.abc import Sequence

from tripstate.config import Settings, get_settings
from tripstate.derivation.dates import format_date_range, percent
from tripstate.models.common import ReadinessCategory, ReadinessStatus
from tripstate.models.readiness import ReadinessItem
from tripstate.models.trip import FamilyMember, Trip

# Transportation types that can replace flights as the way to get there
PRIMARY_TRANSPORT_TYPES = frozenset({"driving", "train", "bus"})


def _status(complete: bool) -> ReadinessStatus:
    return ReadinessStatus.complete if complete else ReadinessStatus.incomplete


def packing_progress(trip: Trip) -> int:
    """Percent of checked entries in the ``packingLists`` override map.

    Only items the user has ever toggled have an entry, so this measures the
    toggled set rather than the generated list.
    """
    total = 0
    checked = 0
    for state in trip.packing_lists.values():
        for entry in state.items.values():
            total += 1
            if entry.checked:
                checked += 1
    return percent(checked, total)


def _destination_item(trip: Trip) -> ReadinessItem:
    complete = bool(trip.city and trip.country and trip.start_date and trip.end_date)
    subtitle = (
        f"{trip.city}, {format_date_range(trip.start_date, trip.end_date)}"
        if complete
        else "Complete trip wizard"
    )
    return ReadinessItem(
        id="destination",
        title="Destination & Dates Confirmed",
        subtitle=subtitle,
        status=_status(complete),
        category=ReadinessCategory.planning.value,
    )


def _airfare_item(trip: Trip) -> ReadinessItem:
    booked_flights = [f for f in trip.flights if f.is_secured]
    has_primary_transport = any(
        t.type in PRIMARY_TRANSPORT_TYPES and t.is_secured for t in trip.transportation
    )
    complete = bool(booked_flights) or has_primary_transport

    if booked_flights:
        title = "Flights Booked"
        subtitle = f"{len(booked_flights)} flights booked"
    else:
        title = "Transportation Arranged"
        subtitle = (
            "Primary transportation confirmed"
            if has_primary_transport
            else "Need flights or transportation method"
        )

    return ReadinessItem(
        id="airfare",
        title=title,
        subtitle=subtitle,
        status=_status(complete),
        category=ReadinessCategory.travel.value,
        urgent=not complete,
    )


def _hotel_item(trip: Trip) -> ReadinessItem:
    booked = [a for a in trip.lodging if a.is_secured]
    return ReadinessItem(
        id="hotel",
        title="Hotel Accommodations Secured",
        subtitle=f"{len(booked)} accommodations booked" if booked else "No accommodations booked",
        status=_status(bool(booked)),
        category=ReadinessCategory.travel.value,
    )


def _transport_item(trip: Trip) -> ReadinessItem:
    booked = [t for t in trip.transportation if t.is_secured]
    return ReadinessItem(
        id="transport",
        title="Transportation Arranged",
        subtitle=f"{len(booked)} bookings confirmed" if booked else "Local transport needed",
        status=_status(bool(booked)),
        category=ReadinessCategory.travel.value,
    )


def _packing_item(trip: Trip, settings: Settings) -> ReadinessItem:
    progress = packing_progress(trip)
    return ReadinessItem(
        id="packing",
        title="Packing Lists Created",
        subtitle=f"{progress}% of items packed" if progress > 0 else "Packing not started",
        status=_status(progress >= settings.packing_complete_threshold_pct),
        category=ReadinessCategory.packing.value,
    )


def _insurance_item(trip: Trip) -> ReadinessItem:
    complete = bool(trip.documents.insurance)
    return ReadinessItem(
        id="insurance",
        title="Travel Insurance Purchased",
        subtitle="Coverage confirmed" if complete else f"Coverage needed for {len(trip.travelers)} travelers",
        status=_status(complete),
        category=ReadinessCategory.travel.value,
        urgent=not complete,
    )


def _documents_item(trip: Trip) -> ReadinessItem:
    complete = bool(trip.documents.passport) and bool(trip.documents.insurance)
    return ReadinessItem(
        id="documents",
        title="Passports/Documents Ready",
        subtitle="All documents confirmed" if complete else "Check document requirements",
        status=_status(complete),
        category=ReadinessCategory.planning.value,
    )


def _activities_item(trip: Trip) -> ReadinessItem:
    count = len(trip.activities)
    return ReadinessItem(
        id="activities",
        title="Activities & Reservations",
        subtitle=f"{count} planned",
        status=_status(count > 0),
        category=ReadinessCategory.itinerary.value,
    )


def _emergency_item(trip: Trip) -> ReadinessItem:
    complete = len(trip.emergency_contacts) > 0
    return ReadinessItem(
        id="emergency",
        title="Emergency Contacts Shared",
        subtitle="Local contacts added" if complete else "Local contacts needed",
        status=_status(complete),
        category=ReadinessCategory.planning.value,
    )


def _currency_item(trip: Trip) -> ReadinessItem:
    complete = bool(trip.currency_ready)
    return ReadinessItem(
        id="currency",
        title="Currency & Payment Methods",
        subtitle="Bank notified, cards activated" if complete else "Notify bank and activate cards",
        status=_status(complete),
        category=ReadinessCategory.planning.value,
    )


def _health_info_item(profiles: Sequence[FamilyMember]) -> ReadinessItem:
    complete = len(profiles) > 0 and all(
        profile.health_info and profile.health_info.strip() for profile in profiles
    )
    return ReadinessItem(
        id="health-info",
        title="Health Information Complete",
        subtitle=(
            "All family members have health info"
            if complete
            else "Add health info for all family members"
        ),
        status=_status(complete),
        category=ReadinessCategory.planning.value,
    )


def generate_readiness_items(
    trip: Trip,
    family_profiles: Sequence[FamilyMember] | None = None,
    settings: Settings | None = None,
) -> list[ReadinessItem]:
    """Built-in readiness items in their fixed order, before any override."""
    settings = settings or get_settings()
    profiles = trip.travelers if family_profiles is None else family_profiles

    return [
        _destination_item(trip),
        _airfare_item(trip),
        _hotel_item(trip),
        _transport_item(trip),
        _packing_item(trip, settings),
        _insurance_item(trip),
        _documents_item(trip),
        _activities_item(trip),
        _emergency_item(trip),
        _currency_item(trip),
        _health_info_item(profiles),
    ]


def evaluate_readiness(
    trip: Trip,
    family_profiles: Sequence[FamilyMember] | None = None,
    settings: Settings | None = None,
) -> list[ReadinessItem]:
    """Derive the visible readiness checklist of a trip.

    This is a pure function; the trip is never mutated.

    Args:
        trip: Trip record including its readiness override layers
        family_profiles: Separately stored family profiles used by the
            health-info check; defaults to the trip's adults and kids
        settings: Thresholds (defaults to application settings)

    Returns:
        Built-in items followed by custom items, with manual status overrides
        applied and hidden items removed
    """
    items = generate_readiness_items(trip, family_profiles, settings)
    items.extend(item.model_copy() for item in trip.custom_readiness_items)

    overrides = trip.readiness_item_status
    items = [
        item.model_copy(update={"status": overrides[item.id]}) if item.id in overrides else item
        for item in items
    ]

    hidden = set(trip.hidden_readiness_items)
    return [item for item in items if item.id not in hidden]
