"""Unified day-by-day itinerary aggregation.

Activities, flights, ground transportation and accommodation check-in/out
events are merged into per-date buckets, each ordered by its ``HH:MM`` time.
"""

from collections.abc import Iterator

from tripstate.config import Settings, get_settings
from tripstate.derivation.dates import trip_dates
from tripstate.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    FlightEntry,
    Itinerary,
    ItineraryEntry,
    TransportationEntry,
)
from tripstate.models.trip import Accommodation, Activity, Flight, Transportation, Trip

DEFAULT_TIME = "00:00"


def _entry_time(entry: ItineraryEntry) -> str:
    # Lexicographic compare; only correct for zero-padded 24h times
    return entry.time or DEFAULT_TIME


def _activity_entries(activities: list[Activity]) -> Iterator[ActivityEntry]:
    for activity in activities:
        if not activity.date:
            continue
        yield ActivityEntry(
            source_id=activity.id,
            date=activity.date,
            time=activity.time or DEFAULT_TIME,
            name=activity.name or "Activity",
            location=activity.location,
            status=activity.status,
            assigned_members=list(activity.assigned_members),
            category=activity.category or activity.type,
            duration=activity.duration,
            cost=activity.cost,
            booking_required=activity.booking_required,
            participants=list(activity.participants),
            family_notes=activity.family_notes,
        )


def _flight_date(flight: Flight) -> str | None:
    if flight.date:
        return flight.date
    if flight.departure_time:
        return flight.departure_time.split("T")[0]
    return None


def _flight_time(flight: Flight) -> str:
    if flight.departure_time and "T" in flight.departure_time:
        time_part = flight.departure_time.split("T")[1][:5]
        if time_part:
            return time_part
    return flight.time or DEFAULT_TIME


def _flight_entries(flights: list[Flight]) -> Iterator[FlightEntry]:
    for flight in flights:
        day = _flight_date(flight)
        if not day:
            continue
        departure = flight.departure or flight.from_
        arrival = flight.arrival or flight.to
        yield FlightEntry(
            source_id=flight.id,
            date=day,
            time=_flight_time(flight),
            name=f"{departure or ''} → {arrival or ''}",
            location=f"Flight {flight.flight_number or ''}",
            status=flight.status,
            assigned_members=list(flight.assigned_members),
            airline=flight.airline,
            flight_number=flight.flight_number,
            departure=departure,
            arrival=arrival,
            confirmation_number=flight.confirmation_number,
        )


def _transportation_entries(legs: list[Transportation]) -> Iterator[TransportationEntry]:
    for leg in legs:
        if not leg.date:
            continue
        yield TransportationEntry(
            source_id=leg.id,
            date=leg.date,
            time=leg.time or DEFAULT_TIME,
            name=leg.details or leg.type or "Transportation",
            status=leg.status,
            assigned_members=list(leg.assigned_members),
            mode=leg.type,
            departure=leg.departure,
            arrival=leg.arrival,
            confirmation_number=leg.confirmation_number,
        )


def _accommodation_entries(
    stays: list[Accommodation], settings: Settings
) -> Iterator[AccommodationEntry]:
    for stay in stays:
        label = stay.name or "Accommodation"
        common = {
            "source_id": stay.id,
            "location": stay.address,
            "status": stay.status,
            "assigned_members": list(stay.assigned_members),
            "accommodation_type": stay.type,
            "address": stay.address,
            "room_assignment": stay.room_assignment,
        }
        if stay.check_in:
            yield AccommodationEntry(
                date=stay.check_in,
                time=settings.check_in_time,
                name=f"Check-in: {label}",
                event="check_in",
                **common,
            )
        if stay.check_out and stay.check_out != stay.check_in:
            yield AccommodationEntry(
                date=stay.check_out,
                time=settings.check_out_time,
                name=f"Check-out: {label}",
                event="check_out",
                **common,
            )


def aggregate_itinerary(trip: Trip, settings: Settings | None = None) -> Itinerary:
    """Merge all dated trip entities into per-date, time-ordered buckets.

    Every day from start to end date gets a bucket even when nothing is
    scheduled. Entries without a date are skipped; entries dated outside the
    trip range still get a bucket of their own. Within a bucket, entries keep
    their insertion order (activities, flights, transportation, stays) when
    times are equal.

    Args:
        trip: Trip record
        settings: Default check-in/out times (defaults to application settings)

    Returns:
        Itinerary with the trip's dates and its date buckets
    """
    settings = settings or get_settings()
    dates = trip_dates(trip.start_date, trip.end_date)
    days: dict[str, list[ItineraryEntry]] = {day: [] for day in dates}

    entries: list[ItineraryEntry] = [
        *_activity_entries(trip.activities),
        *_flight_entries(trip.flights),
        *_transportation_entries(trip.transportation),
        *_accommodation_entries(trip.lodging, settings),
    ]
    for entry in entries:
        days.setdefault(entry.date, []).append(entry)

    for day, bucket in days.items():
        days[day] = sorted(bucket, key=_entry_time)

    return Itinerary(dates=dates, days=days)


def initial_collapse_state(itinerary: Itinerary) -> dict[str, bool]:
    """Default collapsed flag per trip date: collapsed iff the day is empty."""
    return {day: not itinerary.entries_on(day) for day in itinerary.dates}
