"""Unit tests for day-by-day itinerary aggregation."""

from collections.abc import Callable

from tripstate.config import Settings
from tripstate.derivation.itinerary import aggregate_itinerary, initial_collapse_state
from tripstate.models.itinerary import (
    AccommodationEntry,
    ActivityEntry,
    FlightEntry,
    Itinerary,
    TransportationEntry,
)
from tripstate.models.trip import Trip


def test_one_bucket_per_trip_day(make_trip: Callable[..., Trip]) -> None:
    """Test that every day from start to end gets a bucket, even when empty."""
    itinerary = aggregate_itinerary(make_trip())

    assert itinerary.dates == ["2025-06-01", "2025-06-02", "2025-06-03", "2025-06-04", "2025-06-05"]
    assert list(itinerary.days) == itinerary.dates
    assert all(entries == [] for entries in itinerary.days.values())
    assert itinerary.total_entries == 0


def test_dates_cross_month_boundary(make_trip: Callable[..., Trip]) -> None:
    """Test that the date range rolls over month ends."""
    itinerary = aggregate_itinerary(make_trip(start_date="2025-06-29", end_date="2025-07-02"))

    assert itinerary.dates == ["2025-06-29", "2025-06-30", "2025-07-01", "2025-07-02"]


def test_dates_up_to_calendar_end(make_trip: Callable[..., Trip]) -> None:
    """Test that a trip ending on 9999-12-31 still gets one bucket per day."""
    itinerary = aggregate_itinerary(make_trip(start_date="9999-12-30", end_date="9999-12-31"))

    assert itinerary.dates == ["9999-12-30", "9999-12-31"]
    assert list(itinerary.days) == itinerary.dates


def test_missing_or_reversed_dates_give_no_buckets(make_trip: Callable[..., Trip]) -> None:
    """Test that unusable dates yield an empty date list without raising."""
    assert aggregate_itinerary(make_trip(start_date=None)).dates == []
    assert aggregate_itinerary(make_trip(start_date="2025-06-05", end_date="2025-06-01")).dates == []
    assert aggregate_itinerary(make_trip(start_date="June 1st")).days == {}


def test_same_day_stay_emits_only_check_in(make_trip: Callable[..., Trip]) -> None:
    """Test that a stay with check-in equal to check-out yields one entry."""
    trip = make_trip(
        accommodations=[
            {"id": "h1", "name": "Hotel Sol", "checkIn": "2025-06-02", "checkOut": "2025-06-02"}
        ]
    )

    itinerary = aggregate_itinerary(trip)

    assert itinerary.total_entries == 1
    entry = itinerary.entries_on("2025-06-02")[0]
    assert isinstance(entry, AccommodationEntry)
    assert entry.event == "check_in"


def test_stay_check_in_and_check_out_times(make_trip: Callable[..., Trip]) -> None:
    """Test that check-in and check-out use the default times."""
    trip = make_trip(
        accommodations=[
            {
                "id": "h1",
                "name": "Hotel Sol",
                "address": "Calle Mayor 1",
                "checkIn": "2025-06-01",
                "checkOut": "2025-06-05",
                "status": "booked",
            }
        ]
    )

    itinerary = aggregate_itinerary(trip)

    check_in = itinerary.entries_on("2025-06-01")[0]
    check_out = itinerary.entries_on("2025-06-05")[0]
    assert (check_in.name, check_in.time, check_in.event) == ("Check-in: Hotel Sol", "15:00", "check_in")
    assert (check_out.name, check_out.time, check_out.event) == ("Check-out: Hotel Sol", "11:00", "check_out")
    assert check_in.location == "Calle Mayor 1"
    assert check_in.status == "booked"


def test_check_in_time_from_settings(make_trip: Callable[..., Trip]) -> None:
    """Test that the default check-in time is configurable."""
    trip = make_trip(accommodations=[{"name": "Casa", "checkIn": "2025-06-01"}])
    settings = Settings(_env_file=None, check_in_time="16:00")

    itinerary = aggregate_itinerary(trip, settings=settings)

    assert itinerary.entries_on("2025-06-01")[0].time == "16:00"


def test_legacy_hotels_are_aggregated(make_trip: Callable[..., Trip]) -> None:
    """Test that the legacy hotels list feeds accommodation events."""
    trip = make_trip(hotels=[{"name": "Old Inn", "checkIn": "2025-06-01", "checkOut": "2025-06-03"}])

    itinerary = aggregate_itinerary(trip)

    assert [e.name for e in itinerary.entries_on("2025-06-03")] == ["Check-out: Old Inn"]


def test_flight_date_and_time_from_departure_time(make_trip: Callable[..., Trip]) -> None:
    """Test that a flight without a date field uses its ISO departure time."""
    trip = make_trip(
        flights=[
            {
                "id": "f1",
                "airline": "Iberia",
                "flightNumber": "IB6252",
                "departure": "JFK",
                "arrival": "MAD",
                "departureTime": "2025-06-02T09:30:00",
                "status": "confirmed",
            }
        ]
    )

    entry = aggregate_itinerary(trip).entries_on("2025-06-02")[0]

    assert isinstance(entry, FlightEntry)
    assert entry.time == "09:30"
    assert entry.name == "JFK → MAD"
    assert entry.location == "Flight IB6252"
    assert entry.airline == "Iberia"


def test_flight_legacy_airport_keys(make_trip: Callable[..., Trip]) -> None:
    """Test that from/to are used when departure/arrival are missing."""
    trip = make_trip(flights=[{"from": "BOS", "to": "MAD", "date": "2025-06-01", "time": "18:45"}])

    entry = aggregate_itinerary(trip).entries_on("2025-06-01")[0]

    assert entry.name == "BOS → MAD"
    assert entry.time == "18:45"


def test_transportation_entry_name(make_trip: Callable[..., Trip]) -> None:
    """Test that transportation is named by its details, else its type."""
    trip = make_trip(
        transportation=[
            {"type": "train", "details": "AVE to Seville", "date": "2025-06-03", "time": "08:00"},
            {"type": "taxi", "date": "2025-06-03", "time": "07:00"},
        ]
    )

    entries = aggregate_itinerary(trip).entries_on("2025-06-03")

    assert [e.name for e in entries] == ["taxi", "AVE to Seville"]
    assert all(isinstance(e, TransportationEntry) for e in entries)
    assert entries[1].mode == "train"


def test_bucket_sorted_by_time(make_trip: Callable[..., Trip]) -> None:
    """Test that entries of mixed kinds are ordered by time within a day."""
    trip = make_trip(
        activities=[
            {"name": "Retiro Park", "date": "2025-06-01", "time": "14:00"},
            {"name": "Breakfast", "date": "2025-06-01"},
        ],
        flights=[{"departure": "JFK", "arrival": "MAD", "departureTime": "2025-06-01T09:30"}],
        accommodations=[{"name": "Hotel Sol", "checkIn": "2025-06-01", "checkOut": "2025-06-05"}],
    )

    entries = aggregate_itinerary(trip).entries_on("2025-06-01")

    assert [e.time for e in entries] == ["00:00", "09:30", "14:00", "15:00"]
    assert [e.kind for e in entries] == ["activity", "flight", "activity", "accommodation"]


def test_equal_times_keep_insertion_order(make_trip: Callable[..., Trip]) -> None:
    """Test that activities come before transportation when times tie."""
    trip = make_trip(
        transportation=[{"type": "bus", "date": "2025-06-02", "time": "10:00"}],
        activities=[{"name": "Tour", "date": "2025-06-02", "time": "10:00"}],
    )

    entries = aggregate_itinerary(trip).entries_on("2025-06-02")

    assert [e.kind for e in entries] == ["activity", "transportation"]


def test_times_compare_as_strings(make_trip: Callable[..., Trip]) -> None:
    """Test that non-padded times sort lexicographically."""
    trip = make_trip(
        activities=[
            {"name": "Late", "date": "2025-06-02", "time": "9:00"},
            {"name": "Early", "date": "2025-06-02", "time": "10:00"},
        ]
    )

    entries = aggregate_itinerary(trip).entries_on("2025-06-02")

    assert [e.name for e in entries] == ["Early", "Late"]


def test_undated_entries_are_skipped(make_trip: Callable[..., Trip]) -> None:
    """Test that entities without a date do not appear anywhere."""
    trip = make_trip(
        activities=[{"name": "Someday"}],
        flights=[{"departure": "JFK", "arrival": "MAD"}],
        transportation=[{"type": "rental"}],
        accommodations=[{"name": "Undecided"}],
    )

    assert aggregate_itinerary(trip).total_entries == 0


def test_out_of_range_entries_get_their_own_bucket(make_trip: Callable[..., Trip]) -> None:
    """Test that an entry dated outside the trip still appears."""
    trip = make_trip(activities=[{"name": "Airport lounge", "date": "2025-05-31", "time": "20:00"}])

    itinerary = aggregate_itinerary(trip)

    assert "2025-05-31" not in itinerary.dates
    assert [e.name for e in itinerary.entries_on("2025-05-31")] == ["Airport lounge"]


def test_activity_entry_fields(make_trip: Callable[..., Trip]) -> None:
    """Test that activity entries carry only activity fields."""
    trip = make_trip(
        activities=[
            {
                "id": "x1",
                "name": "Prado Museum",
                "category": "culture",
                "date": "2025-06-02",
                "time": "10:00",
                "duration": "3h",
                "location": "Paseo del Prado",
                "familyNotes": "Stroller friendly",
                "assignedMembers": ["a1"],
            }
        ]
    )

    entry = aggregate_itinerary(trip).entries_on("2025-06-02")[0]

    assert isinstance(entry, ActivityEntry)
    assert entry.source_id == "x1"
    assert entry.category == "culture"
    assert entry.family_notes == "Stroller friendly"
    assert entry.assigned_members == ["a1"]
    assert not hasattr(entry, "flight_number")


def test_itinerary_validates_from_json(make_trip: Callable[..., Trip]) -> None:
    """Test that serialized entries are parsed back into their variants."""
    trip = make_trip(
        activities=[{"name": "Tour", "date": "2025-06-02", "time": "10:00"}],
        flights=[{"departure": "JFK", "arrival": "MAD", "date": "2025-06-01"}],
    )
    itinerary = aggregate_itinerary(trip)

    parsed = Itinerary.model_validate_json(itinerary.model_dump_json(by_alias=True))

    assert isinstance(parsed.entries_on("2025-06-01")[0], FlightEntry)
    assert isinstance(parsed.entries_on("2025-06-02")[0], ActivityEntry)


def test_initial_collapse_state(make_trip: Callable[..., Trip]) -> None:
    """Test that empty days start collapsed and busy days expanded."""
    trip = make_trip(end_date="2025-06-02", activities=[{"name": "Tour", "date": "2025-06-02"}])

    state = initial_collapse_state(aggregate_itinerary(trip))

    assert state == {"2025-06-01": True, "2025-06-02": False}


def test_aggregation_is_deterministic(make_trip: Callable[..., Trip]) -> None:
    """Test that two passes return equal itineraries."""
    trip = make_trip(
        activities=[{"name": "Tour", "date": "2025-06-02", "time": "10:00"}],
        accommodations=[{"name": "Hotel Sol", "checkIn": "2025-06-01", "checkOut": "2025-06-05"}],
    )

    assert aggregate_itinerary(trip) == aggregate_itinerary(trip)
