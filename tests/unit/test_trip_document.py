"""Unit tests for trip document parsing and serialization."""

from typing import Any

from tripstate.models.common import ReadinessStatus
from tripstate.models.trip import Trip


def test_parses_camel_case_document(trip_document: dict[str, Any]) -> None:
    """Test that camelCase keys map to snake_case fields."""
    trip = Trip.model_validate(
        {
            **trip_document,
            "currencyReady": True,
            "readinessItemStatus": {"hotel": "complete"},
            "flights": [{"from": "JFK", "to": "MAD", "departureTime": "2025-06-01T09:30"}],
        }
    )

    assert trip.start_date == "2025-06-01"
    assert trip.currency_ready is True
    assert trip.readiness_item_status == {"hotel": ReadinessStatus.complete}
    assert trip.flights[0].from_ == "JFK"
    assert trip.flights[0].departure_time == "2025-06-01T09:30"


def test_packing_layer_keys_are_integers(trip_document: dict[str, Any]) -> None:
    """Test that string category and item keys are read as positions."""
    trip = Trip.model_validate(
        {
            **trip_document,
            "packingLists": {"1": {"items": {"3": {"checked": True}}}},
            "hiddenPackingItems": {"1": ["Sandals"]},
        }
    )

    assert trip.packing_lists[1].items[3].checked is True
    assert trip.hidden_packing_items == {1: ["Sandals"]}


def test_to_document_keeps_layout_and_unknown_fields(trip_document: dict[str, Any]) -> None:
    """Test that serialization is camelCase and preserves fields it does not model."""
    trip = Trip.model_validate(
        {
            **trip_document,
            "createdAt": "2025-04-01T10:00:00Z",
            "customPackingItems": {"2": ["Earplugs"]},
            "adults": [{"name": "Ana", "passportExpiry": "2030-01-01"}],
        }
    )

    document = trip.to_document()

    assert document["startDate"] == "2025-06-01"
    assert document["createdAt"] == "2025-04-01T10:00:00Z"
    assert document["customPackingItems"] == {"2": ["Earplugs"]}
    assert document["adults"][0]["passportExpiry"] == "2030-01-01"
    assert "start_date" not in document


def test_legacy_hotels_fallback(trip_document: dict[str, Any]) -> None:
    """Test that lodging prefers accommodations over the legacy hotels list."""
    legacy = Trip.model_validate({**trip_document, "hotels": [{"name": "Old Inn"}]})
    both = Trip.model_validate(
        {**trip_document, "hotels": [{"name": "Old Inn"}], "accommodations": [{"name": "Casa"}]}
    )

    assert [stay.name for stay in legacy.lodging] == ["Old Inn"]
    assert [stay.name for stay in both.lodging] == ["Casa"]


def test_travelers_are_adults_then_kids(trip_document: dict[str, Any]) -> None:
    """Test traveler ordering."""
    trip = Trip.model_validate({**trip_document, "kids": [{"name": "Leo", "age": 6}]})

    assert [member.name for member in trip.travelers] == ["Ana", "Leo"]
