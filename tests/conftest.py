"""Shared pytest fixtures for all test suites."""

from collections.abc import Callable
from typing import Any

import pytest
from pydantic.alias_generators import to_camel

from tripstate.models.trip import Trip

BASE_TRIP: dict[str, Any] = {
    "id": "trip-1",
    "city": "Madrid",
    "country": "Spain",
    "startDate": "2025-06-01",
    "endDate": "2025-06-05",
    "adults": [{"id": "a1", "name": "Ana", "type": "adult", "age": "38"}],
    "kids": [],
}


@pytest.fixture
def trip_document() -> dict[str, Any]:
    """Camel-case trip document as a client would persist it."""
    return {
        **BASE_TRIP,
        "adults": [dict(a) for a in BASE_TRIP["adults"]],
    }


@pytest.fixture
def make_trip(trip_document: dict[str, Any]) -> Callable[..., Trip]:
    """Factory building a Trip from the base document plus field overrides.

    Usage:
        trip = make_trip(country="Thailand", start_date="2025-07-10")
    """

    def _make(**fields: Any) -> Trip:
        overrides = {to_camel(name): value for name, value in fields.items()}
        return Trip.model_validate({**trip_document, **overrides})

    return _make

