"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for records stored in the camelCase trip document.

    Unknown keys are kept so a round trip through the engine never drops
    fields owned by other collaborators.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class BookingStatus(str, Enum):
    """Booking lifecycle of a bookable item."""

    booked = "booked"
    confirmed = "confirmed"
    planned = "planned"
    researching = "researching"


# Statuses that count as secured for readiness checks
SECURED_STATUSES = frozenset({BookingStatus.booked.value, BookingStatus.confirmed.value})


class ReadinessStatus(str, Enum):
    """Completion state of a readiness item."""

    complete = "complete"
    incomplete = "incomplete"


class ReadinessCategory(str, Enum):
    """Grouping used by the UI to route a readiness item to a tab."""

    planning = "planning"
    travel = "travel"
    packing = "packing"
    itinerary = "itinerary"


class TripStatus(str, Enum):
    """Dashboard status bucket derived from readiness progress."""

    early_planning = "Early Planning"
    planning = "Planning"
    ready = "Ready"


class Season(str, Enum):
    """Season of the trip start month (northern hemisphere)."""

    spring = "spring"
    summer = "summer"
    fall = "fall"
    winter = "winter"
    unknown = "unknown"


class Climate(str, Enum):
    """Coarse destination climate."""

    tropical = "tropical"
    cold = "cold"
    arid = "arid"
    temperate = "temperate"
