"""Dashboard insights: highlights, smart insight and the trip summary card."""

import re
from collections.abc import Sequence
from datetime import date

from tripstate.config import Settings, get_settings
from tripstate.derivation.completion import track_completion
from tripstate.derivation.dates import calculate_days_until, format_date_range, parse_iso_date
from tripstate.derivation.readiness import evaluate_readiness
from tripstate.models.summary import TripSummary
from tripstate.models.trip import FamilyMember, Trip

TRAVEL_STYLE_HIGHLIGHTS = {
    "adventure-seekers": "Adventure-focused",
    "culture-enthusiasts": "Cultural experiences",
    "relaxed-explorers": "Relaxed pace",
    "comfort-convenience": "Comfort-focused",
}

BUDGET_HIGHLIGHTS = {
    "budget-friendly": "Budget-conscious",
    "mid-range": "Mid-range comfort",
    "premium": "Premium experience",
    "luxury": "Luxury travel",
}

TRAVEL_STYLE_INSIGHTS = {
    "relaxed-explorers": "Relaxed pace perfect for family with built-in rest time",
    "adventure-seekers": "Active adventures planned - great for energetic family",
    "culture-enthusiasts": "Cultural experiences with family-friendly learning opportunities",
}

BUDGET_INSIGHTS = {
    "budget-friendly": "Budget-friendly options include free museums and local markets",
    "luxury": "Premium experiences will include skip-the-line access and private guides",
}

SPRING_WALKING_CITIES = ("barcelona", "madrid")

DEFAULT_INSIGHT = "Family trip planning is on track for a memorable experience"

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _age(member: FamilyMember) -> int:
    # Leading integer, so "5 years" reads as 5
    match = LEADING_INT.match(str(member.age))
    return int(match.group(1)) if match else 0


def generate_trip_highlights(trip: Trip) -> list[str]:
    """Short tags describing style, budget, health concerns and family size."""
    highlights = []
    if trip.travel_style in TRAVEL_STYLE_HIGHLIGHTS:
        highlights.append(TRAVEL_STYLE_HIGHLIGHTS[trip.travel_style])
    if trip.budget_level in BUDGET_HIGHLIGHTS:
        highlights.append(BUDGET_HIGHLIGHTS[trip.budget_level])
    if trip.concerns:
        highlights.append("Health considerations")

    if len(trip.travelers) > 4:
        highlights.append("Large family group")
    elif trip.kids:
        highlights.append("Family-friendly")
    return highlights


def generate_smart_insight(trip: Trip) -> str:
    """First applicable planning insight for the family, else a default line."""
    insights = []

    if trip.kids:
        ages = [_age(kid) for kid in trip.kids]
        youngest, oldest = min(ages), max(ages)
        if youngest <= 3:
            insights.append("Great timing for toddler-friendly morning activities")
        if oldest >= 5 and youngest >= 3:
            insights.append("Perfect age range for interactive museums and cultural sites")
        if len(trip.kids) > 2:
            insights.append("Consider connecting hotel rooms for large family comfort")

    if trip.travel_style in TRAVEL_STYLE_INSIGHTS:
        insights.append(TRAVEL_STYLE_INSIGHTS[trip.travel_style])

    start = parse_iso_date(trip.start_date)
    city = (trip.city or "").lower()
    if start and any(name in city for name in SPRING_WALKING_CITIES) and 4 <= start.month <= 6:
        insights.append("Spring weather perfect for walking tours and outdoor dining")

    if trip.budget_level in BUDGET_INSIGHTS:
        insights.append(BUDGET_INSIGHTS[trip.budget_level])

    return insights[0] if insights else DEFAULT_INSIGHT


def summarize_trip(
    trip: Trip,
    today: date | None = None,
    family_profiles: Sequence[FamilyMember] | None = None,
    settings: Settings | None = None,
) -> TripSummary:
    """Build the dashboard card of a trip from its readiness checklist."""
    settings = settings or get_settings()
    completion = track_completion(evaluate_readiness(trip, family_profiles, settings), settings)

    return TripSummary(
        trip_id=trip.id,
        city=trip.city,
        country=trip.country,
        date_range=format_date_range(trip.start_date, trip.end_date),
        traveler_count=len(trip.travelers),
        days_until=calculate_days_until(trip.start_date, today),
        progress=completion.progress_percent,
        status=completion.status,
        completed=completion.completed_titles,
        next_steps=completion.next_steps,
        pending_tasks=len(completion.next_steps),
        highlights=generate_trip_highlights(trip),
        smart_insight=generate_smart_insight(trip),
    )
