"""Context-aware packing list generation.

Packing items have no identity of their own: overrides address them by
category index and by position within the category's visible list (generated
items minus hidden labels, followed by custom items). The category index is
the position in the emitted list, so "Activity Gear" is index 3 on a trip
without kids and index 4 on a trip with kids.
"""

import math
from dataclasses import dataclass

from tripstate.config import Settings, get_settings
from tripstate.derivation.dates import duration_days, season_for
from tripstate.models.common import Climate, Season
from tripstate.models.packing import PackingCategory, PackingContext, PackingItem
from tripstate.models.trip import Trip

# Country-name substrings per climate, checked in this order
TROPICAL_COUNTRIES = (
    "thailand",
    "malaysia",
    "indonesia",
    "philippines",
    "vietnam",
    "costa rica",
    "colombia",
    "brazil",
)
COLD_COUNTRIES = ("norway", "sweden", "finland", "iceland", "russia", "canada", "alaska")
ARID_COUNTRIES = ("egypt", "morocco", "jordan", "israel", "uae", "saudi arabia", "australia")

HEALTH_ITEMS = (
    "Prescription medications",
    "First aid kit",
    "Sunscreen",
    "Personal hygiene items",
    "Hand sanitizer",
    "Face masks",
)
KIDS_HEALTH_ITEMS = ("Children's medications", "Thermometer", "Kids' specific toiletries")

KIDS_ITEMS = (
    "Favorite toys/comfort items",
    "Tablet/entertainment for travel",
    "Snacks for journey",
    "Extra clothes (accidents happen)",
    "Car seat (if needed)",
    "Stroller/carrier",
    "Baby wipes",
    "Diapers (if applicable)",
)

# Activity-name keywords and the gear each group contributes, in order
ACTIVITY_GEAR_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("swim", "beach"), ("Swimwear", "Beach towel", "Waterproof bag")),
    (("hik", "outdoor"), ("Hiking shoes", "Daypack", "Water bottle", "Weather protection")),
    (("dinner", "restaurant"), ("Dressy outfit", "Nice shoes")),
    (("museum", "tour"), ("Comfortable walking shoes", "Small daypack", "Portable charger")),
)


@dataclass(frozen=True)
class GeneratedCategory:
    """A category's generated items before any override is applied."""

    key: str
    title: str
    items: tuple[str, ...]


def climate_for(country: str | None) -> Climate:
    """Coarse climate by substring match on the country name."""
    name = (country or "").lower()
    if not name:
        return Climate.temperate
    if any(c in name for c in TROPICAL_COUNTRIES):
        return Climate.tropical
    if any(c in name for c in COLD_COUNTRIES):
        return Climate.cold
    if any(c in name for c in ARID_COUNTRIES):
        return Climate.arid
    return Climate.temperate


def derive_packing_context(trip: Trip) -> PackingContext:
    """Duration, season, climate and family composition of a trip."""
    return PackingContext(
        duration=duration_days(trip.start_date, trip.end_date),
        season=season_for(trip.start_date),
        climate=climate_for(trip.country),
        has_kids=len(trip.kids) > 0,
        adults_count=len(trip.adults),
        kids_count=len(trip.kids),
    )


def _essential_items(trip: Trip, settings: Settings) -> list[str]:
    items = [
        "Phone charger",
        "Camera/phone for photos",
        "Credit cards & cash",
        "Emergency contact information",
    ]
    if trip.country and trip.country != settings.home_country:
        items[:0] = ["Passport/ID", "Visa/Travel Authorization (if required)"]
    else:
        items.insert(0, "Driver's License/ID")

    if trip.flights:
        items.append("Flight confirmations")
    if trip.lodging:
        items.append("Accommodation reservations")
    items.append("Travel insurance documents")
    return items


def _clothing_items(context: PackingContext) -> list[str]:
    duration = context.duration
    items = [
        f"Underwear ({duration + 2} pairs)",
        f"Socks ({duration + 2} pairs)",
        f"T-shirts/tops ({max(3, math.ceil(duration / 2))})",
        f"Pants/shorts ({max(2, math.ceil(duration / 3))})",
        "Comfortable walking shoes",
        "Sleepwear",
    ]

    if context.season == Season.winter or context.climate == Climate.cold:
        items.extend(["Warm jacket/coat", "Sweaters/hoodies", "Warm hat & gloves", "Scarf", "Warm boots"])
    elif context.season == Season.summer or context.climate == Climate.tropical:
        items.extend(["Swimwear", "Sun hat", "Sandals", "Light jacket for AC"])
    else:
        items.extend(["Light jacket", "Versatile layers"])

    if context.climate == Climate.arid:
        items.extend(["Sun protection clothing", "Closed-toe shoes for desert"])
    return items


def _health_items(context: PackingContext) -> list[str]:
    items = list(HEALTH_ITEMS)
    if context.has_kids:
        items.extend(KIDS_HEALTH_ITEMS)
    return items


def _activity_gear(trip: Trip) -> list[str]:
    names = [(activity.name or "").lower() for activity in trip.activities]
    items: list[str] = []
    for keywords, gear in ACTIVITY_GEAR_RULES:
        if any(keyword in name for name in names for keyword in keywords):
            items.extend(gear)
    return items


def generate_categories(
    trip: Trip, context: PackingContext | None = None, settings: Settings | None = None
) -> list[GeneratedCategory]:
    """Generated packing categories in display order, without overrides."""
    settings = settings or get_settings()
    context = context or derive_packing_context(trip)

    categories = [
        GeneratedCategory("essentials", "Travel Essentials", tuple(_essential_items(trip, settings))),
        GeneratedCategory("clothing", "Clothing & Shoes", tuple(_clothing_items(context))),
        GeneratedCategory("health", "Health & Hygiene", tuple(_health_items(context))),
    ]
    if context.has_kids:
        categories.append(GeneratedCategory("kids", "Kids Items", KIDS_ITEMS))

    gear = _activity_gear(trip)
    if gear:
        categories.append(GeneratedCategory("activity", "Activity Gear", tuple(gear)))
    return categories


def visible_generated_items(trip: Trip, index: int, category: GeneratedCategory) -> list[str]:
    """Generated labels of a category minus the ones the user hid."""
    hidden = set(trip.hidden_packing_items.get(index, []))
    return [label for label in category.items if label not in hidden]


def generate_packing_lists(
    trip: Trip, context: PackingContext | None = None, settings: Settings | None = None
) -> list[PackingCategory]:
    """Derive the visible packing lists of a trip.

    For every category: generated items filtered by the category's hidden
    labels, then the category's custom items. Each visible item carries the
    checked flag stored at its position in ``packingLists``.

    Args:
        trip: Trip record including its packing override layers
        context: Precomputed packing context (derived from the trip if omitted)
        settings: Home country used for document items (defaults to settings)

    Returns:
        Ordered packing categories
    """
    result = []
    for index, category in enumerate(generate_categories(trip, context, settings)):
        generated = visible_generated_items(trip, index, category)
        custom = trip.custom_packing_items.get(index, [])
        checks = trip.packing_lists.get(index)

        items = []
        for position, label in enumerate([*generated, *custom]):
            entry = checks.items.get(position) if checks else None
            items.append(
                PackingItem(
                    index=position,
                    label=label,
                    source="generated" if position < len(generated) else "custom",
                    checked=bool(entry and entry.checked),
                )
            )
        result.append(PackingCategory(index=index, key=category.key, title=category.title, items=items))
    return result


def describe_packing_context(context: PackingContext) -> str:
    """One-line summary, e.g. ``7-day trip • summer season • tropical climate • 2 adults``."""
    adults = f"{context.adults_count} adult{'' if context.adults_count == 1 else 's'}"
    travelers = adults
    if context.has_kids:
        travelers += f" & {context.kids_count} kid{'' if context.kids_count == 1 else 's'}"
    return (
        f"{context.duration}-day trip • {context.season.value} season • "
        f"{context.climate.value} climate • {travelers}"
    )
