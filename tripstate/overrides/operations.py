"""Override edits as pure ``Trip -> Trip`` functions.

The caller persists the returned trip. Edits that address something that does
not exist (unknown category, index past the end, blank label) return the trip
unchanged.
"""

import logging
from datetime import datetime, timezone

from tripstate.config import Settings
from tripstate.derivation.packing import generate_categories, visible_generated_items
from tripstate.models.common import ReadinessCategory, ReadinessStatus
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
from tripstate.models.readiness import ReadinessItem
from tripstate.models.trip import Trip
from tripstate.overrides.store import OverrideStore

logger = logging.getLogger(__name__)


# Readiness


def set_readiness_status(trip: Trip, item_id: str, status: ReadinessStatus) -> Trip:
    """Manually mark a built-in or custom readiness item."""
    return OverrideStore.from_trip(trip).set_status(item_id, status).apply_to(trip)


def hide_readiness_item(trip: Trip, item_id: str) -> Trip:
    """Hide a readiness item from the checklist."""
    return OverrideStore.from_trip(trip).hide(item_id).apply_to(trip)


def unhide_readiness_item(trip: Trip, item_id: str) -> Trip:
    """Show a hidden readiness item again."""
    return OverrideStore.from_trip(trip).unhide(item_id).apply_to(trip)


def add_custom_readiness_item(
    trip: Trip,
    title: str,
    subtitle: str = "Custom reminder",
    category: str = ReadinessCategory.planning.value,
    now: datetime | None = None,
) -> Trip:
    """Add an incomplete custom reminder with id ``custom-<epoch millis>``.

    The timestamp is bumped by one millisecond until the id is unused.
    """
    title = title.strip()
    if not title:
        logger.debug("Ignoring custom readiness item with blank title")
        return trip

    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    taken = {item.id for item in trip.custom_readiness_items}
    while f"custom-{millis}" in taken:
        millis += 1

    item = ReadinessItem(
        id=f"custom-{millis}",
        title=title,
        subtitle=subtitle,
        category=category,
        status=ReadinessStatus.incomplete,
        is_custom=True,
    )
    return OverrideStore.from_trip(trip).add_custom(item).apply_to(trip)


def remove_custom_readiness_item(trip: Trip, item_id: str) -> Trip:
    """Delete a custom reminder (built-in ids are unaffected)."""
    return OverrideStore.from_trip(trip).remove_custom(item_id).apply_to(trip)


def apply_readiness_edit(trip: Trip, edit: ReadinessEdit, now: datetime | None = None) -> Trip:
    """Dispatch a readiness edit to its operation."""
    if isinstance(edit, SetReadinessStatus):
        return set_readiness_status(trip, edit.item_id, edit.status)
    if isinstance(edit, HideReadinessItem):
        return hide_readiness_item(trip, edit.item_id)
    if isinstance(edit, UnhideReadinessItem):
        return unhide_readiness_item(trip, edit.item_id)
    if isinstance(edit, AddCustomReadinessItem):
        return add_custom_readiness_item(trip, edit.title, edit.subtitle, edit.category, now)
    if isinstance(edit, RemoveCustomReadinessItem):
        return remove_custom_readiness_item(trip, edit.item_id)
    raise TypeError(f"Unsupported readiness edit: {type(edit).__name__}")


# Packing


def _visible_labels(
    trip: Trip, category_index: int, settings: Settings | None
) -> tuple[list[str], list[str]] | None:
    """Visible generated and custom labels of a category, None when it does not exist."""
    categories = generate_categories(trip, settings=settings)
    if not 0 <= category_index < len(categories):
        return None
    generated = visible_generated_items(trip, category_index, categories[category_index])
    return generated, trip.custom_packing_items.get(category_index, [])


def toggle_packing_item(
    trip: Trip,
    category_index: int,
    item_index: int,
    checked: bool | None = None,
    settings: Settings | None = None,
) -> Trip:
    """Set the checked state at a visible position, or flip it when ``checked`` is None."""
    visible = _visible_labels(trip, category_index, settings)
    if visible is None or not 0 <= item_index < len(visible[0]) + len(visible[1]):
        logger.debug("Ignoring toggle of missing packing item %d/%d", category_index, item_index)
        return trip

    store = OverrideStore.from_trip(trip)
    if checked is None:
        checked = not store.is_checked(category_index, item_index)
    return store.set_checked(category_index, item_index, checked).apply_to(trip)


def add_packing_item(
    trip: Trip, category_index: int, label: str, settings: Settings | None = None
) -> Trip:
    """Append a custom item to a category."""
    label = label.strip()
    if not label:
        logger.debug("Ignoring blank packing item for category %d", category_index)
        return trip
    if _visible_labels(trip, category_index, settings) is None:
        logger.debug("Ignoring packing item for unknown category %d", category_index)
        return trip
    return OverrideStore.from_trip(trip).add_packing_item(category_index, label).apply_to(trip)


def delete_packing_item(
    trip: Trip, category_index: int, item_index: int, settings: Settings | None = None
) -> Trip:
    """Remove the visible item at ``item_index`` of a category.

    A generated item is hidden by label; a custom item is spliced out of the
    category's custom list. In the same step the checked entry at the deleted
    position is dropped and every later entry moves down one position, so
    checked state stays aligned with the shortened visible list.

    Args:
        trip: Trip record
        category_index: Position of the category in the generated list
        item_index: Position of the item in the category's visible list
        settings: Settings used to regenerate the categories

    Returns:
        Updated trip (unchanged when the position does not exist)
    """
    visible = _visible_labels(trip, category_index, settings)
    if visible is None:
        logger.debug("Ignoring delete in unknown packing category %d", category_index)
        return trip

    generated, custom = visible
    if not 0 <= item_index < len(generated) + len(custom):
        logger.debug("Ignoring delete outside packing category %d", category_index)
        return trip

    store = OverrideStore.from_trip(trip)
    if item_index < len(generated):
        store = store.hide_packing_label(category_index, generated[item_index])
    else:
        store = store.remove_packing_item(category_index, item_index - len(generated))
    return store.drop_checked_at(category_index, item_index).apply_to(trip)


def apply_packing_edit(trip: Trip, edit: PackingEdit, settings: Settings | None = None) -> Trip:
    """Dispatch a packing edit to its operation."""
    if isinstance(edit, TogglePackingItem):
        return toggle_packing_item(trip, edit.category_index, edit.item_index, edit.checked, settings)
    if isinstance(edit, AddPackingItem):
        return add_packing_item(trip, edit.category_index, edit.label, settings)
    if isinstance(edit, DeletePackingItem):
        return delete_packing_item(trip, edit.category_index, edit.item_index, settings)
    raise TypeError(f"Unsupported packing edit: {type(edit).__name__}")
