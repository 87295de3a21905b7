"""OverrideStore - typed value object over a trip's user-edit layers.

Every operation returns a new store; the receiver is never modified. The
layers keep the persisted document layout, so packing overrides stay keyed by
category index and visible item position.
"""

from pydantic import ConfigDict, Field

from tripstate.models.common import CamelModel, ReadinessStatus
from tripstate.models.readiness import ReadinessItem
from tripstate.models.trip import PackingCheck, PackingListState, Trip

OVERRIDE_FIELDS = (
    "packing_lists",
    "custom_packing_items",
    "hidden_packing_items",
    "custom_readiness_items",
    "hidden_readiness_items",
    "readiness_item_status",
)


class OverrideStore(CamelModel):
    """Manual status flips, hidden sets, custom items and checked-state maps."""

    model_config = ConfigDict(frozen=True)

    packing_lists: dict[int, PackingListState] = Field(default_factory=dict)
    custom_packing_items: dict[int, list[str]] = Field(default_factory=dict)
    hidden_packing_items: dict[int, list[str]] = Field(default_factory=dict)
    custom_readiness_items: list[ReadinessItem] = Field(default_factory=list)
    hidden_readiness_items: list[str] = Field(default_factory=list)
    readiness_item_status: dict[str, ReadinessStatus] = Field(default_factory=dict)

    @classmethod
    def from_trip(cls, trip: Trip) -> "OverrideStore":
        """Copy the override layers out of a trip."""
        return cls(**{name: getattr(trip, name) for name in OVERRIDE_FIELDS}).model_copy(deep=True)

    def apply_to(self, trip: Trip) -> Trip:
        """New trip carrying this store's layers; other trip fields are shared."""
        layers = self.model_copy(deep=True)
        return trip.model_copy(update={name: getattr(layers, name) for name in OVERRIDE_FIELDS})

    # Readiness layers

    def set_status(self, item_id: str, status: ReadinessStatus) -> "OverrideStore":
        """Record a manual status for a readiness item id."""
        return self.model_copy(
            update={"readiness_item_status": {**self.readiness_item_status, item_id: status}}
        )

    def clear_status(self, item_id: str) -> "OverrideStore":
        """Forget the manual status of a readiness item id."""
        remaining = {k: v for k, v in self.readiness_item_status.items() if k != item_id}
        return self.model_copy(update={"readiness_item_status": remaining})

    def hide(self, item_id: str) -> "OverrideStore":
        """Hide a readiness item id (idempotent)."""
        if item_id in self.hidden_readiness_items:
            return self
        return self.model_copy(update={"hidden_readiness_items": [*self.hidden_readiness_items, item_id]})

    def unhide(self, item_id: str) -> "OverrideStore":
        """Show a hidden readiness item id again."""
        visible = [hidden for hidden in self.hidden_readiness_items if hidden != item_id]
        return self.model_copy(update={"hidden_readiness_items": visible})

    def add_custom(self, item: ReadinessItem) -> "OverrideStore":
        """Append a custom readiness item."""
        return self.model_copy(update={"custom_readiness_items": [*self.custom_readiness_items, item]})

    def remove_custom(self, item_id: str) -> "OverrideStore":
        """Delete a custom readiness item together with its manual status."""
        remaining = [item for item in self.custom_readiness_items if item.id != item_id]
        return self.model_copy(update={"custom_readiness_items": remaining}).clear_status(item_id)

    # Packing layers

    def is_checked(self, category_index: int, item_index: int) -> bool:
        """Checked state stored at a visible item position."""
        state = self.packing_lists.get(category_index)
        entry = state.items.get(item_index) if state else None
        return bool(entry and entry.checked)

    def set_checked(self, category_index: int, item_index: int, checked: bool) -> "OverrideStore":
        """Store the checked state of a visible item position."""
        state = self.packing_lists.get(category_index)
        items = dict(state.items) if state else {}
        items[item_index] = PackingCheck(checked=checked)
        return self._with_checks(category_index, items)

    def drop_checked_at(self, category_index: int, item_index: int) -> "OverrideStore":
        """Remove the checked entry at a position and shift later entries down by one."""
        state = self.packing_lists.get(category_index)
        if state is None:
            return self

        shifted = {}
        for position, entry in state.items.items():
            if position < item_index:
                shifted[position] = entry
            elif position > item_index:
                shifted[position - 1] = entry
        return self._with_checks(category_index, shifted)

    def hide_packing_label(self, category_index: int, label: str) -> "OverrideStore":
        """Add a generated label to a category's hidden set."""
        hidden = self.hidden_packing_items.get(category_index, [])
        if label in hidden:
            return self
        return self.model_copy(
            update={"hidden_packing_items": {**self.hidden_packing_items, category_index: [*hidden, label]}}
        )

    def add_packing_item(self, category_index: int, label: str) -> "OverrideStore":
        """Append a custom label to a category."""
        custom = self.custom_packing_items.get(category_index, [])
        return self.model_copy(
            update={"custom_packing_items": {**self.custom_packing_items, category_index: [*custom, label]}}
        )

    def remove_packing_item(self, category_index: int, custom_index: int) -> "OverrideStore":
        """Splice a custom label out of a category by its position among custom items."""
        custom = list(self.custom_packing_items.get(category_index, []))
        if not 0 <= custom_index < len(custom):
            return self
        del custom[custom_index]
        return self.model_copy(
            update={"custom_packing_items": {**self.custom_packing_items, category_index: custom}}
        )

    def _with_checks(self, category_index: int, items: dict[int, PackingCheck]) -> "OverrideStore":
        return self.model_copy(
            update={
                "packing_lists": {
                    **self.packing_lists,
                    category_index: PackingListState(items=dict(sorted(items.items()))),
                }
            }
        )
