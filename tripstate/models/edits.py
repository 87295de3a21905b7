"""Override edit models - user actions layered over generated content."""

from typing import Annotated, Literal

from pydantic import Field

from tripstate.models.common import CamelModel, ReadinessStatus


class SetReadinessStatus(CamelModel):
    """Manually mark a readiness item complete or incomplete."""

    op: Literal["set_status"] = "set_status"
    item_id: str
    status: ReadinessStatus


class HideReadinessItem(CamelModel):
    """Hide a readiness item from the checklist."""

    op: Literal["hide"] = "hide"
    item_id: str


class UnhideReadinessItem(CamelModel):
    """Show a previously hidden readiness item again."""

    op: Literal["unhide"] = "unhide"
    item_id: str


class AddCustomReadinessItem(CamelModel):
    """Add a user-written reminder to the checklist."""

    op: Literal["add_custom"] = "add_custom"
    title: str = Field(..., max_length=200)
    subtitle: str = "Custom reminder"
    category: str = "planning"


class RemoveCustomReadinessItem(CamelModel):
    """Delete a user-written reminder."""

    op: Literal["remove_custom"] = "remove_custom"
    item_id: str


ReadinessEdit = Annotated[
    SetReadinessStatus
    | HideReadinessItem
    | UnhideReadinessItem
    | AddCustomReadinessItem
    | RemoveCustomReadinessItem,
    Field(discriminator="op"),
]


class TogglePackingItem(CamelModel):
    """Set (or flip, when ``checked`` is omitted) an item's checked state."""

    op: Literal["toggle"] = "toggle"
    category_index: int = Field(..., ge=0)
    item_index: int = Field(..., ge=0)
    checked: bool | None = None


class AddPackingItem(CamelModel):
    """Append a custom item to a category."""

    op: Literal["add"] = "add"
    category_index: int = Field(..., ge=0)
    label: str = Field(..., max_length=200)


class DeletePackingItem(CamelModel):
    """Remove a visible item (generated items are hidden, custom ones spliced out)."""

    op: Literal["delete"] = "delete"
    category_index: int = Field(..., ge=0)
    item_index: int = Field(..., ge=0)


PackingEdit = Annotated[
    TogglePackingItem | AddPackingItem | DeletePackingItem,
    Field(discriminator="op"),
]
