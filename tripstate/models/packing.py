"""Packing models - derived packing categories and their context."""

from typing import Literal

from pydantic import Field

from tripstate.models.common import CamelModel, Climate, Season


class PackingContext(CamelModel):
    """Trip attributes that drive packing list generation."""

    duration: int = 0
    season: Season = Season.unknown
    climate: Climate = Climate.temperate
    has_kids: bool = False
    adults_count: int = 0
    kids_count: int = 0


class PackingItem(CamelModel):
    """One visible packing item, addressed by its position in the category."""

    index: int
    label: str
    source: Literal["generated", "custom"]
    checked: bool = False


class PackingCategory(CamelModel):
    """A named group of packing items, part generated and part custom.

    ``index`` is the category's position in the generated list and is the key
    of its hidden, custom and checked override layers.
    """

    index: int
    key: str
    title: str
    items: list[PackingItem] = Field(default_factory=list)

    @property
    def generated_count(self) -> int:
        """Number of visible generated items (custom items follow them)."""
        return sum(1 for item in self.items if item.source == "generated")

    @property
    def packed_count(self) -> int:
        """Number of checked items."""
        return sum(1 for item in self.items if item.checked)

    @property
    def labels(self) -> list[str]:
        """Item labels in display order."""
        return [item.label for item in self.items]
