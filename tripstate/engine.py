"""Trip state derivation engine - the one module every UI surface calls.

Derivations are pure: given the same trip they return equal output and never
modify their input. Edits return a new trip for the caller to persist.
"""

from tripstate.derivation.completion import track_completion
from tripstate.derivation.insights import summarize_trip
from tripstate.derivation.itinerary import aggregate_itinerary, initial_collapse_state
from tripstate.derivation.packing import (
    derive_packing_context,
    describe_packing_context,
    generate_packing_lists,
)
from tripstate.derivation.readiness import evaluate_readiness
from tripstate.overrides.operations import (
    add_custom_readiness_item,
    add_packing_item,
    apply_packing_edit,
    apply_readiness_edit,
    delete_packing_item,
    hide_readiness_item,
    remove_custom_readiness_item,
    set_readiness_status,
    toggle_packing_item,
    unhide_readiness_item,
)

__all__ = [
    # Derivations
    "evaluate_readiness",
    "aggregate_itinerary",
    "initial_collapse_state",
    "generate_packing_lists",
    "derive_packing_context",
    "describe_packing_context",
    "track_completion",
    "summarize_trip",
    # Edits
    "apply_readiness_edit",
    "set_readiness_status",
    "hide_readiness_item",
    "unhide_readiness_item",
    "add_custom_readiness_item",
    "remove_custom_readiness_item",
    "apply_packing_edit",
    "toggle_packing_item",
    "add_packing_item",
    "delete_packing_item",
]
