"""Pydantic models for core stick assembly domain objects."""

from .inventory_entry import InventoryEntry
from .placement import POSITIONS_PER_LAYER, AssemblyLayout, Placement, layer_positions

__all__ = [
    "InventoryEntry",
    "Placement",
    "AssemblyLayout",
    "POSITIONS_PER_LAYER",
    "layer_positions",
]
