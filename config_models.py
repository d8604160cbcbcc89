"""
Pydantic models for configuration management in the stick assembly solver.

A configuration names the stick inventory, the number of layers to stack and
the fixed base pattern, plus the settings passed through to CP-SAT.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from core.canonical_forms import all_canonical_forms, canonicalize, catalog_inventory, is_terminal
from core.errors import UnknownStickTypeError
from core.models.inventory_entry import InventoryEntry
from core.models.placement import POSITIONS_PER_LAYER
from core.notch_codec import decode, decode_base

logger = logging.getLogger(__name__)


class SolverSettings(BaseModel):
    """Options handed to the CP-SAT solver unchanged."""

    time_limit_s: float | None = Field(10.0, description="Wall time limit in seconds, None for no limit")
    num_workers: int = Field(8, ge=1, description="Number of parallel search workers")
    log_search_progress: bool = False


class AssemblyConfiguration(BaseModel):
    """
    A single puzzle to assemble: inventory, layer count and base pattern.

    This represents one test case to be run by the assembly solver.
    """

    inventory: list[InventoryEntry] = Field(..., min_length=1, description="Sticks available for the assembly")
    layers: int = Field(..., ge=1, description="Number of stick layers stacked on the base")
    base_pattern: int = Field(..., description="9-bit touch-point pattern of the fixed base, bit 0 first")
    require_canonical: bool = Field(
        False, description="Reject inventory entries that are not written in their canonical form"
    )
    solver: SolverSettings = Field(default_factory=SolverSettings)

    @classmethod
    def from_counts(cls, counts: dict[int, int], layers: int, base_pattern: int, **kwargs) -> AssemblyConfiguration:
        """Build a configuration from a ``{pattern: count}`` mapping."""
        inventory = [InventoryEntry(pattern=pattern, count=count) for pattern, count in counts.items()]
        return cls(inventory=inventory, layers=layers, base_pattern=base_pattern, **kwargs)

    @property
    def positions(self) -> int:
        return self.layers * POSITIONS_PER_LAYER

    @property
    def patterns(self) -> list[int]:
        return [entry.pattern for entry in self.inventory]

    def validate_puzzle(self) -> None:
        """Check bit widths and stick types before any model is built.

        Raises:
            MalformedPatternError: If a stick pattern is outside 0..63 or the base outside 0..511
            UnknownStickTypeError: If a stick is not one of the canonical stick types
        """
        decode_base(self.base_pattern)

        canonical_forms = all_canonical_forms()
        for i, entry in enumerate(self.inventory):
            decode(entry.pattern)
            canonical = canonicalize(entry.pattern)
            if canonical not in canonical_forms:
                msg = f"Inventory entry {i}: stick {entry.pattern} has unknown canonical form {canonical}"
                raise UnknownStickTypeError(msg)
            if self.require_canonical and canonical != entry.pattern:
                msg = f"Inventory entry {i}: stick {entry.pattern} should be written as {canonical}"
                raise UnknownStickTypeError(msg)

        total = sum(entry.count for entry in self.inventory)
        if total < self.positions:
            logger.info("Only %d sticks for %d positions, the stack cannot be filled", total, self.positions)

        terminal = sum(entry.count for entry in self.inventory if is_terminal(entry.pattern))
        if terminal < POSITIONS_PER_LAYER:
            logger.warning(
                "Only %d terminal sticks in the inventory, the top layer cannot be closed completely", terminal
            )

        logger.debug("Inventory by stick type: %s", catalog_inventory(self.inventory))
