from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.orientation import Orientation
from core.rendering import draw_base, draw_stick

POSITIONS_PER_LAYER = 3


def layer_positions(layer: int) -> list[int]:
    start = (layer - 1) * POSITIONS_PER_LAYER + 1
    return list(range(start, start + POSITIONS_PER_LAYER))


class Placement(BaseModel):
    """One inventory entry laid in one orientation at one position."""

    entry_index: int = Field(..., ge=0, description="Index into the configured inventory")
    pattern: int
    orientation: Orientation
    position: int = Field(..., ge=1)

    model_config = {
        "frozen": True,
    }

    def draw(self) -> str:
        return draw_stick(self.pattern, self.orientation)


class AssemblyLayout(BaseModel):
    """Decoded stack: which stick, if any, sits at each position."""

    layers: int = Field(..., ge=1)
    base_pattern: int
    placements: dict[int, Placement | None] = Field(
        default_factory=dict,
        description="Mapping from 1-based position to its placement, None for an empty position.",
    )

    @property
    def placed_count(self) -> int:
        return sum(1 for placement in self.placements.values() if placement is not None)

    @property
    def empty_positions(self) -> list[int]:
        return [position for position, placement in sorted(self.placements.items()) if placement is None]

    def layer(self, layer: int) -> list[Placement | None]:
        return [self.placements.get(position) for position in layer_positions(layer)]

    def pretty_print(self) -> str:
        """Render the stack top layer first, each stick drawn as it was laid."""
        lines = []
        lines.append(f"Stick assembly ({self.layers} layers, {self.placed_count} sticks placed)")
        lines.append("")

        for layer in range(self.layers, 0, -1):
            lines.append(f"Layer {layer}:")
            for position, placement in zip(layer_positions(layer), self.layer(layer), strict=True):
                if placement is None:
                    lines.append(f"  position {position}: empty")
                    continue
                lines.append(
                    f"  position {position}: stick {placement.pattern} "
                    f"(entry {placement.entry_index}, {placement.orientation.label})"
                )
                for row in placement.draw().splitlines():
                    lines.append(f"    {row}")
            lines.append("")

        lines.append(f"Base ({self.base_pattern}):")
        for row in draw_base(self.base_pattern).splitlines():
            lines.append(f"    {row}")

        return "\n".join(lines)
