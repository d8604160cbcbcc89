from __future__ import annotations

from pydantic import BaseModel, Field


class InventoryEntry(BaseModel):
    """A stick pattern together with how many such sticks are available.

    The pattern range is not a field constraint: it is checked by the puzzle
    validation so that it surfaces as ``MalformedPatternError``.
    """

    pattern: int
    count: int = Field(1, ge=0, description="Number of physical sticks with this pattern")

    model_config = {
        "frozen": True,
    }
