from __future__ import annotations

from enum import Enum

import numpy as np


class Orientation(int, Enum):
    """The four ways a stick can be laid into a position.

    The elements form the Klein four-group: every element is its own inverse and
    composing any two distinct non-identity elements yields the third.
    """

    IDENTITY = 0
    MIRROR_LEFT_RIGHT = 1
    MIRROR_TOP_BOTTOM = 2
    ROTATE_180 = 3

    @property
    def label(self) -> str:
        return ORIENTATION_LABELS[self]

    def compose(self, other: Orientation) -> Orientation:
        """Orientation equivalent to applying ``self`` and then ``other``."""
        # With the element values chosen above the group product is bitwise xor.
        return Orientation(self.value ^ other.value)


ALL_ORIENTATIONS: tuple[Orientation, ...] = (
    Orientation.IDENTITY,
    Orientation.MIRROR_LEFT_RIGHT,
    Orientation.MIRROR_TOP_BOTTOM,
    Orientation.ROTATE_180,
)

ORIENTATION_LABELS: dict[Orientation, str] = {
    Orientation.IDENTITY: "identity",
    Orientation.MIRROR_LEFT_RIGHT: "mirror-left-right",
    Orientation.MIRROR_TOP_BOTTOM: "mirror-top-bottom",
    Orientation.ROTATE_180: "rotate-180",
}

# REMAP_TABLE[o, s - 1] is the raw slot (1-based) read when slot s is looked at
# through orientation o.
REMAP_TABLE = np.array(
    [
        [1, 2, 3, 4, 5, 6],
        [3, 2, 1, 6, 5, 4],
        [4, 5, 6, 1, 2, 3],
        [6, 5, 4, 3, 2, 1],
    ],
    dtype=np.int8,
)
REMAP_TABLE.setflags(write=False)
