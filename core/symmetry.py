"""Orientation remapping and symmetry classification of stick patterns."""

from __future__ import annotations

import numpy as np

from core.enums.orientation import ALL_ORIENTATIONS, REMAP_TABLE, Orientation
from core.errors import MalformedPatternError
from core.notch_codec import MAX_PATTERN, NOTCH_SLOTS, decode, encode


def _build_notch_table() -> np.ndarray:
    """NOTCH_TABLE[r, o, s - 1] is the notch at slot s of stick r laid in orientation o."""
    raw = (np.arange(MAX_PATTERN + 1)[:, None] >> np.arange(NOTCH_SLOTS)[None, :]) & 1
    table = raw[:, REMAP_TABLE - 1].astype(np.int8)
    table.setflags(write=False)
    return table


NOTCH_TABLE = _build_notch_table()


def remap_index(orientation: Orientation, index: int) -> int:
    """Raw slot that shows up at ``index`` once the stick is laid in ``orientation``."""
    if not 1 <= index <= NOTCH_SLOTS:
        msg = f"Slot index must be in 1..{NOTCH_SLOTS}, got {index}"
        raise IndexError(msg)
    return int(REMAP_TABLE[orientation, index - 1])


def apply_orientation(pattern: tuple[int, ...], orientation: Orientation) -> tuple[int, ...]:
    """Notch flags of ``pattern`` as seen after laying it in ``orientation``."""
    pattern = tuple(pattern)
    if len(pattern) != NOTCH_SLOTS:
        msg = f"Expected {NOTCH_SLOTS} notch flags, got {len(pattern)}"
        raise MalformedPatternError(msg)
    return tuple(pattern[slot - 1] for slot in REMAP_TABLE[orientation])


def oriented_encoding(representation: int, orientation: Orientation) -> int:
    return encode(apply_orientation(decode(representation), orientation))


def notch_at(representation: int, orientation: Orientation, index: int) -> int:
    """Notch flag at slot ``index`` of stick ``representation`` laid in ``orientation``.

    Called for every coefficient of the interlock constraints, so this is a
    lookup into :data:`NOTCH_TABLE` rather than a re-orientation of the pattern.
    """
    if not 0 <= representation <= MAX_PATTERN:
        msg = f"The stick representation {representation} is not well formed (needs 0..{MAX_PATTERN})."
        raise MalformedPatternError(msg)
    if not 1 <= index <= NOTCH_SLOTS:
        msg = f"Slot index must be in 1..{NOTCH_SLOTS}, got {index}"
        raise IndexError(msg)
    return int(NOTCH_TABLE[representation, orientation, index - 1])


def is_left_right_symmetric(representation: int) -> bool:
    """Unchanged by mirror-left-right: slots 1 = 3 and 4 = 6."""
    d = decode(representation)
    return d[0] == d[2] and d[3] == d[5]


def is_top_bottom_symmetric(representation: int) -> bool:
    """Unchanged by mirror-top-bottom: both rows carry the same notches."""
    d = decode(representation)
    return d[0] == d[3] and d[1] == d[4] and d[2] == d[5]


def is_rotationally_symmetric(representation: int) -> bool:
    """Unchanged by rotate-180. Any two of the three symmetries imply the third."""
    d = decode(representation)
    return d[0] == d[5] and d[1] == d[4] and d[2] == d[3]


def redundant_orientations(representation: int) -> frozenset[Orientation]:
    """Orientations that reproduce a notch layout already offered by another one.

    The model builder forces the placement variables of these orientations to 0
    so a symmetric stick has a single variable per physically distinct layout.
    """
    left_right = is_left_right_symmetric(representation)
    top_bottom = is_top_bottom_symmetric(representation)

    if left_right and top_bottom:
        return frozenset(o for o in ALL_ORIENTATIONS if o != Orientation.IDENTITY)
    if left_right:
        # identity == mirror-left-right and mirror-top-bottom == rotate-180
        return frozenset({Orientation.MIRROR_LEFT_RIGHT, Orientation.ROTATE_180})
    if top_bottom or is_rotationally_symmetric(representation):
        # The pairs differ between the two cases but the surviving pair is the same.
        return frozenset({Orientation.MIRROR_TOP_BOTTOM, Orientation.ROTATE_180})
    return frozenset()


def distinct_orientations(representation: int) -> tuple[Orientation, ...]:
    redundant = redundant_orientations(representation)
    return tuple(o for o in ALL_ORIENTATIONS if o not in redundant)
