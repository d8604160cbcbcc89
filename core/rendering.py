"""Console drawings of sticks and base patterns."""

from __future__ import annotations

from core.enums.orientation import Orientation
from core.notch_codec import decode, decode_base
from core.symmetry import apply_orientation

TOP_NOTCH = "V"
TOP_FLAT = "‾"
BOTTOM_NOTCH = "Λ"
BOTTOM_FLAT = "_"


def _draw_top_notch(is_notch: int) -> str:
    return TOP_NOTCH if is_notch else TOP_FLAT


def _draw_bottom_notch(is_notch: int) -> str:
    return BOTTOM_NOTCH if is_notch else BOTTOM_FLAT


def draw_stick(representation: int, orientation: Orientation = Orientation.IDENTITY) -> str:
    """Two-line groove diagram of a stick as laid in ``orientation``.

    The top line shows slots 6 5 4 and the bottom line slots 3 2 1::

        ‾V‾‾‾V‾
        _Λ_Λ___
    """
    d = apply_orientation(decode(representation), orientation)
    top = "‾" + "‾".join(_draw_top_notch(d[slot - 1]) for slot in (6, 5, 4)) + "‾"
    bottom = "_" + "_".join(_draw_bottom_notch(d[slot - 1]) for slot in (3, 2, 1)) + "_"
    return f"{top}\n{bottom}"


def draw_base(representation: int) -> str:
    """3x3 grid of the base: a raised point (bit set) is drawn flat, an open one as a groove."""
    flags = decode_base(representation)
    rows = []
    for p in range(3):
        rows.append(" ".join(TOP_FLAT if flags[3 * p + g] else TOP_NOTCH for g in range(3)))
    return "\n".join(rows)
