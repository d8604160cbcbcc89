"""Conversion between integer stick encodings and notch flag sequences.

Each stick has up to 6 grooves, 3 on each side, numbered as::

     6 5 4
    ‾V‾‾‾V‾
    _Λ_Λ___
     3 2 1

Slot ``k`` is bit ``k - 1`` of the encoding, so the stick above is
``0b101110 = 46``. Slots 1-3 face the layer below, slots 4-6 the layer above.
"""

from __future__ import annotations

from core.errors import MalformedPatternError

NOTCH_SLOTS = 6
BOTTOM_SLOTS: tuple[int, ...] = (1, 2, 3)
TOP_SLOTS: tuple[int, ...] = (4, 5, 6)
MAX_PATTERN = (1 << NOTCH_SLOTS) - 1

BASE_POINTS = 9
MAX_BASE_PATTERN = (1 << BASE_POINTS) - 1


def _expand(representation: int, width: int, kind: str) -> tuple[int, ...]:
    if not isinstance(representation, int) or isinstance(representation, bool):
        msg = f"The {kind} representation {representation!r} is not an integer."
        raise MalformedPatternError(msg)
    if representation < 0 or representation >> width:
        msg = f"The {kind} representation {representation} is not well formed (needs 0..{(1 << width) - 1})."
        raise MalformedPatternError(msg)
    return tuple((representation >> bit) & 1 for bit in range(width))


def _collapse(flags, width: int, kind: str) -> int:
    flags = tuple(flags)
    if len(flags) != width or any(flag not in (0, 1) for flag in flags):
        msg = f"Expected {width} binary flags for a {kind}, got {flags!r}"
        raise MalformedPatternError(msg)
    return sum(flag << bit for bit, flag in enumerate(flags))


def decode(representation: int) -> tuple[int, ...]:
    """Expand a stick encoding into its 6 notch flags, slot 1 first."""
    return _expand(representation, NOTCH_SLOTS, "stick")


def encode(pattern) -> int:
    """Inverse of :func:`decode`."""
    return _collapse(pattern, NOTCH_SLOTS, "stick")


def popcount(representation: int) -> int:
    """Number of notches on a stick."""
    return sum(decode(representation))


def decode_base(representation: int) -> tuple[int, ...]:
    """Expand a 9-bit base pattern into its touch-point flags, bit 0 first.

    Flag ``3 * p + g`` sits under groove ``g + 1`` of first-layer position ``p + 1``.
    """
    return _expand(representation, BASE_POINTS, "base")


def encode_base(flags) -> int:
    return _collapse(flags, BASE_POINTS, "base")
