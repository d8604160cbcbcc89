"""Registry of the distinct stick types, up to rotation and mirroring.

A stick can be laid in four orientations, so up to four encodings describe the
same physical stick. The lowest of them is its canonical representation, e.g.
29, 43, 46 and 53 are all stick 29.
"""

from __future__ import annotations

from collections import Counter
from functools import cache

from core.enums.orientation import ALL_ORIENTATIONS
from core.notch_codec import MAX_PATTERN, TOP_SLOTS, decode
from core.symmetry import oriented_encoding

# All the sticks that are possible. Sticks 0, 1, 2, 3, 5 and 7 are terminal.
CANONICAL_STICKS: tuple[int, ...] = (
    0, 1, 2, 3, 5, 7, 9, 10, 11, 12, 13, 14, 15, 18, 19, 21, 23, 27, 29, 30, 31, 45, 47, 63,
)  # fmt: skip


def orientation_orbit(representation: int) -> frozenset[int]:
    """Every encoding the stick can present."""
    return frozenset(oriented_encoding(representation, o) for o in ALL_ORIENTATIONS)


def canonicalize(representation: int) -> int:
    return min(orientation_orbit(representation))


@cache
def derive_canonical_forms() -> frozenset[int]:
    """Exhaustive search over every 6-bit pattern, deduplicated by canonical form."""
    return frozenset(canonicalize(r) for r in range(MAX_PATTERN + 1))


@cache
def all_canonical_forms() -> frozenset[int]:
    forms = frozenset(CANONICAL_STICKS)
    if forms != derive_canonical_forms():
        msg = "CANONICAL_STICKS is out of sync with the orientation table"
        raise RuntimeError(msg)
    return forms


def is_canonical(representation: int) -> bool:
    return canonicalize(representation) == representation


def is_terminal(representation: int) -> bool:
    """True when the stick can be turned to show a notch-free face upwards."""
    d = decode(representation)
    bottom_row = d[: TOP_SLOTS[0] - 1]
    top_row = d[TOP_SLOTS[0] - 1 :]
    return not any(bottom_row) or not any(top_row)


def catalog_inventory(entries) -> dict[int, int]:
    """Total number of sticks per canonical stick type.

    Args:
        entries: Iterable of objects with ``pattern`` and ``count`` attributes.
    """
    counts: Counter[int] = Counter()
    for entry in entries:
        counts[canonicalize(entry.pattern)] += entry.count
    return dict(sorted(counts.items()))
