"""Core enums for the stick assembly domain."""

from .assembly_status import AssemblyStatus
from .orientation import ALL_ORIENTATIONS, Orientation

__all__ = [
    "ALL_ORIENTATIONS",
    "AssemblyStatus",
    "Orientation",
]
