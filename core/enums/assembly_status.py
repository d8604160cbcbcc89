from __future__ import annotations

from enum import Enum


class AssemblyStatus(str, Enum):
    """Terminal status of one solve.

    Infeasible and failed solves raise instead of returning a status.
    """

    OPTIMAL = "optimal"
    FEASIBLE = "feasible"
