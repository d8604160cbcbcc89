"""
Solve an assembly model with CP-SAT and read the chosen placements back.

Status handling:
- OPTIMAL / FEASIBLE: the layout is decoded and returned
- INFEASIBLE: raised as InfeasibleAssemblyError, the configuration cannot be assembled
- MODEL_INVALID / UNKNOWN: raised as SolverError, never reported as infeasible
"""

from __future__ import annotations

import logging

from ortools.sat.python import cp_model
from pydantic import BaseModel, Field

from config_models import AssemblyConfiguration, SolverSettings
from core.enums.assembly_status import AssemblyStatus
from core.errors import InfeasibleAssemblyError, SolverError
from core.models.placement import AssemblyLayout, Placement
from solvers.assembly_modeler import AssemblyModelComponents, PlacementKey, build_assembly_model

logger = logging.getLogger(__name__)


class AssemblyResult(BaseModel):
    """Outcome of one successful solve."""

    status: AssemblyStatus
    objective_value: int = Field(..., ge=0, description="Number of sticks placed")
    best_bound: float | None = None
    solve_time: float = 0.0
    layout: AssemblyLayout

    @property
    def is_optimal(self) -> bool:
        return self.status == AssemblyStatus.OPTIMAL


def decode_assignment(assignment: dict[PlacementKey, int], configuration: AssemblyConfiguration) -> AssemblyLayout:
    """Turn a 0/1 value per placement variable into a layout.

    Args:
        assignment: Value of each ``(entry, position, orientation)`` variable
        configuration: The configuration the variables were built from

    Raises:
        SolverError: If a position holds more than one stick
    """
    chosen: dict[int, list[PlacementKey]] = {p: [] for p in range(1, configuration.positions + 1)}
    for key, value in assignment.items():
        if value:
            chosen[key[1]].append(key)

    placements: dict[int, Placement | None] = {}
    for position, keys in chosen.items():
        if len(keys) > 1:
            msg = f"Position {position} holds {len(keys)} sticks in the returned assignment"
            raise SolverError(msg)
        if not keys:
            placements[position] = None
            continue

        entry_index, _, orientation = keys[0]
        placements[position] = Placement(
            entry_index=entry_index,
            pattern=configuration.inventory[entry_index].pattern,
            orientation=orientation,
            position=position,
        )

    return AssemblyLayout(
        layers=configuration.layers, base_pattern=configuration.base_pattern, placements=placements
    )


def decode_solution(components: AssemblyModelComponents, solver: cp_model.CpSolver) -> AssemblyLayout:
    assignment = {key: solver.Value(var) for key, var in components.place.items()}
    return decode_assignment(assignment, components.configuration)


def solve_assembly_model(components: AssemblyModelComponents, settings: SolverSettings | None = None) -> AssemblyResult:
    """
    Solve a built assembly model.

    Args:
        components: Model components from build_assembly_model
        settings: Solver options, defaults to the configuration's own settings

    Returns:
        AssemblyResult: Status, number of sticks placed and the decoded layout

    Raises:
        InfeasibleAssemblyError: If no placement satisfies the interlock constraints
        SolverError: If the solver failed or found nothing within its limits
    """
    settings = settings or components.configuration.solver

    solver = cp_model.CpSolver()
    if settings.time_limit_s is not None:
        solver.parameters.max_time_in_seconds = settings.time_limit_s
    solver.parameters.num_search_workers = settings.num_workers
    solver.parameters.log_search_progress = settings.log_search_progress

    logger.info(
        "Solving assembly model with %d workers, time limit %s", settings.num_workers, settings.time_limit_s
    )
    status = solver.Solve(components.model)
    status_name = solver.StatusName(status)

    if status == cp_model.INFEASIBLE:
        msg = "No arrangement of the inventory meshes with the base and a smooth top"
        raise InfeasibleAssemblyError(msg)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        msg = f"Solver stopped without a solution. Status: {status_name}"
        raise SolverError(msg)

    layout = decode_solution(components, solver)
    result = AssemblyResult(
        status=AssemblyStatus.OPTIMAL if status == cp_model.OPTIMAL else AssemblyStatus.FEASIBLE,
        objective_value=round(solver.ObjectiveValue()),
        best_bound=solver.BestObjectiveBound(),
        solve_time=solver.WallTime(),
        layout=layout,
    )
    logger.info(
        "Status %s: %d of %d positions filled",
        status_name,
        result.objective_value,
        components.configuration.positions,
    )
    return result


def run_assembly(configuration: AssemblyConfiguration) -> AssemblyResult:
    """Validate, build and solve one configuration."""
    components = build_assembly_model(configuration)
    return solve_assembly_model(components)
