"""Tests for running several configurations at once."""

from config_models import AssemblyConfiguration
from parallel_assembler import run_parallel_assembly


def test_outcomes_in_input_order(example_configuration, solver_settings):
    malformed = AssemblyConfiguration.from_counts({1: 3, 64: 1}, layers=1, base_pattern=171, solver=solver_settings)
    infeasible = AssemblyConfiguration.from_counts({7: 1}, layers=1, base_pattern=0, solver=solver_settings)

    outcomes = run_parallel_assembly([example_configuration, malformed, infeasible], max_workers=2)

    assert [outcome.index for outcome in outcomes] == [0, 1, 2]
    assert outcomes[0].succeeded
    assert outcomes[0].result.objective_value == 6
    assert not outcomes[1].succeeded
    assert outcomes[1].error_type == "MalformedPatternError"
    assert outcomes[2].error_type == "InfeasibleAssemblyError"
