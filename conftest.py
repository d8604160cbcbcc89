"""
Pytest configuration and fixtures for the stick assembly solver.
"""

import pytest

from config_models import AssemblyConfiguration, SolverSettings
from core.symmetry import notch_at


@pytest.fixture
def solver_settings():
    """Small deterministic solver settings for tests."""
    return SolverSettings(time_limit_s=30.0, num_workers=1)


@pytest.fixture
def example_configuration(solver_settings):
    """Sticks [1, 2, 7, 10, 13, 13] stacked in two layers on base 171."""
    return AssemblyConfiguration.from_counts(
        {1: 1, 2: 1, 7: 1, 10: 1, 13: 2}, layers=2, base_pattern=171, solver=solver_settings
    )


def touch_point_sums(layout):
    """Notch sum at every touch point of a layout, keyed by (interface, a, b).

    Computed straight from the placed sticks, independently of the model.
    """

    def stick_notch(position, slot):
        placement = layout.placements.get(position)
        if placement is None:
            return 0
        return notch_at(placement.pattern, placement.orientation, slot)

    base = [(layout.base_pattern >> bit) & 1 for bit in range(9)]
    sums = {}
    for interface in range(layout.layers + 1):
        for a in range(3):
            for b in range(3):
                if interface == 0:
                    lower = base[3 * b + a]
                else:
                    lower = stick_notch((interface - 1) * 3 + a + 1, 4 + b)
                if interface == layout.layers:
                    upper = 0
                else:
                    upper = stick_notch(interface * 3 + b + 1, a + 1)
                sums[(interface, a, b)] = lower + upper
    return sums


@pytest.fixture
def meshes():
    """Check that a layout interlocks everywhere and has a smooth top."""

    def check(layout):
        for (interface, _a, _b), total in touch_point_sums(layout).items():
            expected = 0 if interface == layout.layers else 1
            if total != expected:
                return False
        return True

    return check
