#!/usr/bin/env python3
"""
Parallel runner for independent stick assembly configurations.

Each configuration is validated, built and solved on its own worker thread.
CP-SAT releases the GIL while it searches, so threads are enough to keep
several solves busy at once. A failing configuration does not stop the others:
its error is recorded next to the configuration that caused it.
"""

from __future__ import annotations

import concurrent.futures
import logging
import time

from pydantic import BaseModel

from config_models import AssemblyConfiguration
from core.errors import AssemblyError
from solvers.assembly_solver import AssemblyResult, run_assembly

logger = logging.getLogger(__name__)


class ConfigurationOutcome(BaseModel):
    """Result or error of one configuration of a parallel run."""

    index: int
    configuration: AssemblyConfiguration
    result: AssemblyResult | None = None
    error: str | None = None
    error_type: str | None = None
    elapsed_s: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.result is not None


def _run_one(index: int, configuration: AssemblyConfiguration) -> ConfigurationOutcome:
    start = time.perf_counter()
    try:
        result = run_assembly(configuration)
    except AssemblyError as e:
        logger.warning("Configuration %d failed: %s: %s", index + 1, type(e).__name__, e)
        return ConfigurationOutcome(
            index=index,
            configuration=configuration,
            error=str(e),
            error_type=type(e).__name__,
            elapsed_s=time.perf_counter() - start,
        )

    logger.info("Configuration %d: %s, %d sticks placed", index + 1, result.status.value, result.objective_value)
    return ConfigurationOutcome(
        index=index, configuration=configuration, result=result, elapsed_s=time.perf_counter() - start
    )


def run_parallel_assembly(
    configurations: list[AssemblyConfiguration], max_workers: int = 4
) -> list[ConfigurationOutcome]:
    """
    Solve several configurations concurrently.

    Args:
        configurations: Independent puzzles to assemble
        max_workers: Number of configurations solved at the same time

    Returns:
        One outcome per configuration, in input order
    """
    logger.info("Running %d configurations on %d threads", len(configurations), max_workers)

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_run_one, i, configuration) for i, configuration in enumerate(configurations)]
        outcomes = [future.result() for future in futures]

    succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
    logger.info("Parallel run finished: %d of %d configurations solved", succeeded, len(outcomes))
    return outcomes
