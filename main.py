#!/usr/bin/env python3
"""
Stick assembly runner.

Assembles an inventory of grooved sticks on a base pattern, draws single
sticks, or lists the known stick types. With no arguments it solves the worked
example: sticks [1, 2, 7, 10, 13, 13] stacked in two layers on base 171.
"""

import argparse
import logging

from pydantic import ValidationError

from config_models import AssemblyConfiguration, SolverSettings
from core.canonical_forms import all_canonical_forms, is_terminal, orientation_orbit
from core.enums.orientation import ALL_ORIENTATIONS
from core.errors import AssemblyError
from core.notch_codec import popcount
from core.rendering import draw_base, draw_stick
from solvers.assembly_solver import run_assembly

EXAMPLE_INVENTORY = "1:1,2:1,7:1,10:1,13:2"
EXAMPLE_BASE = 171


def print_banner():
    """Print welcome banner."""
    print("=" * 60)
    print(" 🧩 STICK ASSEMBLY SOLVER")
    print("=" * 60)
    print()


def parse_inventory(text: str) -> dict[int, int]:
    """Parse ``"pattern:count,pattern:count"``; a bare pattern counts once."""
    counts: dict[int, int] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        pattern, _, count = item.partition(":")
        counts[int(pattern)] = counts.get(int(pattern), 0) + (int(count) if count else 1)
    return counts


def run_solve(args) -> bool:
    """Solve one configuration and print the layout."""
    try:
        configuration = AssemblyConfiguration.from_counts(
            parse_inventory(args.inventory),
            layers=args.layers,
            base_pattern=args.base,
            require_canonical=args.require_canonical,
            solver=SolverSettings(time_limit_s=args.time_limit, num_workers=args.workers),
        )
        configuration.validate_puzzle()
    except (ValidationError, ValueError) as e:
        print(f"❌ Invalid configuration: {e}")
        return False
    except AssemblyError as e:
        print(f"❌ {type(e).__name__}: {e}")
        return False

    print(f"Inventory: {[(e.pattern, e.count) for e in configuration.inventory]}")
    print(f"Layers: {configuration.layers}")
    print(f"Base pattern: {configuration.base_pattern}")
    print(draw_base(configuration.base_pattern))
    print()

    try:
        result = run_assembly(configuration)
    except AssemblyError as e:
        print(f"❌ {type(e).__name__}: {e}")
        return False

    print(f"Status: {result.status.value}")
    print(f"Sticks placed: {result.objective_value} of {configuration.positions}")
    print(f"Solve time: {result.solve_time:.3f}s")
    print()
    print(result.layout.pretty_print())
    return True


def run_draw(args) -> bool:
    """Draw one stick in all four orientations."""
    try:
        for orientation in ALL_ORIENTATIONS:
            print(f"{args.draw} ({orientation.label}):")
            print(draw_stick(args.draw, orientation))
            print()
    except AssemblyError as e:
        print(f"❌ {type(e).__name__}: {e}")
        return False
    return True


def run_catalog() -> bool:
    """List the canonical stick types."""
    print(f"{'stick':>5}  {'notches':>7}  {'terminal':>8}  encodings")
    print("─" * 50)
    for stick in sorted(all_canonical_forms()):
        encodings = ", ".join(str(r) for r in sorted(orientation_orbit(stick)))
        print(f"{stick:>5}  {popcount(stick):>7}  {'yes' if is_terminal(stick) else 'no':>8}  {encodings}")
    return True


def main():
    """Main runner function."""
    parser = argparse.ArgumentParser(description="Stick Assembly Solver Runner")
    parser.add_argument("--inventory", default=EXAMPLE_INVENTORY, help="Sticks as pattern:count pairs, comma separated")
    parser.add_argument("--layers", type=int, default=2, help="Number of layers to stack")
    parser.add_argument("--base", type=int, default=EXAMPLE_BASE, help="9-bit base pattern")
    parser.add_argument("--time-limit", type=float, default=10.0, help="Solver time limit in seconds")
    parser.add_argument("--workers", type=int, default=8, help="Solver search workers")
    parser.add_argument("--require-canonical", action="store_true", help="Only accept canonical stick encodings")
    parser.add_argument("--draw", type=int, help="Draw a single stick in all orientations and exit")
    parser.add_argument("--catalog", action="store_true", help="List all canonical stick types and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log model building and solving details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print_banner()

    if args.catalog:
        ok = run_catalog()
    elif args.draw is not None:
        ok = run_draw(args)
    else:
        ok = run_solve(args)

    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
