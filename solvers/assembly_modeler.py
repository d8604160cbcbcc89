"""
CP-SAT model of the interlocking-stick assembly.

One boolean ``place[entry, position, orientation]`` says that a stick of the
given inventory entry sits at the position, laid in the orientation. The model
then adds:

1. Symmetry pruning: redundant orientations of symmetric sticks are fixed to 0
2. Inventory: an entry is used at most ``count`` times
3. Position exclusivity: a position holds at most one stick
4. Interlock: at every touch point exactly one of the two faces has a notch,
   and the top face of the last layer is smooth

and maximizes the number of sticks placed.

Consecutive layers cross each other. Touch point ``(a, b)`` of an interface
joins groove ``a + 1`` on the bottom of upper position ``b`` with groove ``4 + b``
on the top of lower position ``a`` (or with base bit ``3 * b + a`` on the base).
"""

from __future__ import annotations

import logging
from collections import defaultdict

from ortools.sat.python import cp_model

from config_models import AssemblyConfiguration
from core.enums.orientation import ALL_ORIENTATIONS, Orientation
from core.errors import InfeasibleAssemblyError
from core.models.placement import POSITIONS_PER_LAYER
from core.notch_codec import BOTTOM_SLOTS, TOP_SLOTS, decode_base
from core.symmetry import notch_at, redundant_orientations

logger = logging.getLogger(__name__)

PlacementKey = tuple[int, int, Orientation]


class AssemblyModelComponents:
    """Container for the model and the variables needed to read a solution back."""

    def __init__(
        self,
        model: cp_model.CpModel,
        place: dict[PlacementKey, cp_model.IntVar],
        configuration: AssemblyConfiguration,
    ):
        self.model = model
        self.place = place
        self.configuration = configuration
        self.pruned: dict[int, frozenset[Orientation]] = {}
        self.interlock_constraints = 0

        self._by_position: dict[int, list[cp_model.IntVar]] = defaultdict(list)
        self._by_entry: dict[int, list[cp_model.IntVar]] = defaultdict(list)
        for (e, p, _o), var in place.items():
            self._by_position[p].append(var)
            self._by_entry[e].append(var)

    def variables_at(self, position: int) -> list[cp_model.IntVar]:
        return list(self._by_position.get(position, []))

    def variables_of(self, entry_index: int) -> list[cp_model.IntVar]:
        return list(self._by_entry.get(entry_index, []))


def position_of(layer: int, local: int) -> int:
    """1-based position of local slot ``local`` (0..2) in 1-based ``layer``."""
    return (layer - 1) * POSITIONS_PER_LAYER + local + 1


def add_placement_variables(model: cp_model.CpModel, configuration: AssemblyConfiguration) -> dict:
    place = {}
    for e in range(len(configuration.inventory)):
        for p in range(1, configuration.positions + 1):
            for o in ALL_ORIENTATIONS:
                place[(e, p, o)] = model.NewBoolVar(f"place[e={e},p={p},o={o.label}]")
    return place


def add_symmetry_pruning(components: AssemblyModelComponents) -> None:
    """Fix the variables of orientations that repeat another orientation's notch layout."""
    configuration = components.configuration
    for e, entry in enumerate(configuration.inventory):
        redundant = redundant_orientations(entry.pattern)
        components.pruned[e] = redundant
        if not redundant:
            continue
        logger.debug("Stick %d (entry %d): pruning %s", entry.pattern, e, sorted(o.label for o in redundant))
        for p in range(1, configuration.positions + 1):
            for o in redundant:
                components.model.Add(components.place[(e, p, o)] == 0)


def add_inventory_constraints(components: AssemblyModelComponents) -> None:
    for e, entry in enumerate(components.configuration.inventory):
        components.model.Add(sum(components.variables_of(e)) <= entry.count)


def add_position_constraints(components: AssemblyModelComponents) -> None:
    for p in range(1, components.configuration.positions + 1):
        components.model.Add(sum(components.variables_at(p)) <= 1)


def notch_terms(components: AssemblyModelComponents, position: int, slot: int) -> list[cp_model.IntVar]:
    """Variables that put a notch at ``slot`` of ``position``; their sum is 0 or 1."""
    terms = []
    for e, entry in enumerate(components.configuration.inventory):
        for o in ALL_ORIENTATIONS:
            if notch_at(entry.pattern, o, slot):
                terms.append(components.place[(e, position, o)])
    return terms


def _lower_face(components: AssemblyModelComponents, layer: int, base: tuple[int, ...], a: int, b: int):
    """Contribution of the face below touch point (a, b) as (variable terms, constant)."""
    if layer == 0:
        return [], base[POSITIONS_PER_LAYER * b + a]
    return notch_terms(components, position_of(layer, a), TOP_SLOTS[b]), 0


def _upper_face(components: AssemblyModelComponents, layer: int, a: int, b: int):
    """Contribution of the face above touch point (a, b); open air above the last layer."""
    if layer > components.configuration.layers:
        return [], 0
    return notch_terms(components, position_of(layer, b), BOTTOM_SLOTS[a]), 0


def add_interlock_constraints(components: AssemblyModelComponents) -> None:
    """Tie every interface from the base up to the open top.

    Interface ``i`` lies between layer ``i`` (the base when ``i == 0``) and layer
    ``i + 1`` (open air when ``i`` is the last layer). The notch sum over each of
    its 9 touch points must be 1, or 0 at the open top.

    Raises:
        InfeasibleAssemblyError: If a touch point has no variable term and its
            fixed contributions already violate the equality
    """
    configuration = components.configuration
    base = decode_base(configuration.base_pattern)

    for interface in range(configuration.layers + 1):
        lower, upper = interface, interface + 1
        target = 0 if upper > configuration.layers else 1

        for a in range(POSITIONS_PER_LAYER):
            for b in range(POSITIONS_PER_LAYER):
                lower_terms, lower_fixed = _lower_face(components, lower, base, a, b)
                upper_terms, upper_fixed = _upper_face(components, upper, a, b)
                terms = lower_terms + upper_terms
                fixed = lower_fixed + upper_fixed

                if not terms:
                    if fixed != target:
                        msg = (
                            f"Touch point ({a}, {b}) between layer {lower} and layer {upper} needs a notch "
                            f"but no stick in the inventory can provide one"
                        )
                        raise InfeasibleAssemblyError(msg)
                    continue

                components.model.Add(sum(terms) == target - fixed)
                components.interlock_constraints += 1


def build_assembly_model(configuration: AssemblyConfiguration) -> AssemblyModelComponents:
    """
    Validate a configuration and build its CP-SAT model.

    Args:
        configuration: Inventory, layer count and base pattern

    Returns:
        AssemblyModelComponents: The model and its placement variables

    Raises:
        MalformedPatternError: If a pattern does not fit its bit width
        UnknownStickTypeError: If a stick is not a known stick type
        InfeasibleAssemblyError: If an interlock equality is violated by constants alone
    """
    configuration.validate_puzzle()

    model = cp_model.CpModel()
    place = add_placement_variables(model, configuration)
    components = AssemblyModelComponents(model=model, place=place, configuration=configuration)

    add_symmetry_pruning(components)
    add_inventory_constraints(components)
    add_position_constraints(components)
    add_interlock_constraints(components)

    model.Maximize(sum(place.values()))

    logger.info(
        "Built assembly model: %d stick types, %d layers, %d variables, %d interlock constraints",
        len(configuration.inventory),
        configuration.layers,
        len(place),
        components.interlock_constraints,
    )
    return components
