"""Error kinds raised while validating, building and solving an assembly.

None of these derive from ``ValueError``: pydantic would otherwise wrap them in
a ``ValidationError`` when raised from a validator.
"""

from __future__ import annotations


class AssemblyError(Exception):
    """Base class for all errors of one build-and-solve attempt."""


class MalformedPatternError(AssemblyError):
    """A stick or base pattern integer uses more bits than it may."""


class UnknownStickTypeError(AssemblyError):
    """An inventory entry is not one of the known canonical stick types."""


class InfeasibleAssemblyError(AssemblyError):
    """The interlock equalities cannot be satisfied by any placement."""


class SolverError(AssemblyError):
    """The optimizer stopped abnormally or returned no usable assignment."""
