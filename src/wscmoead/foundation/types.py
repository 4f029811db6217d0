"""
Capability interfaces consumed by the optimisation engine.

The engine never looks inside a candidate composition. It only needs the
operations below; concrete genome encodings, variation operators and QoS
aggregation are supplied by a representation package and registered by name
(see ``wscmoead.engine.operators.registry``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from wscmoead.engine.algorithm.moead.context import EvolutionContext


@runtime_checkable
class Individual(Protocol):
    """A candidate composition with normalised objectives and raw QoS."""

    rank: int
    crowding_distance: float

    @property
    def objective_values(self) -> np.ndarray: ...

    @objective_values.setter
    def objective_values(self, values: Sequence[float]) -> None: ...

    @property
    def availability(self) -> float: ...

    @property
    def reliability(self) -> float: ...

    @property
    def time(self) -> float: ...

    @property
    def cost(self) -> float: ...

    def generate(self, context: "EvolutionContext") -> "Individual":
        """Return a new random individual."""
        ...

    def clone(self) -> "Individual":
        """Return an independent deep copy."""
        ...

    def dominates(self, other: "Individual") -> bool: ...

    def is_equivalent(self, other: "Individual") -> bool: ...

    def finish_calculating_fitness(self, context: "EvolutionContext") -> None:
        """Normalise raw QoS into objectives using the context's bounds."""
        ...


class CrossoverOperator(Protocol):
    def do_crossover(self, parent_a: Individual, parent_b: Individual, context: "EvolutionContext") -> Individual: ...


class MutationOperator(Protocol):
    def mutate(self, parent: Individual, context: "EvolutionContext") -> Individual: ...


class LocalSearchOperator(Protocol):
    def do_search(self, parent: Individual, context: "EvolutionContext", index: int) -> Individual: ...


class StoppingCriteria(Protocol):
    def is_met(self) -> bool: ...


class IndividualBase:
    """
    Convenience base for representations.

    Provides rank/crowding storage and the per-individual dominance and
    equivalence checks over ``objective_values`` (minimisation).
    """

    rank: int = 0
    crowding_distance: float = 0.0

    def dominates(self, other: Individual) -> bool:
        """No worse in every objective and strictly better in at least one."""
        mine = np.asarray(self.objective_values, dtype=float)  # type: ignore[attr-defined]
        theirs = np.asarray(other.objective_values, dtype=float)
        return bool(np.all(mine <= theirs) and np.any(mine < theirs))

    def is_equivalent(self, other: Individual) -> bool:
        mine = np.asarray(self.objective_values, dtype=float)  # type: ignore[attr-defined]
        theirs = np.asarray(other.objective_values, dtype=float)
        return bool(np.array_equal(mine, theirs))


__all__ = [
    "Individual",
    "IndividualBase",
    "CrossoverOperator",
    "MutationOperator",
    "LocalSearchOperator",
    "StoppingCriteria",
]
