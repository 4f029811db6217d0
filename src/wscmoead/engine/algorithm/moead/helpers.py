# algorithm/moead/helpers.py
"""
Support functions for MOEA/D.

This module contains the scalarization functions (aggregation methods), the
decomposition scalarizer that tracks the ideal point, operator dispatch and the
representative assignment performed at the start of every generation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

import numpy as np

from wscmoead.foundation.exceptions import ConfigurationError

if TYPE_CHECKING:
    from wscmoead.foundation.types import Individual

TCHEBYCHEFF_ZERO_WEIGHT = 1e-5

CROSSOVER = "crossover"
MUTATION = "mutation"
LOCAL_SEARCH = "local_search"


# =============================================================================
# Aggregation / Scalarization Functions
# =============================================================================

def tchebycheff(fvals: np.ndarray, weights: np.ndarray, ideal: np.ndarray) -> np.ndarray:
    """Tchebycheff aggregation: max(w * |f - z*|), zero weights replaced by 1e-5.

    Parameters
    ----------
    fvals : np.ndarray
        Objective values, shape (N, n_obj) or (n_obj,).
    weights : np.ndarray
        Weight vectors, shape (N, n_obj) or (n_obj,).
    ideal : np.ndarray
        Ideal point (minimum objectives seen), shape (n_obj,).

    Returns
    -------
    np.ndarray
        Aggregated scalar values, shape (N,) or scalar.
    """
    diff = np.abs(fvals - ideal)
    scale = np.where(weights == 0, TCHEBYCHEFF_ZERO_WEIGHT, weights)
    return np.max(scale * diff, axis=-1)


def weighted_sum(fvals: np.ndarray, weights: np.ndarray, ideal: np.ndarray) -> np.ndarray:
    """Weighted sum aggregation: sum(w * f). The ideal point is not used."""
    return np.sum(weights * fvals, axis=-1)


AGGREGATORS: dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "tchebycheff": tchebycheff,
    "weighted_sum": weighted_sum,
}


def build_aggregator(name: str) -> Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]:
    """Return the aggregation function registered under ``name``.

    Raises
    ------
    ConfigurationError
        If the aggregation method is not supported.
    """
    method = name.lower()
    if method in {"tchebycheff", "tchebychef", "tschebyscheff"}:
        return tchebycheff
    if method in {"weighted_sum", "weightedsum"}:
        return weighted_sum
    raise ConfigurationError(
        f"Unsupported aggregation method '{name}'.",
        f"Available: {', '.join(AGGREGATORS)}",
    )


class DecompositionScalarizer:
    """
    Scores individuals against the weight vector of a subproblem.

    Lower scores are better. The ideal point starts at zero for every objective
    and only ever moves down through :meth:`update_reference`.
    """

    def __init__(self, weights: np.ndarray, aggregation: str = "tchebycheff") -> None:
        self.weights = np.asarray(weights, dtype=float)
        self.aggregation = aggregation
        self._aggregate = build_aggregator(aggregation)
        self.ideal = np.zeros(self.weights.shape[1], dtype=float)

    @property
    def n_obj(self) -> int:
        return int(self.weights.shape[1])

    def score(self, objectives: Sequence[float], index: int) -> float:
        fvals = np.asarray(objectives, dtype=float)
        return float(self._aggregate(fvals, self.weights[index], self.ideal))

    def score_individual(self, individual: "Individual", index: int) -> float:
        return self.score(individual.objective_values, index)

    def update_reference(self, individual: "Individual") -> None:
        """Lower each ideal component to the individual's value where it is smaller."""
        fvals = np.asarray(individual.objective_values, dtype=float)[: self.n_obj]
        np.minimum(self.ideal, fvals, out=self.ideal)


# =============================================================================
# Operator dispatch
# =============================================================================

def choose_operation(r: float, crossover_prob: float, mutation_prob: float, local_search_prob: float) -> str:
    """
    Map a uniform draw to an operator using cumulative thresholds.

    Probabilities may sum to slightly less than 1 after rounding; a draw above
    the last threshold goes to the last operator with a non-zero probability.
    """
    if crossover_prob != 0.0 and r <= crossover_prob:
        return CROSSOVER
    if mutation_prob != 0.0 and r <= crossover_prob + mutation_prob:
        return MUTATION
    if local_search_prob != 0.0 and r <= crossover_prob + mutation_prob + local_search_prob:
        return LOCAL_SEARCH
    for operation, prob in ((LOCAL_SEARCH, local_search_prob), (MUTATION, mutation_prob), (CROSSOVER, crossover_prob)):
        if prob != 0.0:
            return operation
    raise RuntimeError(f"Random value {r!r} does not map to any operator.")


# =============================================================================
# Representative assignment
# =============================================================================

def assign_representatives(population: list["Individual"]) -> None:
    """Reorder ``population`` in place: second objective ascending, first objective descending on ties."""
    size = len(population)
    for i in range(size - 1):
        for j in range(i + 1, size):
            fi = population[i].objective_values
            fj = population[j].objective_values
            if fj[1] < fi[1] or (fj[1] == fi[1] and fj[0] > fi[0]):
                population[i], population[j] = population[j], population[i]


__all__ = [
    "TCHEBYCHEFF_ZERO_WEIGHT",
    "CROSSOVER",
    "MUTATION",
    "LOCAL_SEARCH",
    "tchebycheff",
    "weighted_sum",
    "build_aggregator",
    "DecompositionScalarizer",
    "choose_operation",
    "assign_representatives",
]
