from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from wscmoead.foundation.kernel import KernelBackend, NumPyKernel

if TYPE_CHECKING:
    from wscmoead.foundation.types import Individual

_logger = logging.getLogger(__name__)


# =============================================================================
# Neighbour (mating) selection
# =============================================================================


class RandomNeighborSelection:
    """Uniform draw of a neighbour slot, mapped to a population index."""

    def __init__(self, neighbors: np.ndarray, rng: np.random.Generator) -> None:
        self.neighbors = neighbors
        self.rng = rng

    def __call__(self, index: int) -> int:
        slot = int(self.rng.integers(self.neighbors.shape[1]))
        return int(self.neighbors[index, slot])


class TournamentNeighborSelection:
    """
    Tournament among distinct neighbour slots of a subproblem.

    score(population_index, subproblem_index) returns the scalarized value of a
    candidate for the subproblem; the lowest score wins and ties go to the
    lower neighbour slot.
    """

    def __init__(
        self,
        neighbors: np.ndarray,
        tournament_size: int,
        score: Callable[[int, int], float],
        rng: np.random.Generator,
    ) -> None:
        if tournament_size <= 0:
            raise ValueError("tournament_size must be positive.")
        if tournament_size > neighbors.shape[1]:
            raise ValueError("tournament_size cannot exceed the neighbourhood size.")
        self.neighbors = neighbors
        self.tournament_size = int(tournament_size)
        self.score = score
        self.rng = rng

    def __call__(self, index: int) -> int:
        n_slots = self.neighbors.shape[1]
        slots: set[int] = set()
        while len(slots) < self.tournament_size:
            slots.add(int(self.rng.integers(n_slots)))

        best_idx = -1
        best_score = np.inf
        for slot in sorted(slots):
            population_index = int(self.neighbors[index, slot])
            score = self.score(population_index, index)
            if best_idx < 0 or score < best_score:
                best_idx, best_score = population_index, score
        return best_idx


# =============================================================================
# Environmental selection
# =============================================================================


class ParetoSelector:
    """
    NSGA-II style environmental selection over parents plus offspring.

    Ranks and crowding distances are written onto the individuals here and
    nowhere else.
    """

    def __init__(self, pop_size: int, kernel: KernelBackend | None = None, dominance: str = "pareto") -> None:
        self.pop_size = int(pop_size)
        self.kernel = kernel or NumPyKernel()
        self.dominance = dominance

    @staticmethod
    def objective_matrix(pool: Sequence["Individual"]) -> np.ndarray:
        if not pool:
            return np.empty((0, 0), dtype=float)
        return np.vstack([np.asarray(ind.objective_values, dtype=float) for ind in pool])

    def rank(self, pool: Sequence["Individual"]) -> list[list["Individual"]]:
        """Sort ``pool`` into fronts, assigning rank and crowding distance to each member."""
        F = self.objective_matrix(pool)
        fronts, ranks, crowding = self.kernel.nsga2_ranking(F, self.dominance)
        for i, ind in enumerate(pool):
            ind.rank = int(ranks[i])
            ind.crowding_distance = float(crowding[i])
        return [[pool[i] for i in front] for front in fronts]

    def select(self, parents: Sequence["Individual"], offspring: Sequence["Individual"]) -> list["Individual"]:
        """Keep the best ``pop_size`` of parents + offspring by (rank asc, crowding desc)."""
        pool = list(parents) + list(offspring)
        if len(pool) < self.pop_size:
            raise ValueError(f"Cannot select {self.pop_size} individuals from a pool of {len(pool)}.")
        fronts = self.rank(pool)
        ranks = np.array([ind.rank for ind in pool], dtype=int)
        crowding = np.array([ind.crowding_distance for ind in pool], dtype=float)
        order = self.kernel.survival_order(ranks, crowding)[: self.pop_size]
        _logger.debug("Environmental selection: %d fronts over %d individuals", len(fronts), len(pool))
        return [pool[i] for i in order]


__all__ = ["RandomNeighborSelection", "TournamentNeighborSelection", "ParetoSelector"]
