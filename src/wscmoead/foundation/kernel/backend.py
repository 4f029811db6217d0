from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np


class KernelBackend(ABC):
    """
    Interface for the numeric kernels behind Pareto ranking.
    Backends work on objective matrices of shape (n_individuals, n_obj).
    """

    def device(self) -> str:
        """Short label describing the primary execution device."""
        return "cpu"

    def capabilities(self) -> Iterable[str]:
        return ()

    # -------- Ranking kernels --------

    @abstractmethod
    def non_dominated_sort(self, F: np.ndarray, dominance: str = "pareto") -> tuple[list[list[int]], np.ndarray]:
        """
        Return (fronts, ranks): index lists per front in discovery order and
        the front index of every row of F.
        """

    @abstractmethod
    def crowding_distance(self, F: np.ndarray, fronts: list[list[int]]) -> np.ndarray:
        """Return the crowding distance of every row of F, computed front by front."""

    def nsga2_ranking(self, F: np.ndarray, dominance: str = "pareto") -> tuple[list[list[int]], np.ndarray, np.ndarray]:
        fronts, ranks = self.non_dominated_sort(F, dominance)
        crowding = self.crowding_distance(F, fronts)
        return fronts, ranks, crowding

    def survival_order(self, ranks: np.ndarray, crowding: np.ndarray) -> np.ndarray:
        """Stable ordering by ascending rank, then descending crowding distance."""
        ranks = np.asarray(ranks)
        crowding = np.asarray(crowding, dtype=float)
        if ranks.size == 0:
            return np.empty(0, dtype=int)
        return np.lexsort((-crowding, ranks))


__all__ = ["KernelBackend"]
