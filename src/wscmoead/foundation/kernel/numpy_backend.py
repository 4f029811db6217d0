from __future__ import annotations

from typing import Iterable

import numpy as np

from .backend import KernelBackend

DOMINANCE_MODES = ("pareto", "legacy")


def _dominance_matrix(F: np.ndarray, dominance: str = "pareto") -> np.ndarray:
    """
    dom[i, j] is True when row i dominates row j.

    ``pareto``: no worse everywhere and strictly better somewhere.
    ``legacy``: strictly better somewhere (the historical check never marks a
    worse objective as disqualifying).
    """
    strictly_less = F[:, None, :] < F[None, :, :]
    better = np.any(strictly_less, axis=2)
    if dominance == "legacy":
        return better
    if dominance == "pareto":
        less_equal = F[:, None, :] <= F[None, :, :]
        return np.logical_and(np.all(less_equal, axis=2), better)
    raise ValueError(f"Unknown dominance mode '{dominance}'. Expected one of: {', '.join(DOMINANCE_MODES)}.")


def _fast_non_dominated_sort(F: np.ndarray, dominance: str = "pareto") -> tuple[list[list[int]], np.ndarray]:
    """
    Classic O(N^2) fast non-dominated sort.
    Returns:
      - fronts: list of index lists per front, each in discovery order
      - rank: array with the front index for each solution
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    if N == 0:
        return [], np.empty(0, dtype=int)

    dom = _dominance_matrix(F, dominance)
    # a's counter only grows for b when a does not dominate b and b dominates a
    dominated_count = np.sum(~dom & dom.T, axis=1).astype(np.int64)
    rank = np.full(N, -1, dtype=int)
    fronts: list[list[int]] = []

    current = [int(i) for i in np.flatnonzero(dominated_count == 0)]
    level = 0
    while current:
        fronts.append(current)
        rank[current] = level
        next_front: list[int] = []
        for a in current:
            for b in np.flatnonzero(dom[a]):
                dominated_count[b] -= 1
                if dominated_count[b] == 0:
                    next_front.append(int(b))
        level += 1
        current = next_front

    # only reachable with legacy dominance (mutual domination cycles)
    leftover = np.flatnonzero(rank < 0)
    if leftover.size:
        fronts.append(leftover.tolist())
        rank[leftover] = level

    return fronts, rank


def _compute_crowding(F: np.ndarray, fronts: list[list[int]]) -> np.ndarray:
    """
    Crowding distance, front by front.

    Each objective re-sorts the front as left by the previous objective (stable
    sort). Boundaries get +inf; interior points accumulate half the gap between
    their neighbours. The gap is divided by the constant 2.0 rather than by the
    objective's observed range.
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    crowding = np.zeros(N, dtype=float)
    if N == 0:
        return crowding
    n_obj = F.shape[1]

    for front in fronts:
        if len(front) == 0:
            continue
        order = np.asarray(front, dtype=int)
        for m in range(n_obj):
            order = order[np.argsort(F[order, m], kind="stable")]
            crowding[order[0]] = np.inf
            crowding[order[-1]] = np.inf
            if order.size > 2:
                sorted_vals = F[order, m]
                crowding[order[1:-1]] += (sorted_vals[2:] - sorted_vals[:-2]) / 2.0

    return crowding


class NumPyKernel(KernelBackend):
    """
    Backend with pure NumPy implementations of the ranking kernels.
    """

    def capabilities(self) -> Iterable[str]:
        return ("cpu",)

    def non_dominated_sort(self, F: np.ndarray, dominance: str = "pareto") -> tuple[list[list[int]], np.ndarray]:
        return _fast_non_dominated_sort(F, dominance)

    def crowding_distance(self, F: np.ndarray, fronts: list[list[int]]) -> np.ndarray:
        return _compute_crowding(F, fronts)


__all__ = ["NumPyKernel", "DOMINANCE_MODES"]
