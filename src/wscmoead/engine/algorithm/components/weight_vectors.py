"""
Uniform weight vectors and their neighbourhood topology.

Weight vector ``i`` is permanently paired with population slot ``i``.
"""

from __future__ import annotations

import numpy as np

from wscmoead.foundation.exceptions import NeighborhoodSizeError, UnsupportedObjectivesError


def generate_weight_vectors(pop_size: int, n_obj: int) -> np.ndarray:
    """
    Generate ``pop_size`` uniformly spread weight vectors.

    For 2 objectives vector ``i`` is ``(i/(N-1), (N-1-i)/(N-1))``. For 3
    objectives every ``(i, j)`` with ``i + j < N`` is enumerated and the vector
    ``(i, j, N-i-j)/N`` is stored at index ``i``, so the last ``j`` wins.

    Raises
    ------
    UnsupportedObjectivesError
        For any objective count other than 2 or 3.
    """
    if n_obj not in (2, 3):
        raise UnsupportedObjectivesError(n_obj)
    if pop_size < 2:
        raise ValueError("Weight vector generation requires pop_size >= 2.")

    weights = np.zeros((pop_size, n_obj), dtype=float)
    for i in range(pop_size):
        if n_obj == 2:
            weights[i, 0] = i / float(pop_size - 1)
            weights[i, 1] = (pop_size - 1 - i) / float(pop_size - 1)
        else:
            for j in range(pop_size):
                if i + j < pop_size:
                    k = pop_size - i - j
                    weights[i] = (i / float(pop_size), j / float(pop_size), k / float(pop_size))
    return weights


def compute_neighbors(weights: np.ndarray, neighbor_size: int) -> np.ndarray:
    """Compute neighbourhood indices based on weight vector distances.

    Parameters
    ----------
    weights : np.ndarray
        Weight vectors, shape (pop_size, n_obj).
    neighbor_size : int
        Number of neighbours per subproblem (the vector itself excluded).

    Returns
    -------
    np.ndarray
        Neighbourhood indices, shape (pop_size, neighbor_size), each row sorted
        by ascending Euclidean distance with ties resolved to the lower index.
    """
    pop_size = weights.shape[0]
    if not 1 <= neighbor_size <= pop_size - 1:
        raise NeighborhoodSizeError(
            f"Cannot pick {neighbor_size} neighbours out of {pop_size - 1} other weight vectors.",
            neighbor_size,
            pop_size,
        )
    dist = np.linalg.norm(weights[:, None, :] - weights[None, :, :], axis=2)
    order = np.argsort(dist, axis=1, kind="stable")

    neighbors = np.empty((pop_size, neighbor_size), dtype=int)
    for i in range(pop_size):
        row = order[i]
        neighbors[i] = row[row != i][:neighbor_size]
    return neighbors


__all__ = ["generate_weight_vectors", "compute_neighbors"]
