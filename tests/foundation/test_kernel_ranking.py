from __future__ import annotations

import numpy as np
import pytest

from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.kernel import KERNELS, NumPyKernel, resolve_kernel
from wscmoead.foundation.kernel.numpy_backend import _compute_crowding, _dominance_matrix, _fast_non_dominated_sort


def test_pareto_dominance_is_antisymmetric():
    rng = np.random.default_rng(3)
    F = rng.integers(0, 4, size=(40, 2)).astype(float)
    dom = _dominance_matrix(F, "pareto")
    assert not np.any(dom & dom.T)
    assert not np.any(np.diag(dom))


def test_legacy_dominance_only_needs_one_better_objective():
    F = np.array([[0.1, 0.9], [0.9, 0.1]])
    legacy = _dominance_matrix(F, "legacy")
    assert legacy[0, 1] and legacy[1, 0]
    assert not _dominance_matrix(F, "pareto").any()


def test_unknown_dominance_mode():
    with pytest.raises(ValueError):
        _dominance_matrix(np.zeros((2, 2)), "weak")


def test_non_dominated_sort_partitions_pool():
    F = np.array(
        [
            [1.0, 1.0],
            [2.0, 2.0],
            [0.5, 3.0],
            [3.0, 3.0],
            [2.0, 2.0],
        ]
    )
    fronts, ranks = _fast_non_dominated_sort(F)
    assert fronts == [[0, 2], [1, 4], [3]]
    assert ranks.tolist() == [0, 1, 0, 2, 1]
    assert sorted(i for front in fronts for i in front) == list(range(len(F)))


def test_first_front_has_no_incoming_dominance():
    rng = np.random.default_rng(11)
    F = rng.random((30, 3))
    dom = _dominance_matrix(F)
    fronts, _ = _fast_non_dominated_sort(F)
    for i in fronts[0]:
        assert not dom[:, i].any()


def test_legacy_cycles_form_trailing_front():
    F = np.array([[0.1, 0.9], [0.9, 0.1]])
    fronts, ranks = _fast_non_dominated_sort(F, "legacy")
    assert fronts == [[0, 1]]
    assert ranks.tolist() == [0, 0]


def test_empty_pool():
    fronts, ranks = _fast_non_dominated_sort(np.empty((0, 2)))
    assert fronts == []
    assert ranks.size == 0


def test_crowding_boundaries_are_infinite_and_divisor_is_constant():
    F = np.array([[0.0, 1.0], [0.2, 0.6], [0.6, 0.2], [1.0, 0.0]])
    crowding = _compute_crowding(F, [[0, 1, 2, 3]])
    assert np.isinf(crowding[0]) and np.isinf(crowding[3])
    # (0.6 - 0.0) / 2 + (1.0 - 0.2) / 2
    assert crowding[1] == pytest.approx(0.7)
    # (1.0 - 0.2) / 2 + (0.6 - 0.0) / 2
    assert crowding[2] == pytest.approx(0.7)


def test_crowding_small_fronts():
    F = np.array([[0.0, 1.0], [1.0, 0.0], [0.5, 0.5]])
    crowding = _compute_crowding(F, [[0, 1], [2]])
    assert np.all(np.isinf(crowding))


def test_survival_order_rank_then_crowding():
    kernel = NumPyKernel()
    ranks = np.array([1, 0, 0, 0])
    crowding = np.array([np.inf, 0.3, np.inf, 0.3])
    assert kernel.survival_order(ranks, crowding).tolist() == [2, 1, 3, 0]


def test_nsga2_ranking_returns_all_parts():
    F = np.array([[1.0, 2.0], [2.0, 1.0], [3.0, 3.0]])
    fronts, ranks, crowding = NumPyKernel().nsga2_ranking(F)
    assert fronts == [[0, 1], [2]]
    assert ranks.tolist() == [0, 0, 1]
    assert np.all(np.isinf(crowding))


def test_resolve_kernel():
    assert isinstance(resolve_kernel("NumPy"), NumPyKernel)
    assert "numpy" in KERNELS
    with pytest.raises(ConfigurationError, match="Did you mean 'numpy'"):
        resolve_kernel("numpi")
