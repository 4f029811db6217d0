from __future__ import annotations

import numpy as np
import pytest

from stubs import StubIndividual
from wscmoead.engine.algorithm.moead.helpers import (
    CROSSOVER,
    LOCAL_SEARCH,
    MUTATION,
    DecompositionScalarizer,
    assign_representatives,
    build_aggregator,
    choose_operation,
    tchebycheff,
    weighted_sum,
)
from wscmoead.foundation.exceptions import ConfigurationError


class TestAggregation:
    def test_weighted_sum_ignores_ideal(self):
        f = np.array([0.2, 0.6])
        w = np.array([0.25, 0.75])
        assert weighted_sum(f, w, np.array([0.1, 0.1])) == pytest.approx(0.05 + 0.45)

    def test_tchebycheff_uses_distance_to_ideal(self):
        f = np.array([0.5, 0.4])
        w = np.array([0.5, 0.5])
        z = np.array([0.1, 0.2])
        assert tchebycheff(f, w, z) == pytest.approx(max(0.5 * 0.4, 0.5 * 0.2))

    def test_tchebycheff_zero_weight_becomes_small_constant(self):
        f = np.array([0.3, 0.0])
        w = np.array([0.0, 1.0])
        assert tchebycheff(f, w, np.zeros(2)) == pytest.approx(1e-5 * 0.3)

    def test_vectorised_over_rows(self):
        F = np.array([[0.2, 0.4], [0.6, 0.1]])
        W = np.array([[1.0, 0.0], [0.5, 0.5]])
        scores = tchebycheff(F, W, np.zeros(2))
        assert scores.shape == (2,)
        assert scores.tolist() == pytest.approx([0.2, 0.3])

    def test_build_aggregator(self):
        assert build_aggregator("Tchebycheff") is tchebycheff
        assert build_aggregator("weighted_sum") is weighted_sum
        with pytest.raises(ConfigurationError):
            build_aggregator("pbi")


class TestScalarizer:
    def test_ideal_starts_at_zero_and_only_decreases(self):
        weights = np.array([[1.0, 0.0], [0.0, 1.0]])
        scalarizer = DecompositionScalarizer(weights)
        assert scalarizer.ideal.tolist() == [0.0, 0.0]

        rng = np.random.default_rng(5)
        batch = [StubIndividual(rng.uniform(-1.0, 1.0, size=2)) for _ in range(20)]
        previous = scalarizer.ideal.copy()
        for ind in batch:
            scalarizer.update_reference(ind)
            assert np.all(scalarizer.ideal <= previous)
            previous = scalarizer.ideal.copy()

        batch_min = np.min([ind.objective_values for ind in batch], axis=0)
        assert np.all(scalarizer.ideal <= np.minimum(batch_min, 0.0) + 1e-12)

    def test_score_uses_subproblem_weights(self):
        weights = np.array([[1.0, 0.0], [0.5, 0.5]])
        scalarizer = DecompositionScalarizer(weights, aggregation="weighted_sum")
        ind = StubIndividual((0.2, 0.8))
        assert scalarizer.score_individual(ind, 0) == pytest.approx(0.2)
        assert scalarizer.score_individual(ind, 1) == pytest.approx(0.5)
        assert scalarizer.n_obj == 2

    def test_unknown_aggregation_is_fatal(self):
        with pytest.raises(ConfigurationError):
            DecompositionScalarizer(np.ones((2, 2)), aggregation="nope")


class TestChooseOperation:
    def test_cumulative_thresholds(self):
        assert choose_operation(0.5, 0.8, 0.1, 0.1) == CROSSOVER
        assert choose_operation(0.8, 0.8, 0.1, 0.1) == CROSSOVER
        assert choose_operation(0.85, 0.8, 0.1, 0.1) == MUTATION
        assert choose_operation(0.95, 0.8, 0.1, 0.1) == LOCAL_SEARCH

    def test_zero_probability_operator_is_skipped(self):
        assert choose_operation(0.0, 0.0, 1.0, 0.0) == MUTATION
        assert choose_operation(0.0, 0.0, 0.0, 1.0) == LOCAL_SEARCH

    def test_rounding_remainder_goes_to_last_enabled_operator(self):
        # passes validation: the sum is within 1e-9 of 1
        assert choose_operation(1.0 - 1e-12, 0.5, 0.5 - 1e-10, 0.0) == MUTATION
        assert choose_operation(1.0 - 1e-12, 0.7, 0.0, 0.3 - 1e-10) == LOCAL_SEARCH
        assert choose_operation(1.0 - 1e-12, 1.0 - 1e-10, 0.0, 0.0) == CROSSOVER

    def test_no_enabled_operator_raises(self):
        with pytest.raises(RuntimeError):
            choose_operation(0.5, 0.0, 0.0, 0.0)


def test_assign_representatives_orders_by_second_objective():
    population = [
        StubIndividual((0.1, 0.9), label="a"),
        StubIndividual((0.2, 0.3), label="b"),
        StubIndividual((0.5, 0.3), label="c"),
        StubIndividual((0.9, 0.1), label="d"),
    ]
    assign_representatives(population)
    # ties on the second objective put the larger first objective first
    assert [str(ind) for ind in population] == ["d", "c", "b", "a"]
