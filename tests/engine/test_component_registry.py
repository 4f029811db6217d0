from __future__ import annotations

import pytest

from stubs import FixedCrossover, RecordingLocalSearch, ShrinkMutation, StubIndividual
from wscmoead.engine.algorithm.components.results import GenerationRecorder
from wscmoead.engine.algorithm.components.termination import GenerationStoppingCriteria
from wscmoead.engine.algorithm.moead import MOEAD
from wscmoead.engine.config import MOEADConfig
from wscmoead.engine.operators.registry import (
    CROSSOVERS,
    INDIVIDUALS,
    LOCAL_SEARCHES,
    MUTATIONS,
    STOPPING_CRITERIA,
    resolve_components,
)
from wscmoead.foundation.exceptions import ConfigurationError, InvalidOperatorError


@pytest.fixture
def registered():
    INDIVIDUALS.register("stub", StubIndividual)
    CROSSOVERS.register("fixed", FixedCrossover)
    MUTATIONS.register("shrink", ShrinkMutation)
    LOCAL_SEARCHES.register("recording", RecordingLocalSearch)
    yield
    INDIVIDUALS.unregister("stub")
    CROSSOVERS.unregister("fixed")
    MUTATIONS.unregister("shrink")
    LOCAL_SEARCHES.unregister("recording")


def _builder() -> MOEADConfig:
    return (
        MOEADConfig()
        .pop_size(6)
        .n_obj(2)
        .neighbor_size(3)
        .probabilities(0.6, 0.2, 0.2)
        .generations(2)
        .individual("stub")
        .crossover("fixed")
        .mutation("shrink")
        .local_search("recording")
    )


def test_resolve_components(registered):
    components = resolve_components(_builder().fixed())
    assert isinstance(components.individual, StubIndividual)
    assert isinstance(components.crossover, FixedCrossover)
    assert isinstance(components.mutation, ShrinkMutation)
    assert isinstance(components.local_search, RecordingLocalSearch)
    stopping = components.stopping()
    assert isinstance(stopping, GenerationStoppingCriteria)
    assert stopping.limit == 2
    assert components.stopping() is not stopping


def test_unused_operator_may_be_unnamed(registered):
    config = _builder().probabilities(1.0, 0.0, 0.0).mutation(None).local_search(None).fixed()
    components = resolve_components(config)
    assert components.mutation is None
    assert components.local_search is None


def test_named_operator_required_when_probability_positive(registered):
    with pytest.raises(ConfigurationError, match="mutation operator"):
        resolve_components(_builder().mutation(None).fixed())


def test_individual_required(registered):
    with pytest.raises(ConfigurationError, match="individual"):
        resolve_components(_builder().individual(None).fixed())


def test_unknown_name_suggests_registered_one(registered):
    with pytest.raises(InvalidOperatorError, match="shrink"):
        resolve_components(_builder().mutation("shrnk").fixed())


def test_generation_stopping_is_registered():
    assert "generations" in STOPPING_CRITERIA


def test_from_config_runs(registered, catalog):
    recorder = GenerationRecorder()
    result = MOEAD.from_config(_builder().fixed(), observers=[recorder]).run(*catalog)
    assert result["generations"] == 2
    assert recorder.generations() == [0, 1]


def test_from_config_engine_can_run_twice(registered, catalog):
    engine = MOEAD.from_config(_builder().generations(3).fixed())
    first = engine.run(*catalog)
    second = engine.run(*catalog)
    assert first["generations"] == 3
    assert second["generations"] == 3


class TestGenerationStoppingCriteria:
    def test_counts_its_own_calls(self):
        stop = GenerationStoppingCriteria(2)
        assert [stop.is_met() for _ in range(4)] == [False, False, True, True]

    def test_zero_limit(self):
        assert GenerationStoppingCriteria(0).is_met()

    def test_negative_limit(self):
        with pytest.raises(ValueError):
            GenerationStoppingCriteria(-1)
