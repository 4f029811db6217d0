# algorithm/moead/initialization.py
"""
Setup and initialization helpers for MOEA/D.

This module validates the configuration, runs the reachability analysis and
builds the weight vectors, neighbourhoods, evolution context and initial
population of a run.
"""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from wscmoead.engine.algorithm.components.archive import ExternalPopulation
from wscmoead.engine.algorithm.components.normalisation import NormalisationBounds, dynamic_bounds, static_bounds
from wscmoead.engine.algorithm.components.selection import ParetoSelector
from wscmoead.engine.algorithm.components.weight_vectors import compute_neighbors, generate_weight_vectors
from wscmoead.engine.reachability import CompositionReachability
from wscmoead.foundation.exceptions import (
    ConfigurationError,
    NeighborhoodSizeError,
    OperatorProbabilityError,
    TournamentSizeError,
    UnsupportedObjectivesError,
)
from wscmoead.foundation.kernel import DOMINANCE_MODES

from .context import EvolutionContext
from .helpers import DecompositionScalarizer, build_aggregator
from .state import MOEADState

if TYPE_CHECKING:
    from wscmoead.engine.config.moead import MOEADConfigData
    from wscmoead.foundation.kernel.backend import KernelBackend
    from wscmoead.foundation.services import CompositionTask, Service
    from wscmoead.foundation.taxonomy import TaxonomyGraph
    from wscmoead.foundation.types import Individual, StoppingCriteria

_logger = logging.getLogger(__name__)

PROBABILITY_TOLERANCE = 1e-9


def validate_moead_config(config: "MOEADConfigData") -> None:
    """Raise the fatal configuration errors of a run before anything is built.

    Raises
    ------
    UnsupportedObjectivesError
        If ``n_obj`` is not 2 or 3.
    NeighborhoodSizeError
        If the neighbourhood does not fit the population, or crossover is
        enabled with fewer than 2 neighbours.
    OperatorProbabilityError
        If the operator probabilities are negative or do not add up to 1.
    TournamentSizeError
        If tournament selection cannot be drawn from the neighbourhood.
    ConfigurationError
        For any other invalid value.
    """
    if config.n_obj not in (2, 3):
        raise UnsupportedObjectivesError(config.n_obj)
    if config.pop_size < 2:
        raise ConfigurationError(f"MOEA/D requires pop_size >= 2 (got {config.pop_size}).")
    if config.generations < 0:
        raise ConfigurationError(f"generations must be non-negative (got {config.generations}).")
    if not 1 <= config.neighbor_size <= config.pop_size - 1:
        raise NeighborhoodSizeError(
            f"neighbor_size ({config.neighbor_size}) must lie in [1, {config.pop_size - 1}] for pop_size {config.pop_size}.",
            config.neighbor_size,
            config.pop_size,
        )

    probs = (config.crossover_prob, config.mutation_prob, config.local_search_prob)
    if min(probs) < 0.0 or abs(sum(probs) - 1.0) > PROBABILITY_TOLERANCE:
        raise OperatorProbabilityError(*probs)

    if config.tournament_selection:
        if config.tournament_size < 1:
            raise TournamentSizeError(
                config.tournament_size,
                config.neighbor_size,
                f"The tournament size must be at least 1 (got {config.tournament_size}).",
            )
        if config.tournament_size > config.neighbor_size:
            raise TournamentSizeError(config.tournament_size, config.neighbor_size)

    if config.crossover_prob != 0.0:
        if config.neighbor_size < 2:
            raise NeighborhoodSizeError(
                "Crossover needs at least 2 neighbours to pick two distinct parents.",
                config.neighbor_size,
                config.pop_size,
            )
        if config.tournament_selection and config.tournament_size == config.neighbor_size:
            raise TournamentSizeError(
                config.tournament_size,
                config.neighbor_size,
                "A tournament covering the whole neighbourhood always returns the same parent, "
                "so crossover could never draw two distinct parents.",
            )

    build_aggregator(config.aggregation)
    if config.dominance not in DOMINANCE_MODES:
        raise ConfigurationError(
            f"Unknown dominance mode '{config.dominance}'.",
            f"Available: {', '.join(DOMINANCE_MODES)}",
        )
    if len(config.qos_weights) != 4:
        raise ConfigurationError(f"qos_weights needs 4 values, got {len(config.qos_weights)}.")


def finish_evaluating(individuals: Sequence["Individual"], context: EvolutionContext) -> NormalisationBounds:
    """Recompute dynamic bounds over ``individuals`` and finalise each one's objectives."""
    bounds = dynamic_bounds(individuals)
    context.set_bounds(bounds)
    for ind in individuals:
        ind.finish_calculating_fitness(context)
    return bounds


def initialize_moead_run(
    config: "MOEADConfigData",
    kernel: "KernelBackend",
    prototype: "Individual",
    stopping: "StoppingCriteria",
    taxonomy: "TaxonomyGraph",
    services: Iterable["Service"],
    task: "CompositionTask",
) -> MOEADState:
    """Initialize all components for a MOEA/D run.

    Parameters
    ----------
    config : MOEADConfigData
        Validated here before anything else happens.
    kernel : KernelBackend
        Backend for non-dominated sorting and crowding distance.
    prototype : Individual
        Individual used to generate the initial population.
    stopping : StoppingCriteria
        Stopping criterion of the run.
    taxonomy : TaxonomyGraph
        Concept taxonomy; service and task concepts must already be resolved.
    services : Iterable[Service]
        Full service catalog.
    task : CompositionTask
        Requested inputs and outputs.

    Returns
    -------
    MOEADState
        State holding the initial population, recorded in the external
        population.
    """
    start = time.perf_counter()
    validate_moead_config(config)

    reachability = CompositionReachability(taxonomy).analyse(services, task)
    if config.dynamic_normalisation:
        bounds = NormalisationBounds()
    else:
        bounds = static_bounds(reachability.relevant)

    rng = np.random.default_rng(config.seed)

    weights = generate_weight_vectors(config.pop_size, config.n_obj)
    neighbors = compute_neighbors(weights, config.neighbor_size)
    scalarizer = DecompositionScalarizer(weights, config.aggregation)

    context = EvolutionContext(
        config=config,
        rng=rng,
        scalarizer=scalarizer,
        neighbors=neighbors,
        bounds=bounds,
        taxonomy=taxonomy,
        task=task,
        reachability=reachability,
    )

    population = [prototype.generate(context) for _ in range(config.pop_size)]
    if config.dynamic_normalisation:
        finish_evaluating(population, context)

    external = ExternalPopulation()
    external.extend(population)

    state = MOEADState(
        context=context,
        population=population,
        selector=ParetoSelector(config.pop_size, kernel=kernel, dominance=config.dominance),
        stopping=stopping,
        external=external,
    )
    state.initialisation_time = (time.perf_counter() - start) * 1000.0
    _logger.info(
        "Initialised MOEA/D: pop_size=%d n_obj=%d neighbors=%d relevant=%d layers=%d",
        config.pop_size,
        config.n_obj,
        config.neighbor_size,
        len(reachability),
        reachability.num_layers,
    )
    return state


__all__ = ["PROBABILITY_TOLERANCE", "validate_moead_config", "finish_evaluating", "initialize_moead_run"]
