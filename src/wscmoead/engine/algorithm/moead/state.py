"""
MOEA/D State container and result building.

This module provides the MOEADState dataclass that holds all mutable state
of a run, and the function turning it into the result dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from wscmoead.engine.algorithm.components.archive import ExternalPopulation

if TYPE_CHECKING:
    from wscmoead.engine.algorithm.components.selection import ParetoSelector
    from wscmoead.foundation.types import Individual, StoppingCriteria

    from .context import EvolutionContext


@dataclass
class MOEADState:
    """
    Mutable state container for MOEA/D.

    Attributes
    ----------
    context : EvolutionContext
        Read access for operators plus the scalarizer and bounds.
    population : list[Individual]
        Current population; slot ``i`` belongs to weight vector ``i``.
    external : ExternalPopulation
        Every individual produced during the run.
    selector : ParetoSelector
        Environmental selection.
    stopping : StoppingCriteria
        Generation-boundary stopping criterion.
    generation : int
        Number of completed generations.
    breeding_times, evaluation_times : list[float]
        Per-generation timings in milliseconds. Breeding time is the
        initialisation time for generation 0 and 0 afterwards.
    initialisation_time : float
        Wall time of initialisation in milliseconds.
    """

    context: "EvolutionContext"
    population: list["Individual"]
    selector: "ParetoSelector"
    stopping: "StoppingCriteria"
    external: ExternalPopulation = field(default_factory=ExternalPopulation)
    offspring: list["Individual"] = field(default_factory=list)
    generation: int = 0
    initialisation_time: float = 0.0
    breeding_times: list[float] = field(default_factory=list)
    evaluation_times: list[float] = field(default_factory=list)

    @property
    def pop_size(self) -> int:
        return len(self.population)

    @property
    def rng(self) -> np.random.Generator:
        return self.context.rng

    def objective_matrix(self) -> np.ndarray:
        return np.vstack([np.asarray(ind.objective_values, dtype=float) for ind in self.population])


def build_moead_result(state: MOEADState) -> dict[str, Any]:
    """
    Build the result dictionary from MOEA/D state.

    Parameters
    ----------
    state : MOEADState
        Final algorithm state.

    Returns
    -------
    dict[str, Any]
        Result dictionary with the final population and its objectives, the
        Pareto front of the external population, decomposition data and run
        statistics.
    """
    ctx = state.context
    front = state.external.pareto_front()
    result: dict[str, Any] = {
        "population": list(state.population),
        "F": state.objective_matrix(),
        "front": front,
        "front_F": np.vstack([np.asarray(ind.objective_values, dtype=float) for ind in front])
        if front
        else np.empty((0, ctx.scalarizer.n_obj)),
        "weights": ctx.scalarizer.weights.copy(),
        "neighbors": ctx.neighbors.copy(),
        "ideal": ctx.ideal_point,
        "bounds": ctx.bounds,
        "generations": state.generation,
        "relevant": list(ctx.relevant),
        "num_layers": ctx.num_layers,
        "external_size": len(state.external),
        "breeding_time": list(state.breeding_times),
        "evaluation_time": list(state.evaluation_times),
    }
    return result


__all__ = [
    "MOEADState",
    "build_moead_result",
]
