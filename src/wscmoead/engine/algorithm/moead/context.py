"""
Evolution context handed to individuals and variation operators.

Operators see the run through this object only: configuration, the shared
random generator, decomposition data, normalisation bounds and the relevant
part of the service catalog. Arrays are exposed read-only; the ideal point can
only move through :meth:`EvolutionContext.update_reference`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from wscmoead.engine.algorithm.components.normalisation import NormalisationBounds
from wscmoead.engine.algorithm.moead.helpers import DecompositionScalarizer
from wscmoead.engine.reachability import ReachabilityResult
from wscmoead.foundation.services import CompositionTask, Service, end_service, start_service
from wscmoead.foundation.taxonomy import TaxonomyGraph

if TYPE_CHECKING:
    from wscmoead.engine.config.moead import MOEADConfigData
    from wscmoead.foundation.types import Individual


def _read_only(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.flags.writeable = False
    return view


class EvolutionContext:
    def __init__(
        self,
        config: "MOEADConfigData",
        rng: np.random.Generator,
        scalarizer: DecompositionScalarizer,
        neighbors: np.ndarray,
        bounds: NormalisationBounds,
        taxonomy: TaxonomyGraph,
        task: CompositionTask,
        reachability: ReachabilityResult,
    ) -> None:
        self.config = config
        self.rng = rng
        self.scalarizer = scalarizer
        self._neighbors = neighbors
        self._bounds = bounds
        self.taxonomy = taxonomy
        self.task = task
        self.reachability = reachability
        self.start_service: Service = start_service(task)
        self.end_service: Service = end_service(task)

    @property
    def weights(self) -> np.ndarray:
        return _read_only(self.scalarizer.weights)

    @property
    def neighbors(self) -> np.ndarray:
        return _read_only(self._neighbors)

    @property
    def ideal_point(self) -> np.ndarray:
        return self.scalarizer.ideal.copy()

    @property
    def bounds(self) -> NormalisationBounds:
        return self._bounds

    @property
    def relevant(self) -> list[Service]:
        return self.reachability.relevant

    @property
    def layers(self) -> dict[Service, int]:
        return self.reachability.layers

    @property
    def num_layers(self) -> int:
        return self.reachability.num_layers

    @property
    def qos_weights(self) -> tuple[float, float, float, float]:
        return self.config.qos_weights

    def set_bounds(self, bounds: NormalisationBounds) -> None:
        """Replace the normalisation bounds (generation boundaries only)."""
        self._bounds = bounds

    def update_reference(self, individual: "Individual") -> None:
        self.scalarizer.update_reference(individual)

    def score(self, individual: "Individual", index: int) -> float:
        """Scalarized value of ``individual`` for subproblem ``index`` (lower is better)."""
        return self.scalarizer.score_individual(individual, index)


__all__ = ["EvolutionContext"]
