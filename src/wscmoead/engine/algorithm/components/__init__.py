# algorithm/components/__init__.py
"""
Shared algorithm components.

This package contains the building blocks used by the MOEA/D engine:
- archive: external population and final Pareto front
- normalisation: static and dynamic QoS normalisation bounds
- results: generation and front rows, in-memory recorder
- selection: neighbour selection and Pareto environmental selection
- termination: stopping criteria
- weight_vectors: weight vector generation and neighbourhoods
"""
from wscmoead.engine.algorithm.components.archive import ExternalPopulation, produce_pareto_front
from wscmoead.engine.algorithm.components.normalisation import (
    NormalisationBounds,
    dynamic_bounds,
    static_bounds,
)
from wscmoead.engine.algorithm.components.results import (
    FrontRow,
    GenerationRecorder,
    GenerationRow,
    iter_front_rows,
    iter_generation_rows,
)
from wscmoead.engine.algorithm.components.selection import (
    ParetoSelector,
    RandomNeighborSelection,
    TournamentNeighborSelection,
)
from wscmoead.engine.algorithm.components.termination import GenerationStoppingCriteria
from wscmoead.engine.algorithm.components.weight_vectors import compute_neighbors, generate_weight_vectors

__all__ = [
    "ExternalPopulation",
    "produce_pareto_front",
    "NormalisationBounds",
    "static_bounds",
    "dynamic_bounds",
    "GenerationRow",
    "FrontRow",
    "GenerationRecorder",
    "iter_generation_rows",
    "iter_front_rows",
    "RandomNeighborSelection",
    "TournamentNeighborSelection",
    "ParetoSelector",
    "GenerationStoppingCriteria",
    "generate_weight_vectors",
    "compute_neighbors",
]
