"""Leaf building blocks: errors, registries, catalog types, taxonomy and kernels."""

from .exceptions import (
    CompositionError,
    ConfigurationError,
    InfeasibleCompositionError,
    InvalidOperatorError,
    NeighborhoodSizeError,
    OperatorProbabilityError,
    TournamentSizeError,
    UnknownConceptError,
    UnsupportedObjectivesError,
    WSCError,
)
from .services import CompositionTask, Service, build_catalog, end_service, start_service
from .taxonomy import ConceptNode, TaxonomyGraph
from .types import (
    CrossoverOperator,
    Individual,
    IndividualBase,
    LocalSearchOperator,
    MutationOperator,
    StoppingCriteria,
)

__all__ = [
    "WSCError",
    "ConfigurationError",
    "InvalidOperatorError",
    "OperatorProbabilityError",
    "TournamentSizeError",
    "UnsupportedObjectivesError",
    "NeighborhoodSizeError",
    "CompositionError",
    "InfeasibleCompositionError",
    "UnknownConceptError",
    "Service",
    "CompositionTask",
    "build_catalog",
    "start_service",
    "end_service",
    "ConceptNode",
    "TaxonomyGraph",
    "Individual",
    "IndividualBase",
    "CrossoverOperator",
    "MutationOperator",
    "LocalSearchOperator",
    "StoppingCriteria",
]
