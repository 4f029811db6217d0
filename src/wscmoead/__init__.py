"""
wscmoead: multi-objective web service composition with MOEA/D.

Decomposition-based evolution (MOEA/D) combined with NSGA-II style
non-dominated sorting and crowding distance for environmental selection.
"""

from .engine.algorithm.components import (
    ExternalPopulation,
    FrontRow,
    GenerationRecorder,
    GenerationRow,
    NormalisationBounds,
    iter_front_rows,
    iter_generation_rows,
    produce_pareto_front,
)
from .engine.algorithm.moead import MOEAD, EvolutionContext, build_moead_result
from .engine.config import MOEADConfig, MOEADConfigData, load_moead_config
from .engine.operators import (
    CROSSOVERS,
    INDIVIDUALS,
    LOCAL_SEARCHES,
    MUTATIONS,
    STOPPING_CRITERIA,
    resolve_components,
)
from .engine.reachability import CompositionReachability, ReachabilityResult, find_relevant_services
from .foundation import (
    CompositionError,
    CompositionTask,
    ConfigurationError,
    IndividualBase,
    InfeasibleCompositionError,
    Service,
    TaxonomyGraph,
    WSCError,
    build_catalog,
)
from .foundation.logging import configure_wscmoead_logging
from .foundation.observer import NullObserver, Observer, RunContext

__all__ = [
    "MOEAD",
    "EvolutionContext",
    "build_moead_result",
    "MOEADConfig",
    "MOEADConfigData",
    "load_moead_config",
    "INDIVIDUALS",
    "CROSSOVERS",
    "MUTATIONS",
    "LOCAL_SEARCHES",
    "STOPPING_CRITERIA",
    "resolve_components",
    "CompositionReachability",
    "ReachabilityResult",
    "find_relevant_services",
    "ExternalPopulation",
    "produce_pareto_front",
    "NormalisationBounds",
    "GenerationRow",
    "FrontRow",
    "GenerationRecorder",
    "iter_generation_rows",
    "iter_front_rows",
    "Service",
    "CompositionTask",
    "build_catalog",
    "TaxonomyGraph",
    "IndividualBase",
    "WSCError",
    "ConfigurationError",
    "CompositionError",
    "InfeasibleCompositionError",
    "configure_wscmoead_logging",
    "Observer",
    "NullObserver",
    "RunContext",
]
