"""
Registries for the pluggable pieces of a MOEA/D run.

Representations register their individual prototype and variation operators
here under a name; configurations refer to them by that name:

    from wscmoead.engine.operators.registry import CROSSOVERS, INDIVIDUALS

    @INDIVIDUALS.register("indirect")
    class IndirectIndividual(IndividualBase): ...

Individual and operator factories are called without arguments. Stopping
criteria factories receive the run configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from wscmoead.engine.algorithm.components.termination import GenerationStoppingCriteria
from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.registry import Registry
from wscmoead.foundation.types import (
    CrossoverOperator,
    Individual,
    LocalSearchOperator,
    MutationOperator,
    StoppingCriteria,
)

if TYPE_CHECKING:
    from wscmoead.engine.config.moead import MOEADConfigData

_logger = logging.getLogger(__name__)

INDIVIDUALS: Registry[Callable[[], Individual]] = Registry("individual type")
CROSSOVERS: Registry[Callable[[], CrossoverOperator]] = Registry("crossover operator")
MUTATIONS: Registry[Callable[[], MutationOperator]] = Registry("mutation operator")
LOCAL_SEARCHES: Registry[Callable[[], LocalSearchOperator]] = Registry("local search operator")
STOPPING_CRITERIA: Registry[Callable[[Any], StoppingCriteria]] = Registry("stopping criteria")


def _generation_limit(config: "MOEADConfigData") -> StoppingCriteria:
    return GenerationStoppingCriteria(config.generations)


STOPPING_CRITERIA.register("generations", _generation_limit)


@dataclass(frozen=True)
class Components:
    """Concrete collaborators resolved from a configuration."""

    individual: Individual
    crossover: CrossoverOperator | None
    mutation: MutationOperator | None
    local_search: LocalSearchOperator | None
    stopping: Callable[[], StoppingCriteria]


def _resolve_operator(registry: Registry, name: str | None, probability: float, field: str) -> Any:
    if name is None:
        if probability != 0.0:
            raise ConfigurationError(
                f"A {registry.name} is required when its probability is {probability!r}.",
                f"Set '{field}' to one of: {', '.join(registry.list()) or '(none registered)'}",
            )
        return None
    return registry.get(name)()


def resolve_components(config: "MOEADConfigData") -> Components:
    """
    Build every named component of ``config`` once.

    ``stopping`` is a factory: a stopping criterion counts its own calls, so
    each run needs a fresh one.

    Operators whose probability is 0 may be left unnamed. Unknown names raise
    ``InvalidOperatorError``.
    """
    if config.individual is None:
        raise ConfigurationError(
            "No individual type configured.",
            f"Set 'individual' to one of: {', '.join(INDIVIDUALS.list()) or '(none registered)'}",
        )
    components = Components(
        individual=INDIVIDUALS.get(config.individual)(),
        crossover=_resolve_operator(CROSSOVERS, config.crossover, config.crossover_prob, "crossover"),
        mutation=_resolve_operator(MUTATIONS, config.mutation, config.mutation_prob, "mutation"),
        local_search=_resolve_operator(LOCAL_SEARCHES, config.local_search, config.local_search_prob, "local_search"),
        stopping=partial(STOPPING_CRITERIA.get(config.stopping), config),
    )
    _logger.debug(
        "Resolved components: individual=%s crossover=%s mutation=%s local_search=%s stopping=%s",
        config.individual,
        config.crossover,
        config.mutation,
        config.local_search,
        config.stopping,
    )
    return components


__all__ = [
    "INDIVIDUALS",
    "CROSSOVERS",
    "MUTATIONS",
    "LOCAL_SEARCHES",
    "STOPPING_CRITERIA",
    "Components",
    "resolve_components",
]
