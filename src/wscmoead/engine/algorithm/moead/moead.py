# algorithm/moead/moead.py
"""
MOEA/D evolutionary algorithm core.

This module contains the main MOEAD class with the generational loop.
- Setup logic: initialization.py
- Operator context: context.py
- State and results: state.py
- Helper functions: helpers.py

Every generation each subproblem breeds one offspring from its neighbourhood
(crossover, mutation or local search), then parents and offspring are merged
and truncated back to the population size by NSGA-II style environmental
selection.

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence

from wscmoead.engine.algorithm.components.results import iter_front_rows, iter_generation_rows
from wscmoead.engine.algorithm.components.selection import RandomNeighborSelection, TournamentNeighborSelection
from wscmoead.engine.algorithm.components.termination import GenerationStoppingCriteria
from wscmoead.engine.operators.registry import resolve_components
from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.kernel import resolve_kernel
from wscmoead.foundation.observer import RunContext

from .helpers import CROSSOVER, MUTATION, assign_representatives, choose_operation
from .initialization import finish_evaluating, initialize_moead_run
from .state import MOEADState, build_moead_result

if TYPE_CHECKING:
    from wscmoead.engine.config.moead import MOEADConfigData
    from wscmoead.foundation.kernel.backend import KernelBackend
    from wscmoead.foundation.observer import Observer
    from wscmoead.foundation.services import CompositionTask, Service
    from wscmoead.foundation.taxonomy import TaxonomyGraph
    from wscmoead.foundation.types import (
        CrossoverOperator,
        Individual,
        LocalSearchOperator,
        MutationOperator,
        StoppingCriteria,
    )

_logger = logging.getLogger(__name__)


class MOEAD:
    """
    Multi-Objective Evolutionary Algorithm based on Decomposition, applied to
    web service composition.

    Parameters
    ----------
    config : MOEADConfigData
        Immutable run configuration.
    individual : Individual
        Prototype whose ``generate`` creates the initial population.
    crossover, mutation, local_search : operator or None
        Variation operators; an operator may be omitted when its probability is 0.
    stopping : Callable[[], StoppingCriteria] | None
        Factory called at the start of every run; defaults to a generation
        limit of ``config.generations``.
    kernel : KernelBackend | None
        Ranking backend; defaults to ``resolve_kernel(config.engine)``.
    observers : Sequence[Observer]
        Notified at start, after every generation and at the end of a run.

    Examples
    --------
    >>> config = MOEADConfig().pop_size(100).n_obj(2).neighbor_size(10) \\
    ...     .probabilities(0.8, 0.1, 0.1).generations(50).individual("indirect") \\
    ...     .crossover("indirect").mutation("indirect").local_search("indirect").fixed()
    >>> result = MOEAD.from_config(config).run(taxonomy, services, task)
    >>> result["front"]
    """

    def __init__(
        self,
        config: "MOEADConfigData",
        *,
        individual: "Individual",
        crossover: "CrossoverOperator | None" = None,
        mutation: "MutationOperator | None" = None,
        local_search: "LocalSearchOperator | None" = None,
        stopping: "Callable[[], StoppingCriteria] | None" = None,
        kernel: "KernelBackend | None" = None,
        observers: Sequence["Observer"] = (),
    ) -> None:
        self.cfg = config
        self.individual = individual
        self.crossover = crossover
        self.mutation = mutation
        self.local_search = local_search
        self.stopping = stopping
        self.kernel = kernel or resolve_kernel(config.engine)
        self.observers = list(observers)
        self._st: MOEADState | None = None
        self._select: Callable[[int], int] | None = None

        for name, operator, prob in (
            ("crossover", crossover, config.crossover_prob),
            ("mutation", mutation, config.mutation_prob),
            ("local_search", local_search, config.local_search_prob),
        ):
            if operator is None and prob != 0.0:
                raise ConfigurationError(
                    f"No {name.replace('_', ' ')} operator given but its probability is {prob!r}.",
                    f"Pass {name}=... or set {name}_prob to 0",
                )

    @classmethod
    def from_config(
        cls,
        config: "MOEADConfigData",
        *,
        kernel: "KernelBackend | None" = None,
        observers: Sequence["Observer"] = (),
    ) -> "MOEAD":
        """Build an engine whose components are resolved by name through the registries."""
        components = resolve_components(config)
        return cls(
            config,
            individual=components.individual,
            crossover=components.crossover,
            mutation=components.mutation,
            local_search=components.local_search,
            stopping=components.stopping,
            kernel=kernel,
            observers=observers,
        )

    @property
    def state(self) -> MOEADState:
        if self._st is None:
            raise RuntimeError("MOEA/D state is not initialised; call run() first.")
        return self._st

    def run(
        self,
        taxonomy: "TaxonomyGraph",
        services: Iterable["Service"],
        task: "CompositionTask",
    ) -> dict[str, Any]:
        """
        Run MOEA/D on a composition task.

        Parameters
        ----------
        taxonomy : TaxonomyGraph
            Concept taxonomy with service and task concepts already resolved.
        services : Iterable[Service]
            Full service catalog; reachability analysis prunes it.
        task : CompositionTask
            Requested inputs and outputs.

        Returns
        -------
        dict[str, Any]
            See :func:`build_moead_result`.

        Raises
        ------
        ConfigurationError
            For invalid settings, before any individual is generated.
        InfeasibleCompositionError
            If the task outputs cannot be reached.
        """
        st = self._initialize_run(taxonomy, services, task)
        ctx = st.context
        config = self.cfg

        run_ctx = RunContext(
            config=config,
            algorithm=self,
            num_relevant=len(ctx.relevant),
            num_layers=ctx.num_layers,
            engine_name=config.engine,
        )
        for observer in self.observers:
            observer.on_start(run_ctx)

        _logger.info("Starting MOEA/D run (seed=%d, pop_size=%d)", config.seed, config.pop_size)
        while not st.stopping.is_met():
            start = time.perf_counter()
            self.step()
            evaluation_time = (time.perf_counter() - start) * 1000.0

            generation = st.generation
            breeding_time = st.initialisation_time if generation == 0 else 0.0
            st.breeding_times.append(breeding_time)
            st.evaluation_times.append(evaluation_time)
            rows = list(iter_generation_rows(st.population, generation, breeding_time, evaluation_time))
            for observer in self.observers:
                observer.on_generation(generation, rows)
            _logger.debug(
                "Generation %d: %d offspring, ideal=%s, %.1f ms",
                generation,
                len(st.offspring),
                ctx.ideal_point,
                evaluation_time,
            )
            st.generation = generation + 1

        result = build_moead_result(st)
        front_rows = list(iter_front_rows(result["front"]))
        for observer in self.observers:
            observer.on_end(front_rows)
        _logger.info(
            "MOEA/D finished after %d generations: %d individuals seen, %d on the front",
            st.generation,
            len(st.external),
            len(result["front"]),
        )
        return result

    def _initialize_run(
        self,
        taxonomy: "TaxonomyGraph",
        services: Iterable["Service"],
        task: "CompositionTask",
    ) -> MOEADState:
        """Initialize algorithm state for a run."""
        if self.stopping is not None:
            stopping = self.stopping()
        else:
            stopping = GenerationStoppingCriteria(self.cfg.generations)
        self._st = initialize_moead_run(self.cfg, self.kernel, self.individual, stopping, taxonomy, services, task)
        self._select = self._build_neighbor_selection(self._st)
        return self._st

    def _build_neighbor_selection(self, st: MOEADState) -> Callable[[int], int]:
        ctx = st.context
        if self.cfg.tournament_selection:
            return TournamentNeighborSelection(
                ctx.neighbors,
                self.cfg.tournament_size,
                lambda pop_idx, subproblem: ctx.score(st.population[pop_idx], subproblem),
                ctx.rng,
            )
        return RandomNeighborSelection(ctx.neighbors, ctx.rng)

    def step(self) -> None:
        """
        Run one generation: breed one offspring per subproblem, then merge and truncate.
        """
        st = self.state
        ctx = st.context

        st.offspring = []
        assign_representatives(st.population)

        for index in range(st.pop_size):
            child = self.evolve_new_individual(index)
            st.offspring.append(child)
            st.external.add(child)

        if self.cfg.dynamic_normalisation:
            finish_evaluating(list(st.population) + st.offspring, ctx)

        st.population = st.selector.select(st.population, st.offspring)

    def select_neighbor(self, index: int) -> int:
        """Population index of a neighbour of subproblem ``index``."""
        if self._select is None:
            raise RuntimeError("MOEA/D state is not initialised; call run() first.")
        return self._select(index)

    def evolve_new_individual(self, index: int) -> "Individual":
        """Produce the offspring of subproblem ``index`` from clones of its neighbours."""
        st = self.state
        ctx = st.context
        config = self.cfg

        r = float(ctx.rng.random())
        operation = choose_operation(r, config.crossover_prob, config.mutation_prob, config.local_search_prob)

        if operation == CROSSOVER:
            first = self.select_neighbor(index)
            second = self.select_neighbor(index)
            while second == first:
                second = self.select_neighbor(index)
            return self._require(self.crossover, operation).do_crossover(
                st.population[first].clone(), st.population[second].clone(), ctx
            )
        if operation == MUTATION:
            chosen = self.select_neighbor(index)
            return self._require(self.mutation, operation).mutate(st.population[chosen].clone(), ctx)
        chosen = self.select_neighbor(index)
        return self._require(self.local_search, operation).do_search(st.population[chosen].clone(), ctx, index)

    @staticmethod
    def _require(operator: Any, operation: str) -> Any:
        if operator is None:
            raise RuntimeError(f"No {operation.replace('_', ' ')} operator configured.")
        return operator


__all__ = ["MOEAD"]
