"""
Relevant-service discovery for a composition task.

Starting from the task inputs, services are discovered layer by layer: a
service joins layer ``k`` once every one of its inputs is satisfied (through
taxonomy subsumption) by the task inputs or by outputs of services found in
layers ``< k``. The search is a monotonic fixpoint: the pool of remaining
services only shrinks and the set of available concepts only grows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from wscmoead.foundation.exceptions import InfeasibleCompositionError
from wscmoead.foundation.services import CompositionTask, Service
from wscmoead.foundation.taxonomy import TaxonomyGraph

_logger = logging.getLogger(__name__)


@dataclass
class ReachabilityResult:
    """Relevant services in discovery order plus the layer each one was found in, keyed by service."""

    relevant: list[Service]
    layers: dict[Service, int]
    num_layers: int
    frontier: frozenset[str] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.relevant)

    def services_in_layer(self, layer: int) -> list[Service]:
        return [service for service in self.relevant if self.layers[service] == layer]


def discover_services(
    services: Iterable[Service],
    search_set: set[str],
    taxonomy: TaxonomyGraph,
) -> list[Service]:
    """Services whose inputs are all satisfied by ``search_set``."""
    return [service for service in services if taxonomy.is_subsumed(service.inputs, search_set)]


class CompositionReachability:
    """Layered forward search pruning a catalog to the services a task can use."""

    def __init__(self, taxonomy: TaxonomyGraph) -> None:
        self.taxonomy = taxonomy

    def analyse(self, services: Iterable[Service], task: CompositionTask) -> ReachabilityResult:
        """
        Run the layered search.

        Raises
        ------
        InfeasibleCompositionError
            If the task outputs are not subsumed by the concepts reachable from
            the task inputs.
        """
        remaining = list(services)
        frontier: set[str] = set(task.inputs)
        relevant: list[Service] = []
        layers: dict[Service, int] = {}

        layer = 0
        found = discover_services(remaining, frontier, self.taxonomy)
        while found:
            found_ids = {id(service) for service in found}
            for service in found:
                service.layer = layer
                layers[service] = layer
                frontier.update(service.outputs)
            relevant.extend(found)
            remaining = [service for service in remaining if id(service) not in found_ids]
            _logger.debug("Layer %d: discovered %d services", layer, len(found))
            layer += 1
            found = discover_services(remaining, frontier, self.taxonomy)

        if not self.taxonomy.is_subsumed(task.outputs, frontier):
            missing = sorted(
                concept
                for concept in task.outputs
                if self.taxonomy.subsumed_concepts(concept).isdisjoint(frontier)
            )
            _logger.error("No feasible composition: unreachable outputs %s after %d layers", missing, layer)
            raise InfeasibleCompositionError(missing, layer)

        _logger.info("Found %d relevant services in %d layers", len(relevant), layer)
        return ReachabilityResult(relevant=relevant, layers=layers, num_layers=layer, frontier=frozenset(frontier))


def find_relevant_services(
    services: Iterable[Service],
    task: CompositionTask,
    taxonomy: TaxonomyGraph,
) -> ReachabilityResult:
    """Functional shortcut for ``CompositionReachability(taxonomy).analyse(services, task)``."""
    return CompositionReachability(taxonomy).analyse(services, task)


__all__ = ["CompositionReachability", "ReachabilityResult", "discover_services", "find_relevant_services"]
