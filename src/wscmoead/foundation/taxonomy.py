"""
Concept taxonomy with subsumption queries.

The taxonomy is a multi-parent DAG of concepts. A concept *subsumes* itself
and every concept reachable through child edges; ``is_subsumed`` uses that
closure to decide whether a set of available concepts can feed a set of
required ones.

Services are indexed into the graph so representations can look up, for any
concept, which services produce it (propagated to every ancestor) and which
services consume it (propagated to every descendant).
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from .exceptions import UnknownConceptError
from .services import CompositionTask, Service

_logger = logging.getLogger(__name__)


class ConceptNode:
    """A concept with ordered parent/child links and backward service indices."""

    __slots__ = ("value", "parents", "children", "services_with_output", "services_with_input", "_subsumed")

    def __init__(self, value: str) -> None:
        self.value = value
        self.parents: list[ConceptNode] = []
        self.children: list[ConceptNode] = []
        self.services_with_output: dict[Service, None] = {}
        self.services_with_input: dict[Service, set[str]] = {}
        self._subsumed: frozenset[str] | None = None

    @property
    def subsumed_concepts(self) -> frozenset[str]:
        """This concept plus all of its descendants, computed on first access."""
        if self._subsumed is None:
            seen: set[str] = set()
            stack = [self]
            while stack:
                node = stack.pop()
                if node.value in seen:
                    continue
                seen.add(node.value)
                stack.extend(child for child in node.children if child.value not in seen)
            self._subsumed = frozenset(seen)
        return self._subsumed

    def __repr__(self) -> str:
        return f"ConceptNode({self.value!r})"


class TaxonomyGraph:
    """Concept DAG keyed by concept name."""

    def __init__(self) -> None:
        self._nodes: dict[str, ConceptNode] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]], roots: Iterable[str] = ()) -> "TaxonomyGraph":
        """Build a graph from ``(parent, child)`` pairs; ``roots`` adds isolated concepts."""
        graph = cls()
        for root in roots:
            graph.add_concept(root)
        for parent, child in edges:
            graph.add_edge(parent, child)
        return graph

    def add_concept(self, value: str) -> ConceptNode:
        node = self._nodes.get(value)
        if node is None:
            node = ConceptNode(value)
            self._nodes[value] = node
        return node

    def add_edge(self, parent: str, child: str) -> None:
        parent_node = self.add_concept(parent)
        child_node = self.add_concept(child)
        # parent and child links are kept in step, so the short parent list decides
        if parent_node in child_node.parents:
            return
        child_node.parents.append(parent_node)
        parent_node.children.append(child_node)
        self._invalidate_closures(parent_node)

    @staticmethod
    def _invalidate_closures(node: ConceptNode) -> None:
        """Drop the cached closures of ``node`` and its ancestors, the only ones a new child edge changes."""
        stack = [node]
        seen: set[str] = set()
        while stack:
            current = stack.pop()
            if current.value in seen:
                continue
            seen.add(current.value)
            current._subsumed = None
            stack.extend(current.parents)

    def node(self, value: str) -> ConceptNode:
        try:
            return self._nodes[value]
        except KeyError:
            raise UnknownConceptError(value) from None

    def __contains__(self, value: object) -> bool:
        return value in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def subsumed_concepts(self, value: str) -> frozenset[str]:
        return self.node(value).subsumed_concepts

    def is_subsumed(self, inputs: Iterable[str], search_set: set[str] | frozenset[str]) -> bool:
        """
        True when every concept in ``inputs`` has at least one subsumed concept in ``search_set``.

        This is an intersection test per input concept, not a subset test over
        the whole closure.
        """
        for concept in inputs:
            if self.node(concept).subsumed_concepts.isdisjoint(search_set):
                return False
        return True

    # ------------------------------------------------------------------
    # Instance resolution
    # ------------------------------------------------------------------

    def resolve_instances(self, instances: Iterable[str]) -> set[str]:
        """Map instance names to the concept of their first parent."""
        concepts: set[str] = set()
        for instance in instances:
            node = self.node(instance)
            if not node.parents:
                raise UnknownConceptError(instance)
            concepts.add(node.parents[0].value)
        return concepts

    def resolve_service(self, service: Service) -> None:
        service.inputs = self.resolve_instances(service.inputs)
        service.outputs = self.resolve_instances(service.outputs)

    def resolve_task(self, task: CompositionTask) -> CompositionTask:
        return CompositionTask.of(self.resolve_instances(task.inputs), self.resolve_instances(task.outputs))

    # ------------------------------------------------------------------
    # Service indexing
    # ------------------------------------------------------------------

    def index_service(self, service: Service) -> None:
        """Record ``service`` in the backward indices of the concepts it touches."""
        seen_output: set[str] = set()
        for output in service.outputs:
            start = self.node(output)
            service.taxonomy_outputs.append(start)
            queue = deque([start])
            while queue:
                current = queue.popleft()
                seen_output.add(current.value)
                current.services_with_output.setdefault(service, None)
                for parent in current.parents:
                    if parent.value not in seen_output:
                        queue.append(parent)
                        seen_output.add(parent.value)

        seen_input: set[str] = set()
        for input_value in service.inputs:
            queue = deque([self.node(input_value)])
            while queue:
                current = queue.popleft()
                seen_input.add(current.value)
                current.services_with_input.setdefault(service, set()).add(input_value)
                for child in current.children:
                    if child.value not in seen_input:
                        queue.append(child)
                        seen_input.add(child.value)

    def index_services(self, services: Iterable[Service]) -> None:
        count = 0
        for service in services:
            self.index_service(service)
            count += 1
        _logger.debug("Indexed %d services into a taxonomy of %d concepts", count, len(self._nodes))


__all__ = ["ConceptNode", "TaxonomyGraph"]
