from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from wscmoead.foundation.types import Individual


class ExternalPopulation:
    """
    Every individual seen during a run (initial population and all offspring).

    Membership is by identity: two individuals with identical objectives are
    both kept. Insertion order is preserved.
    """

    def __init__(self) -> None:
        self._members: dict[int, "Individual"] = {}

    def add(self, individual: "Individual") -> None:
        self._members.setdefault(id(individual), individual)

    def extend(self, individuals: Iterable["Individual"]) -> None:
        for ind in individuals:
            self.add(ind)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator["Individual"]:
        return iter(list(self._members.values()))

    def pareto_front(self) -> list["Individual"]:
        return produce_pareto_front(self)


def produce_pareto_front(individuals: Iterable["Individual"]) -> list["Individual"]:
    """
    Non-dominated individuals, using each individual's own dominance check.

    A newcomer that dominates or is equivalent to a front member evicts it, so
    among equivalent individuals the last one seen is kept.
    """
    front: list["Individual"] = []
    for ind in individuals:
        survivors = []
        dominated = False
        for member in front:
            if ind.dominates(member) or ind.is_equivalent(member):
                continue
            if member.dominates(ind):
                dominated = True
            survivors.append(member)
        if not dominated:
            survivors.append(ind)
        front = survivors
    return front


__all__ = ["ExternalPopulation", "produce_pareto_front"]
