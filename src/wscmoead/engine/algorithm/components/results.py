"""
Row views over populations and fronts.

Rows are plain records; writing them anywhere is left to observers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

from wscmoead.foundation.observer import RunContext

if TYPE_CHECKING:
    from wscmoead.foundation.types import Individual


@dataclass(frozen=True)
class GenerationRow:
    generation: int
    index: int
    breeding_time: float
    evaluation_time: float
    objectives: tuple[float, ...]
    availability: float
    reliability: float
    time: float
    cost: float


@dataclass(frozen=True)
class FrontRow:
    objectives: tuple[float, ...]
    availability: float
    reliability: float
    time: float
    cost: float
    candidate: str


def iter_generation_rows(
    population: Sequence["Individual"],
    generation: int,
    breeding_time: float = 0.0,
    evaluation_time: float = 0.0,
) -> Iterator[GenerationRow]:
    """One row per population slot, in slot order. Times are in milliseconds."""
    for index, ind in enumerate(population):
        yield GenerationRow(
            generation=generation,
            index=index,
            breeding_time=breeding_time,
            evaluation_time=evaluation_time,
            objectives=tuple(float(v) for v in ind.objective_values),
            availability=float(ind.availability),
            reliability=float(ind.reliability),
            time=float(ind.time),
            cost=float(ind.cost),
        )


def iter_front_rows(front: Iterable["Individual"]) -> Iterator[FrontRow]:
    for ind in front:
        yield FrontRow(
            objectives=tuple(float(v) for v in ind.objective_values),
            availability=float(ind.availability),
            reliability=float(ind.reliability),
            time=float(ind.time),
            cost=float(ind.cost),
            candidate=str(ind),
        )


@dataclass
class GenerationRecorder:
    """Observer keeping every generation row and the final front in memory."""

    rows: list[GenerationRow] = field(default_factory=list)
    front: list[FrontRow] = field(default_factory=list)
    context: RunContext | None = None

    def on_start(self, ctx: RunContext) -> None:
        self.context = ctx
        self.rows.clear()
        self.front.clear()

    def on_generation(self, generation: int, rows: Sequence[GenerationRow]) -> None:
        self.rows.extend(rows)

    def on_end(self, front: Sequence[FrontRow]) -> None:
        self.front = list(front)

    def generations(self) -> list[int]:
        return sorted({row.generation for row in self.rows})


__all__ = ["GenerationRow", "FrontRow", "iter_generation_rows", "iter_front_rows", "GenerationRecorder"]
