from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from wscmoead.engine.algorithm.components.results import FrontRow, GenerationRow


@dataclass
class RunContext:
    """
    Static context of an optimisation run.
    Passed to on_start events.
    """

    config: Any
    algorithm: Any
    num_relevant: int = 0
    num_layers: int = 0
    engine_name: str = "numpy"


@runtime_checkable
class Observer(Protocol):
    """
    Observer interface reacting to the lifecycle of a run.
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once, after initialisation and before the first generation."""
        ...

    def on_generation(self, generation: int, rows: Sequence["GenerationRow"]) -> None:
        """Called once per generation with one row per population slot."""
        ...

    def on_end(self, front: Sequence["FrontRow"]) -> None:
        """Called once with the final Pareto front."""
        ...


class NullObserver:
    """No-op observer."""

    def on_start(self, ctx: RunContext) -> None:
        return None

    def on_generation(self, generation: int, rows: Sequence["GenerationRow"]) -> None:
        return None

    def on_end(self, front: Sequence["FrontRow"]) -> None:
        return None


__all__ = ["RunContext", "Observer", "NullObserver"]
