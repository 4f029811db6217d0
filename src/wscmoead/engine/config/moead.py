"""MOEA/D configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Sequence, Tuple

from wscmoead.foundation.exceptions import ConfigurationError
from wscmoead.foundation.registry import suggest_names

from .base import _SerializableConfig, _require_fields


@dataclass(frozen=True)
class MOEADConfigData(_SerializableConfig):
    pop_size: int
    n_obj: int
    neighbor_size: int
    crossover_prob: float
    mutation_prob: float
    local_search_prob: float
    generations: int
    seed: int = 1
    aggregation: str = "tchebycheff"
    dynamic_normalisation: bool = False
    tournament_selection: bool = False
    tournament_size: int = 2
    num_local_search_tries: int = 30
    qos_weights: Tuple[float, float, float, float] = (0.25, 0.25, 0.25, 0.25)
    dominance: str = "pareto"
    engine: str = "numpy"
    individual: Optional[str] = None
    crossover: Optional[str] = None
    mutation: Optional[str] = None
    local_search: Optional[str] = None
    stopping: str = "generations"


CONFIG_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(MOEADConfigData))


class MOEADConfig:
    """
    Declarative configuration holder for MOEA/D settings.

    Examples:
        # Fluent builder
        cfg = MOEADConfig().pop_size(100).n_obj(2).neighbor_size(10).probabilities(0.8, 0.1, 0.1).generations(50).fixed()

        # Quick default configuration
        cfg = MOEADConfig.default()

        # From dictionary
        cfg = MOEADConfig.from_dict({"pop_size": 100, "neighbor_size": 20, ...})
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    @classmethod
    def default(
        cls,
        pop_size: int = 500,
        n_obj: int = 2,
        engine: str = "numpy",
    ) -> "MOEADConfigData":
        """Create a default MOEA/D configuration with sensible defaults."""
        return (
            cls()
            .pop_size(pop_size)
            .n_obj(n_obj)
            .neighbor_size(min(30, pop_size - 1))
            .probabilities(0.8, 0.1, 0.1)
            .generations(51)
            .seed(1)
            .aggregation("tchebycheff")
            .engine(engine)
            .fixed()
        )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "MOEADConfigData":
        """Create configuration from a dictionary keyed by field name."""
        unknown = [key for key in config if key not in CONFIG_FIELDS]
        if unknown:
            hints = {key: suggest_names(key, CONFIG_FIELDS) for key in unknown}
            suggestion = "; ".join(f"{key}: did you mean {', '.join(h)}?" for key, h in hints.items() if h) or None
            raise ConfigurationError(f"Unknown MOEA/D configuration keys: {', '.join(unknown)}", suggestion)

        builder = cls()
        for key, value in config.items():
            getattr(builder, key)(value)
        return builder.fixed()

    def pop_size(self, value: int) -> "MOEADConfig":
        self._cfg["pop_size"] = int(value)
        return self

    def n_obj(self, value: int) -> "MOEADConfig":
        self._cfg["n_obj"] = int(value)
        return self

    def neighbor_size(self, value: int) -> "MOEADConfig":
        self._cfg["neighbor_size"] = int(value)
        return self

    def crossover_prob(self, value: float) -> "MOEADConfig":
        self._cfg["crossover_prob"] = float(value)
        return self

    def mutation_prob(self, value: float) -> "MOEADConfig":
        self._cfg["mutation_prob"] = float(value)
        return self

    def local_search_prob(self, value: float) -> "MOEADConfig":
        self._cfg["local_search_prob"] = float(value)
        return self

    def probabilities(self, crossover: float, mutation: float, local_search: float) -> "MOEADConfig":
        return self.crossover_prob(crossover).mutation_prob(mutation).local_search_prob(local_search)

    def generations(self, value: int) -> "MOEADConfig":
        self._cfg["generations"] = int(value)
        return self

    def seed(self, value: int) -> "MOEADConfig":
        self._cfg["seed"] = int(value)
        return self

    def aggregation(self, method: str) -> "MOEADConfig":
        self._cfg["aggregation"] = str(method)
        return self

    def dynamic_normalisation(self, enabled: bool = True) -> "MOEADConfig":
        self._cfg["dynamic_normalisation"] = bool(enabled)
        return self

    def tournament_selection(self, enabled: bool = True) -> "MOEADConfig":
        self._cfg["tournament_selection"] = bool(enabled)
        return self

    def tournament_size(self, value: int) -> "MOEADConfig":
        self._cfg["tournament_size"] = int(value)
        return self

    def num_local_search_tries(self, value: int) -> "MOEADConfig":
        self._cfg["num_local_search_tries"] = int(value)
        return self

    def qos_weights(self, weights: Sequence[float]) -> "MOEADConfig":
        values = tuple(float(w) for w in weights)
        if len(values) != 4:
            raise ConfigurationError(f"qos_weights needs 4 values, got {len(values)}.")
        self._cfg["qos_weights"] = values
        return self

    def dominance(self, mode: str) -> "MOEADConfig":
        self._cfg["dominance"] = str(mode)
        return self

    def engine(self, value: str) -> "MOEADConfig":
        self._cfg["engine"] = value
        return self

    def individual(self, name: str | None) -> "MOEADConfig":
        self._cfg["individual"] = name
        return self

    def crossover(self, name: str | None) -> "MOEADConfig":
        self._cfg["crossover"] = name
        return self

    def mutation(self, name: str | None) -> "MOEADConfig":
        self._cfg["mutation"] = name
        return self

    def local_search(self, name: str | None) -> "MOEADConfig":
        self._cfg["local_search"] = name
        return self

    def stopping(self, name: str) -> "MOEADConfig":
        self._cfg["stopping"] = name
        return self

    def fixed(self) -> MOEADConfigData:
        _require_fields(
            self._cfg,
            (
                "pop_size",
                "n_obj",
                "neighbor_size",
                "crossover_prob",
                "mutation_prob",
                "local_search_prob",
                "generations",
            ),
            "MOEA/D",
        )
        return MOEADConfigData(**self._cfg)


__all__ = ["MOEADConfigData", "MOEADConfig", "CONFIG_FIELDS"]
