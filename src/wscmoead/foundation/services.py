"""
Service catalog records and the composition task.

Services arrive already parsed; this module only gives them a shape. QoS
vectors are stored in a fixed index order (see the ``AVAILABILITY`` ...
``COST`` constants) so representations can index them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

AVAILABILITY = 0
RELIABILITY = 1
TIME = 2
COST = 3

QOS_FIELDS: tuple[str, ...] = ("availability", "reliability", "time", "cost")


@dataclass(eq=False)
class Service:
    """
    A catalog entry: raw QoS values plus input/output concept sets.

    Instances compare by identity so that sets of services behave like the
    catalog itself (two services with identical attributes remain distinct).
    ``layer`` is -1 until reachability analysis discovers the service.
    """

    name: str
    qos: tuple[float, float, float, float]
    inputs: set[str] = field(default_factory=set)
    outputs: set[str] = field(default_factory=set)
    taxonomy_outputs: list = field(default_factory=list)
    layer: int = -1

    def __post_init__(self) -> None:
        if len(self.qos) != 4:
            raise ValueError(f"Service '{self.name}' needs 4 QoS values, got {len(self.qos)}.")
        self.qos = tuple(float(v) for v in self.qos)  # type: ignore[assignment]
        self.inputs = set(self.inputs)
        self.outputs = set(self.outputs)

    @classmethod
    def from_record(
        cls,
        name: str,
        *,
        time: float,
        cost: float,
        availability: float,
        reliability: float,
        inputs: Iterable[str] = (),
        outputs: Iterable[str] = (),
    ) -> "Service":
        qos = [0.0] * 4
        qos[TIME] = time
        qos[COST] = cost
        qos[AVAILABILITY] = availability
        qos[RELIABILITY] = reliability
        return cls(name, tuple(qos), set(inputs), set(outputs))  # type: ignore[arg-type]

    @property
    def availability(self) -> float:
        return self.qos[AVAILABILITY]

    @property
    def reliability(self) -> float:
        return self.qos[RELIABILITY]

    @property
    def time(self) -> float:
        return self.qos[TIME]

    @property
    def cost(self) -> float:
        return self.qos[COST]

    def __repr__(self) -> str:
        return f"Service({self.name!r}, layer={self.layer})"


@dataclass(frozen=True)
class CompositionTask:
    """Requested transformation: provided input concepts to wanted output concepts."""

    inputs: frozenset[str]
    outputs: frozenset[str]

    @classmethod
    def of(cls, inputs: Iterable[str], outputs: Iterable[str]) -> "CompositionTask":
        return cls(frozenset(inputs), frozenset(outputs))


def _mock_qos() -> tuple[float, float, float, float]:
    qos = [0.0] * 4
    qos[AVAILABILITY] = 1.0
    qos[RELIABILITY] = 1.0
    return tuple(qos)  # type: ignore[return-value]


def start_service(task: CompositionTask) -> Service:
    """Pseudo-service producing the task inputs (neutral QoS)."""
    return Service("start", _mock_qos(), set(), set(task.inputs))


def end_service(task: CompositionTask) -> Service:
    """Pseudo-service consuming the task outputs (neutral QoS)."""
    return Service("end", _mock_qos(), set(task.outputs), set())


def build_catalog(records: Iterable[Mapping]) -> dict[str, Service]:
    """
    Build a name -> Service map from parsed records.

    Each record needs ``name``, ``inputs``, ``outputs`` and either a ``qos``
    sequence (index order of this module) or ``time``/``cost``/``availability``/
    ``reliability`` keys.
    """
    catalog: dict[str, Service] = {}
    for record in records:
        name = str(record["name"])
        if "qos" in record:
            service = Service(name, tuple(record["qos"]), set(record.get("inputs", ())), set(record.get("outputs", ())))
        else:
            service = Service.from_record(
                name,
                time=record["time"],
                cost=record["cost"],
                availability=record["availability"],
                reliability=record["reliability"],
                inputs=record.get("inputs", ()),
                outputs=record.get("outputs", ()),
            )
        catalog[name] = service
    return catalog


__all__ = [
    "AVAILABILITY",
    "RELIABILITY",
    "TIME",
    "COST",
    "QOS_FIELDS",
    "Service",
    "CompositionTask",
    "start_service",
    "end_service",
    "build_catalog",
]
