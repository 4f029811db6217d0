"""
QoS normalisation bounds.

Static bounds come from the relevant services once, before the run. Dynamic
bounds are recomputed from individuals' raw QoS at every generation boundary,
after which each individual finalises its objectives against them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from wscmoead.foundation.services import Service

if TYPE_CHECKING:
    from wscmoead.foundation.types import Individual


@dataclass(frozen=True)
class NormalisationBounds:
    min_availability: float = 0.0
    max_availability: float = -1.0
    min_reliability: float = 0.0
    max_reliability: float = -1.0
    min_time: float = float("inf")
    max_time: float = -1.0
    min_cost: float = float("inf")
    max_cost: float = -1.0


def static_bounds(services: Sequence[Service]) -> NormalisationBounds:
    """
    Bounds derived from the relevant services.

    Minimum availability and reliability stay at 0. Maximum time and cost are
    scaled by the number of services, since a composition may chain all of them.
    """
    max_a = -1.0
    max_r = -1.0
    min_t, max_t = float("inf"), -1.0
    min_c, max_c = float("inf"), -1.0
    for service in services:
        max_a = max(max_a, service.availability)
        max_r = max(max_r, service.reliability)
        min_t = min(min_t, service.time)
        max_t = max(max_t, service.time)
        min_c = min(min_c, service.cost)
        max_c = max(max_c, service.cost)

    n = len(services)
    return NormalisationBounds(
        min_availability=0.0,
        max_availability=max_a,
        min_reliability=0.0,
        max_reliability=max_r,
        min_time=min_t,
        max_time=max_t * n,
        min_cost=min_c,
        max_cost=max_c * n,
    )


def dynamic_bounds(individuals: Iterable["Individual"]) -> NormalisationBounds:
    """Componentwise min/max of the individuals' raw QoS."""
    min_a, max_a = 2.0, -1.0
    min_r, max_r = 2.0, -1.0
    min_t, max_t = float("inf"), -1.0
    min_c, max_c = float("inf"), -1.0
    for ind in individuals:
        a, r, t, c = ind.availability, ind.reliability, ind.time, ind.cost
        min_a, max_a = min(min_a, a), max(max_a, a)
        min_r, max_r = min(min_r, r), max(max_r, r)
        min_t, max_t = min(min_t, t), max(max_t, t)
        min_c, max_c = min(min_c, c), max(max_c, c)
    return NormalisationBounds(min_a, max_a, min_r, max_r, min_t, max_t, min_c, max_c)


__all__ = ["NormalisationBounds", "static_bounds", "dynamic_bounds"]
