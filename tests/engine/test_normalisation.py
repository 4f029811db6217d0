from __future__ import annotations

import math

from stubs import StubIndividual
from wscmoead.engine.algorithm.components.normalisation import NormalisationBounds, dynamic_bounds, static_bounds
from wscmoead.foundation.services import Service


def test_static_bounds_scale_time_and_cost_by_catalog_size():
    services = [
        Service.from_record("a", time=2.0, cost=5.0, availability=0.9, reliability=0.7),
        Service.from_record("b", time=4.0, cost=1.0, availability=0.6, reliability=0.8),
        Service.from_record("c", time=3.0, cost=3.0, availability=0.8, reliability=0.5),
    ]
    bounds = static_bounds(services)
    assert bounds == NormalisationBounds(
        min_availability=0.0,
        max_availability=0.9,
        min_reliability=0.0,
        max_reliability=0.8,
        min_time=2.0,
        max_time=12.0,
        min_cost=1.0,
        max_cost=15.0,
    )


def test_dynamic_bounds_from_raw_qos():
    individuals = [
        StubIndividual(qos=(0.9, 0.5, 10.0, 3.0)),
        StubIndividual(qos=(0.4, 0.8, 2.0, 7.0)),
    ]
    bounds = dynamic_bounds(individuals)
    assert (bounds.min_availability, bounds.max_availability) == (0.4, 0.9)
    assert (bounds.min_reliability, bounds.max_reliability) == (0.5, 0.8)
    assert (bounds.min_time, bounds.max_time) == (2.0, 10.0)
    assert (bounds.min_cost, bounds.max_cost) == (3.0, 7.0)


def test_dynamic_bounds_without_individuals_keep_sentinels():
    bounds = dynamic_bounds([])
    assert (bounds.min_availability, bounds.max_availability) == (2.0, -1.0)
    assert (bounds.min_reliability, bounds.max_reliability) == (2.0, -1.0)
    assert math.isinf(bounds.min_time) and bounds.max_time == -1.0
    assert math.isinf(bounds.min_cost) and bounds.max_cost == -1.0
