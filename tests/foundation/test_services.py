from __future__ import annotations

import pytest

from wscmoead.foundation.services import (
    AVAILABILITY,
    COST,
    RELIABILITY,
    TIME,
    CompositionTask,
    Service,
    build_catalog,
    end_service,
    start_service,
)


def test_from_record_places_qos_by_index():
    service = Service.from_record("s", time=3.0, cost=4.0, availability=0.9, reliability=0.8)
    assert service.qos[TIME] == 3.0
    assert service.qos[COST] == 4.0
    assert service.qos[AVAILABILITY] == 0.9
    assert service.qos[RELIABILITY] == 0.8
    assert (service.time, service.cost, service.availability, service.reliability) == (3.0, 4.0, 0.9, 0.8)
    assert service.layer == -1


def test_services_compare_by_identity():
    a = Service.from_record("s", time=1, cost=1, availability=1, reliability=1)
    b = Service.from_record("s", time=1, cost=1, availability=1, reliability=1)
    assert a != b
    assert len({a, b}) == 2


def test_qos_must_have_four_values():
    with pytest.raises(ValueError):
        Service("bad", (1.0, 2.0))  # type: ignore[arg-type]


def test_pseudo_services_have_neutral_qos():
    task = CompositionTask.of({"A"}, {"B"})
    start = start_service(task)
    end = end_service(task)
    assert start.outputs == {"A"} and not start.inputs
    assert end.inputs == {"B"} and not end.outputs
    for service in (start, end):
        assert (service.availability, service.reliability, service.time, service.cost) == (1.0, 1.0, 0.0, 0.0)


def test_build_catalog_accepts_both_record_shapes():
    catalog = build_catalog(
        [
            {"name": "a", "qos": (0.9, 0.8, 2.0, 3.0), "inputs": ["X"], "outputs": ["Y"]},
            {"name": "b", "time": 1.0, "cost": 2.0, "availability": 0.7, "reliability": 0.6, "inputs": ["Y"]},
        ]
    )
    assert list(catalog) == ["a", "b"]
    assert catalog["a"].time == 2.0
    assert catalog["b"].reliability == 0.6
    assert catalog["b"].outputs == set()
