from __future__ import annotations

import pytest

from stubs import make_catalog


@pytest.fixture
def catalog():
    """Taxonomy, four X -> Y services and the X -> Y task."""
    return make_catalog()
