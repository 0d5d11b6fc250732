"""Pytest configuration and shared fixtures."""

import pytest

from college_finder.adapters.catalog_loader.loader import load_catalog
from college_finder.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def delhi_center():
    return GeoPoint(latitude=28.6139, longitude=77.2090)


@pytest.fixture
def mumbai_center():
    return GeoPoint(latitude=19.0760, longitude=72.8777)


@pytest.fixture
def catalog():
    """The bundled sample catalog (9 colleges, one without coordinates)."""
    return load_catalog()
