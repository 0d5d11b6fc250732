"""Tests for GeoPoint value object and the haversine distance."""

import math

import pytest

from college_finder.domain.errors import InvalidArgumentError
from college_finder.domain.value_objects.geo_point import GeoPoint, haversine_km

DELHI = GeoPoint(latitude=28.6139, longitude=77.2090)
MUMBAI = GeoPoint(latitude=19.0760, longitude=72.8777)
CHENNAI = GeoPoint(latitude=13.0827, longitude=80.2707)
KOLKATA = GeoPoint(latitude=22.5726, longitude=88.3639)


def test_haversine_same_point():
    """Distance from a point to itself should be 0."""
    assert DELHI.haversine_km(DELHI) == 0.0
    assert haversine_km(GeoPoint(0, 0), GeoPoint(0, 0)) == 0.0


def test_haversine_delhi_to_iit_delhi():
    """Connaught Place to IIT Delhi is roughly 7.6 km."""
    iit = GeoPoint(latitude=28.5458, longitude=77.1919)
    assert DELHI.haversine_km(iit) == pytest.approx(7.6, abs=0.2)


def test_haversine_delhi_to_mumbai():
    """Delhi to Mumbai is approximately 1150 km (straight line)."""
    distance = haversine_km(DELHI, MUMBAI)
    assert 1100 < distance < 1200


def test_haversine_one_degree_of_latitude():
    distance = haversine_km(GeoPoint(0, 0), GeoPoint(1, 0))
    assert distance == pytest.approx(6371.0 * math.pi / 180, rel=1e-12)


def test_haversine_antipodes():
    distance = haversine_km(GeoPoint(0, 0), GeoPoint(0, 180))
    assert distance == pytest.approx(math.pi * 6371.0, rel=1e-9)


def test_haversine_is_symmetric():
    pairs = [(DELHI, MUMBAI), (CHENNAI, KOLKATA), (GeoPoint(-33.9, 18.4), GeoPoint(51.5, -0.12))]
    for a, b in pairs:
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a), rel=1e-9)


def test_haversine_triangle_inequality():
    for a, b, c in [(DELHI, MUMBAI, CHENNAI), (MUMBAI, KOLKATA, DELHI), (CHENNAI, DELHI, KOLKATA)]:
        assert haversine_km(a, c) <= haversine_km(a, b) + haversine_km(b, c)


def test_haversine_grows_with_separation():
    origin = GeoPoint(10.0, 10.0)
    distances = [haversine_km(origin, GeoPoint(10.0 + step, 10.0)) for step in (0.1, 0.5, 1.0, 5.0)]
    assert distances == sorted(distances)


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=28.0, longitude=77.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0


@pytest.mark.parametrize(
    "lat, lng",
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.01), (0.0, -200.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_geo_point_rejects_invalid_coordinates(lat, lng):
    with pytest.raises(InvalidArgumentError):
        GeoPoint(latitude=lat, longitude=lng)


def test_geo_point_accepts_range_limits():
    GeoPoint(latitude=90.0, longitude=180.0)
    GeoPoint(latitude=-90.0, longitude=-180.0)
