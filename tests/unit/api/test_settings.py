"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from college_finder.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_RADIUS_KM", raising=False)
    monkeypatch.delenv("GEOCODER_PROVIDER", raising=False)
    cfg = Settings(STORAGE_BACKEND="memory")
    assert cfg.default_radius_km == 25.0
    assert cfg.geocoder_provider == "static"


def test_default_radius_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_RADIUS_KM", "40")
    assert Settings().default_radius_km == 40.0


@pytest.mark.parametrize("radius", ["0", "-5", "0.5", "150"])
def test_default_radius_outside_endpoint_range_rejected(monkeypatch, radius):
    monkeypatch.setenv("DEFAULT_RADIUS_KM", radius)
    with pytest.raises(ValidationError):
        Settings()
