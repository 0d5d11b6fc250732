"""Tests for the HTTP geocoders against mocked transports."""

from __future__ import annotations

import httpx
import pytest

from college_finder.adapters.geocoder.google_maps_adapter import GoogleMapsAdapter
from college_finder.adapters.geocoder.nominatim_adapter import NominatimAdapter
from college_finder.adapters.geocoder.static_adapter import CITY_CENTROIDS
from college_finder.config import settings


class Recorder:
    """httpx MockTransport handler that records requests and replays a canned reply."""

    def __init__(self, status_code: int = 200, json=None):
        self.status_code = status_code
        self.json = json
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class ScriptedReplies(Recorder):
    """Replays a scripted list of (status, json) replies, one per request."""

    def __init__(self, *replies):
        super().__init__()
        self._replies = list(replies)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self._replies.pop(0)
        return httpx.Response(status_code, json=body)


# ─── Nominatim ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_nominatim_resolves_first_result():
    recorder = Recorder(json=[{"lat": "28.5458", "lon": "77.1919"}])
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport)

    point = await adapter.geocode(" Hauz Khas, New Delhi ")

    assert point is not None
    assert point.latitude == pytest.approx(28.5458)
    assert point.longitude == pytest.approx(77.1919)
    request = recorder.requests[0]
    assert request.url.params["q"] == "Hauz Khas, New Delhi"
    assert request.url.params["countrycodes"] == "in"
    assert request.headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_nominatim_empty_result_falls_back_to_city_table():
    recorder = Recorder(json=[])
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport)
    assert await adapter.geocode("Some lane, Pune") == CITY_CENTROIDS["pune"]


@pytest.mark.asyncio
async def test_nominatim_http_error_falls_back_to_city_table():
    recorder = Recorder(status_code=503, json={"error": "unavailable"})
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport)
    assert await adapter.geocode("Chennai") == CITY_CENTROIDS["chennai"]


@pytest.mark.asyncio
async def test_nominatim_unresolvable_returns_none():
    recorder = Recorder(json=[])
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport)
    assert await adapter.geocode("Atlantis") is None


@pytest.mark.asyncio
async def test_nominatim_cache_deduplicates():
    recorder = Recorder(json=[{"lat": "19.1334", "lon": "72.9133"}])
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport)

    r1 = await adapter.geocode("Powai, Mumbai")
    r2 = await adapter.geocode("  POWAI, MUMBAI")

    assert r1 == r2
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_nominatim_retries_after_server_error():
    replies = ScriptedReplies((503, {"error": "unavailable"}), (200, [{"lat": "10.0", "lon": "76.0"}]))
    adapter = NominatimAdapter(user_agent="test-agent", transport=replies.transport)

    assert await adapter.geocode("Kochi") is None
    point = await adapter.geocode("Kochi")

    assert point is not None
    assert (point.latitude, point.longitude) == (10.0, 76.0)
    assert len(replies.requests) == 2


@pytest.mark.asyncio
async def test_nominatim_city_fallback_after_error_is_not_cached():
    replies = ScriptedReplies((503, {}), (200, [{"lat": "18.5293", "lon": "73.8565"}]))
    adapter = NominatimAdapter(user_agent="test-agent", transport=replies.transport)

    assert await adapter.geocode("Shivajinagar, Pune") == CITY_CENTROIDS["pune"]
    precise = await adapter.geocode("Shivajinagar, Pune")

    assert (precise.latitude, precise.longitude) == (18.5293, 73.8565)


@pytest.mark.asyncio
async def test_nominatim_cache_is_bounded():
    recorder = Recorder(json=[{"lat": "19.1334", "lon": "72.9133"}])
    adapter = NominatimAdapter(user_agent="test-agent", transport=recorder.transport, cache_size=2)

    for address in ("Powai", "Andheri", "Bandra"):
        await adapter.geocode(address)
    await adapter.geocode("Bandra")
    assert len(recorder.requests) == 3

    await adapter.geocode("Powai")
    assert len(recorder.requests) == 4


# ─── Google Maps ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_google_resolves_location():
    recorder = Recorder(json={
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": 13.0108, "lng": 80.2354}}}],
    })
    adapter = GoogleMapsAdapter(api_key="test-key", transport=recorder.transport)

    point = await adapter.geocode("Guindy, Chennai")

    assert point is not None
    assert (point.latitude, point.longitude) == (13.0108, 80.2354)
    params = recorder.requests[0].url.params
    assert params["key"] == "test-key"
    assert params["region"] == "in"


@pytest.mark.asyncio
async def test_google_zero_results_is_cached_as_none():
    recorder = Recorder(json={"status": "ZERO_RESULTS", "results": []})
    adapter = GoogleMapsAdapter(api_key="test-key", transport=recorder.transport)

    assert await adapter.geocode("Atlantis") is None
    assert await adapter.geocode("atlantis") is None
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_google_http_error_returns_none():
    recorder = Recorder(status_code=500, json={})
    adapter = GoogleMapsAdapter(api_key="test-key", transport=recorder.transport)
    assert await adapter.geocode("Delhi") is None


@pytest.mark.asyncio
async def test_google_retries_after_server_error():
    ok = {"status": "OK", "results": [{"geometry": {"location": {"lat": 28.5458, "lng": 77.1919}}}]}
    replies = ScriptedReplies((500, {}), (200, ok))
    adapter = GoogleMapsAdapter(api_key="test-key", transport=replies.transport)

    assert await adapter.geocode("Hauz Khas") is None
    point = await adapter.geocode("Hauz Khas")

    assert (point.latitude, point.longitude) == (28.5458, 77.1919)
    assert len(replies.requests) == 2


@pytest.mark.asyncio
async def test_google_without_key_skips_request(monkeypatch):
    monkeypatch.setattr(settings, "google_maps_api_key", None)
    recorder = Recorder(json={})
    adapter = GoogleMapsAdapter(api_key=None, transport=recorder.transport)

    assert await adapter.geocode("Delhi") is None
    assert recorder.requests == []
