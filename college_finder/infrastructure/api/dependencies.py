"""FastAPI dependency injection: wires adapters into use cases."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import Depends, Request

from college_finder.adapters.catalog_loader.loader import load_catalog
from college_finder.adapters.geocoder.google_maps_adapter import GoogleMapsAdapter
from college_finder.adapters.geocoder.nominatim_adapter import NominatimAdapter
from college_finder.adapters.geocoder.static_adapter import StaticGeocoderAdapter
from college_finder.adapters.persistence.database import session_scope
from college_finder.adapters.persistence.memory_repository import InMemoryCollegeRepository
from college_finder.adapters.persistence.repositories import SqlCollegeRepository
from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.application.ports.geocoder_port import GeocoderPort
from college_finder.application.use_cases.browse_colleges import (
    CreateCollegeUseCase,
    GetCollegeUseCase,
    ListCollegesUseCase,
)
from college_finder.application.use_cases.find_nearby_colleges import FindNearbyCollegesUseCase
from college_finder.application.use_cases.geocode_address import GeocodeAddressUseCase
from college_finder.application.use_cases.search_colleges import SearchCollegesUseCase
from college_finder.config import Settings

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("memory", "sql")


# ─── Builders (called once by the app factory) ──────────────────────


def build_college_repository(cfg: Settings) -> InMemoryCollegeRepository | None:
    """Return the process-wide in-memory catalog, or None for the SQL backend.

    The SQL repository is per-request (one session each), so it is
    created by ``get_college_repo`` instead.
    """
    backend = cfg.storage_backend.strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND '{cfg.storage_backend}' (expected one of {STORAGE_BACKENDS})")
    if backend == "sql":
        logger.info("Using PostgreSQL college repository")
        return None

    catalog_path = Path(cfg.catalog_path) if cfg.catalog_path else None
    return InMemoryCollegeRepository(load_catalog(catalog_path))


def build_geocoder(cfg: Settings) -> GeocoderPort:
    if cfg.google_maps_api_key:
        logger.info("Using Google Maps for geocoding")
        return GoogleMapsAdapter(api_key=cfg.google_maps_api_key)

    provider = cfg.geocoder_provider.strip().lower()
    if provider == "nominatim":
        logger.info("Using Nominatim for geocoding")
        return NominatimAdapter(user_agent=cfg.geocoder_user_agent)
    if provider == "static":
        return StaticGeocoderAdapter(default_city=cfg.geocoder_default_city or None)
    raise ValueError(f"Unknown GEOCODER_PROVIDER '{cfg.geocoder_provider}'")


# ─── Request-scoped providers ───────────────────────────────────────


async def get_college_repo(request: Request) -> AsyncIterator[CollegeRepository]:
    memory_repo = request.app.state.college_repo
    if memory_repo is not None:
        yield memory_repo
        return

    async with session_scope() as session:
        yield SqlCollegeRepository(session)


def get_geocoder(request: Request) -> GeocoderPort:
    return request.app.state.geocoder


def get_list_colleges_uc(
    repo: CollegeRepository = Depends(get_college_repo),
) -> ListCollegesUseCase:
    return ListCollegesUseCase(repo)


def get_get_college_uc(
    repo: CollegeRepository = Depends(get_college_repo),
) -> GetCollegeUseCase:
    return GetCollegeUseCase(repo)


def get_create_college_uc(
    repo: CollegeRepository = Depends(get_college_repo),
) -> CreateCollegeUseCase:
    return CreateCollegeUseCase(repo)


def get_search_colleges_uc(
    repo: CollegeRepository = Depends(get_college_repo),
) -> SearchCollegesUseCase:
    return SearchCollegesUseCase(repo)


def get_find_nearby_uc(
    repo: CollegeRepository = Depends(get_college_repo),
) -> FindNearbyCollegesUseCase:
    return FindNearbyCollegesUseCase(repo)


def get_geocode_address_uc(
    geocoder: GeocoderPort = Depends(get_geocoder),
) -> GeocodeAddressUseCase:
    return GeocodeAddressUseCase(geocoder)
