"""College endpoints: catalog listing, detail, registration, search and nearby."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from college_finder.adapters.catalog_loader.loader import college_from_dict, college_to_dict
from college_finder.application.use_cases.browse_colleges import (
    CreateCollegeUseCase,
    GetCollegeUseCase,
    ListCollegesUseCase,
)
from college_finder.application.use_cases.find_nearby_colleges import FindNearbyCollegesUseCase
from college_finder.application.use_cases.search_colleges import SearchCollegesUseCase
from college_finder.domain.entities.college import College
from college_finder.domain.policies.college_filters import SearchFilters
from college_finder.domain.value_objects.geo_point import GeoPoint
from college_finder.infrastructure.api.dependencies import (
    get_create_college_uc,
    get_find_nearby_uc,
    get_get_college_uc,
    get_list_colleges_uc,
    get_search_colleges_uc,
)
from college_finder.infrastructure.api.schemas import (
    CollegeCreateRequest,
    CollegeResponse,
    Coordinates,
    NearbyCollegeResponse,
    NearbySearchRequest,
    NearbySearchResponse,
    SearchFiltersRequest,
    SearchResponse,
)

router = APIRouter(prefix="/colleges", tags=["colleges"])


@router.get("", response_model=list[CollegeResponse])
async def list_colleges(uc: ListCollegesUseCase = Depends(get_list_colleges_uc)):
    """List all active colleges."""
    colleges = await uc.execute()
    return [_serialize_college(c) for c in colleges]


@router.post("", response_model=CollegeResponse, status_code=201)
async def create_college(
    body: CollegeCreateRequest,
    uc: CreateCollegeUseCase = Depends(get_create_college_uc),
):
    """Register a new college in the catalog."""
    college = college_from_dict(body.model_dump())
    saved = await uc.execute(college)
    return _serialize_college(saved)


@router.post("/search", response_model=SearchResponse)
async def search_colleges(
    body: SearchFiltersRequest,
    uc: SearchCollegesUseCase = Depends(get_search_colleges_uc),
):
    """Filter active colleges by location, stream, degree level, exam, hostel and founding year."""
    filters = SearchFilters(**body.model_dump())
    colleges = await uc.execute(filters)
    return {
        "colleges": [_serialize_college(c) for c in colleges],
        "count": len(colleges),
        "filters": body.model_dump(),
    }


@router.post("/nearby", response_model=NearbySearchResponse)
async def find_nearby_colleges(
    body: NearbySearchRequest,
    uc: FindNearbyCollegesUseCase = Depends(get_find_nearby_uc),
):
    """Active colleges within ``radius`` km of (lat, lng), nearest first."""
    result = await uc.execute(GeoPoint(latitude=body.lat, longitude=body.lng), body.radius)
    colleges = [
        {**_serialize_college(m.entity), "distance": round(m.distance_km, 2)}
        for m in result.matches
    ]
    return NearbySearchResponse(
        colleges=[NearbyCollegeResponse(**c) for c in colleges],
        count=len(colleges),
        search_center=Coordinates(lat=body.lat, lng=body.lng),
        radius=result.radius_km,
    )


@router.get("/{college_id}", response_model=CollegeResponse)
async def get_college(college_id: str, uc: GetCollegeUseCase = Depends(get_get_college_uc)):
    """Get a single college with full details."""
    college = await uc.execute(college_id)
    return _serialize_college(college)


def _serialize_college(college: College) -> dict:
    """Convert a College entity to an API response dict."""
    return college_to_dict(college)
