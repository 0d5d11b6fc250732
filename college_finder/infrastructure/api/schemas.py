"""Pydantic request / response schemas for the REST API.

Request bodies accept both snake_case and the web client's camelCase
field names; responses are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from college_finder.config import settings


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Shared shapes ─────────────────────────────────────────────────────


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class LocationSchema(_Request):
    city: str
    district: str
    state: str
    address: str
    coordinates: Coordinates | None = None


class ProgramsSchema(_Request):
    undergraduate: list[str] = []
    postgraduate: list[str] = []
    diploma: list[str] = []
    phd: list[str] = []


class CutoffSchema(_Request):
    category: str
    year: int
    marks: float | None = None
    rank: int | None = None


class HostelSchema(_Request):
    boys: bool = False
    girls: bool = False
    capacity: int | None = None


class LibrarySchema(_Request):
    capacity: int | None = None
    digital_access: bool = False
    e_resources: bool = False


class FacilitiesSchema(_Request):
    hostel: HostelSchema = HostelSchema()
    library: LibrarySchema = LibrarySchema()
    labs: bool = False
    research: bool = False
    internet: bool = False
    wifi: bool = False
    sports: bool = False
    special_features: list[str] = []


class ContactSchema(_Request):
    phone: str | None = None
    email: str | None = None
    website: str | None = None


# ── Requests ──────────────────────────────────────────────────────────


class CollegeCreateRequest(_Request):
    name: str = Field(..., min_length=1)
    short_name: str | None = None
    location: LocationSchema
    type: str = Field(..., min_length=1)
    year_established: int | None = None
    programs: ProgramsSchema | None = None
    streams: list[str] = []
    affiliated_university: str | None = None
    governing_body: str | None = None
    entrance_exams: list[str] = []
    cutoff_info: list[CutoffSchema] = []
    eligibility_criteria: str | None = None
    admission_process: str | None = None
    medium_of_instruction: list[str] = []
    facilities: FacilitiesSchema | None = None
    contact: ContactSchema | None = None


class SearchFiltersRequest(_Request):
    location: str | None = None
    stream: str | None = None
    degree_level: str | None = None
    entrance_exam: str | None = None
    hostel: str | None = None
    year_range: str | None = None


class NearbySearchRequest(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    radius: float = Field(settings.default_radius_km, ge=1, le=100, description="Search radius in km")


class GeocodeRequest(BaseModel):
    address: str = ""


# ── Responses ─────────────────────────────────────────────────────────


class LocationResponse(BaseModel):
    city: str
    district: str
    state: str
    address: str
    coordinates: Coordinates | None = None


class CollegeResponse(BaseModel):
    id: str
    name: str
    short_name: str | None = None
    location: LocationResponse
    type: str
    year_established: int | None = None
    programs: dict[str, list[str]] | None = None
    streams: list[str] = []
    affiliated_university: str | None = None
    governing_body: str | None = None
    entrance_exams: list[str] = []
    cutoff_info: list[dict] = []
    eligibility_criteria: str | None = None
    admission_process: str | None = None
    medium_of_instruction: list[str] = []
    facilities: dict | None = None
    contact: dict | None = None
    is_active: bool = True
    created_at: str | None = None


class NearbyCollegeResponse(CollegeResponse):
    distance: float = Field(..., description="Distance from the search center in km")


class SearchResponse(BaseModel):
    colleges: list[CollegeResponse]
    count: int
    filters: dict[str, str | None]


class NearbySearchResponse(BaseModel):
    colleges: list[NearbyCollegeResponse]
    count: int
    search_center: Coordinates
    radius: float


class GeocodeResponse(BaseModel):
    address: str
    coordinates: Coordinates
    formatted_address: str


class HealthResponse(BaseModel):
    status: str = "ok"
    storage: str
    service: str = "College Finder"
