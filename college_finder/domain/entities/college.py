"""College entity: a catalog record for one government college."""

from __future__ import annotations

from dataclasses import dataclass, field

from college_finder.domain.value_objects.enums import DegreeLevel, HostelFacility
from college_finder.domain.value_objects.geo_point import GeoPoint


@dataclass
class CollegeLocation:
    city: str
    district: str
    state: str
    address: str
    coordinates: GeoPoint | None = None

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against city, district or state."""
        needle = term.lower()
        return (
            needle in self.city.lower()
            or needle in self.district.lower()
            or needle in self.state.lower()
        )


@dataclass
class Programs:
    undergraduate: list[str] = field(default_factory=list)
    postgraduate: list[str] = field(default_factory=list)
    diploma: list[str] = field(default_factory=list)
    phd: list[str] = field(default_factory=list)

    def offers(self, level: DegreeLevel) -> bool:
        by_level = {
            DegreeLevel.UNDERGRADUATE: self.undergraduate,
            DegreeLevel.POSTGRADUATE: self.postgraduate,
            DegreeLevel.DIPLOMA: self.diploma,
            DegreeLevel.PHD: self.phd,
        }
        return len(by_level[level]) > 0


@dataclass
class Cutoff:
    category: str
    year: int
    marks: float | None = None
    rank: int | None = None


@dataclass
class Hostel:
    boys: bool = False
    girls: bool = False
    capacity: int | None = None

    def provides(self, facility: HostelFacility) -> bool:
        if facility is HostelFacility.BOYS:
            return self.boys
        if facility is HostelFacility.GIRLS:
            return self.girls
        return self.boys and self.girls


@dataclass
class Library:
    digital_access: bool = False
    e_resources: bool = False
    capacity: int | None = None


@dataclass
class Facilities:
    hostel: Hostel = field(default_factory=Hostel)
    library: Library = field(default_factory=Library)
    labs: bool = False
    research: bool = False
    internet: bool = False
    wifi: bool = False
    sports: bool = False
    special_features: list[str] = field(default_factory=list)


@dataclass
class Contact:
    phone: str | None = None
    email: str | None = None
    website: str | None = None


@dataclass
class College:
    id: str | None
    name: str
    location: CollegeLocation
    type: str
    short_name: str | None = None
    year_established: int | None = None
    programs: Programs | None = None
    streams: list[str] = field(default_factory=list)
    affiliated_university: str | None = None
    governing_body: str | None = None
    entrance_exams: list[str] = field(default_factory=list)
    cutoff_info: list[Cutoff] = field(default_factory=list)
    eligibility_criteria: str | None = None
    admission_process: str | None = None
    medium_of_instruction: list[str] = field(default_factory=list)
    facilities: Facilities | None = None
    contact: Contact | None = None
    is_active: bool = True
    created_at: str | None = None

    @property
    def coordinates(self) -> GeoPoint | None:
        return self.location.coordinates

    def offers_degree_level(self, level: DegreeLevel) -> bool:
        return self.programs is not None and self.programs.offers(level)

    def provides_hostel(self, facility: HostelFacility) -> bool:
        return self.facilities is not None and self.facilities.hostel.provides(facility)
