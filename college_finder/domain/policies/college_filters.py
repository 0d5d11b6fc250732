"""College catalog filters: location, stream, degree level, exam, hostel, founding year."""

from __future__ import annotations

from dataclasses import dataclass

from college_finder.domain.entities.college import College
from college_finder.domain.errors import InvalidArgumentError
from college_finder.domain.value_objects.enums import (
    WILDCARD_FILTER_VALUES,
    DegreeLevel,
    HostelFacility,
    YearRange,
)


def _normalize(value: str | None) -> str | None:
    """Map empty strings and the client's "all"/"any" sentinels to None."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() in WILDCARD_FILTER_VALUES:
        return None
    return value


@dataclass(frozen=True)
class SearchFilters:
    location: str | None = None
    stream: str | None = None
    degree_level: str | None = None
    entrance_exam: str | None = None
    hostel: str | None = None
    year_range: str | None = None

    def normalized(self) -> "SearchFilters":
        return SearchFilters(
            location=_normalize(self.location),
            stream=_normalize(self.stream),
            degree_level=_normalize(self.degree_level),
            entrance_exam=_normalize(self.entrance_exam),
            hostel=_normalize(self.hostel),
            year_range=_normalize(self.year_range),
        )


def _parse_hostel(raw: str) -> HostelFacility:
    try:
        return HostelFacility(raw)
    except ValueError:
        allowed = ", ".join(h.value for h in HostelFacility)
        raise InvalidArgumentError(f"Unknown hostel filter '{raw}' (expected one of: {allowed})") from None


def _parse_year_range(raw: str) -> YearRange:
    try:
        return YearRange(raw)
    except ValueError:
        allowed = ", ".join(y.value for y in YearRange)
        raise InvalidArgumentError(f"Unknown year range '{raw}' (expected one of: {allowed})") from None


def filter_colleges(colleges: list[College], filters: SearchFilters) -> list[College]:
    """Apply every set filter to *colleges*, preserving catalog order.

    An unrecognised degree level leaves the list unfiltered; unknown hostel
    and year-range values are rejected.

    Raises:
        InvalidArgumentError: for an unknown hostel or year-range value.
    """
    f = filters.normalized()
    hostel = _parse_hostel(f.hostel) if f.hostel else None
    year_range = _parse_year_range(f.year_range) if f.year_range else None

    results = list(colleges)

    if f.location:
        results = [c for c in results if c.location.matches(f.location)]

    if f.stream:
        results = [c for c in results if f.stream in c.streams]

    if f.degree_level:
        try:
            level = DegreeLevel(f.degree_level)
        except ValueError:
            level = None
        if level is not None:
            results = [c for c in results if c.offers_degree_level(level)]

    if f.entrance_exam:
        results = [c for c in results if f.entrance_exam in c.entrance_exams]

    if hostel:
        results = [c for c in results if c.provides_hostel(hostel)]

    if year_range:
        results = [
            c for c in results
            if c.year_established is not None and year_range.contains(c.year_established)
        ]

    return results
