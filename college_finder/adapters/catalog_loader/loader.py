"""Catalog loader: reads college records from JSON and maps them to domain entities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from college_finder.domain.entities.college import (
    College,
    CollegeLocation,
    Contact,
    Cutoff,
    Facilities,
    Hostel,
    Library,
    Programs,
)
from college_finder.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = Path(__file__).with_name("sample_colleges.json")


# ─── dict → domain ───────────────────────────────────────────────────


def point_from_dict(raw: dict[str, Any] | None) -> GeoPoint | None:
    if not raw or raw.get("lat") is None or raw.get("lng") is None:
        return None
    return GeoPoint(latitude=float(raw["lat"]), longitude=float(raw["lng"]))


def location_from_dict(raw: dict[str, Any]) -> CollegeLocation:
    return CollegeLocation(
        city=raw["city"],
        district=raw["district"],
        state=raw["state"],
        address=raw["address"],
        coordinates=point_from_dict(raw.get("coordinates")),
    )


def programs_from_dict(raw: dict[str, Any] | None) -> Programs | None:
    if raw is None:
        return None
    return Programs(
        undergraduate=list(raw.get("undergraduate", [])),
        postgraduate=list(raw.get("postgraduate", [])),
        diploma=list(raw.get("diploma", [])),
        phd=list(raw.get("phd", [])),
    )


def facilities_from_dict(raw: dict[str, Any] | None) -> Facilities | None:
    if raw is None:
        return None
    hostel = raw.get("hostel") or {}
    library = raw.get("library") or {}
    return Facilities(
        hostel=Hostel(
            boys=bool(hostel.get("boys", False)),
            girls=bool(hostel.get("girls", False)),
            capacity=hostel.get("capacity"),
        ),
        library=Library(
            digital_access=bool(library.get("digital_access", False)),
            e_resources=bool(library.get("e_resources", False)),
            capacity=library.get("capacity"),
        ),
        labs=bool(raw.get("labs", False)),
        research=bool(raw.get("research", False)),
        internet=bool(raw.get("internet", False)),
        wifi=bool(raw.get("wifi", False)),
        sports=bool(raw.get("sports", False)),
        special_features=list(raw.get("special_features", [])),
    )


def contact_from_dict(raw: dict[str, Any] | None) -> Contact | None:
    if raw is None:
        return None
    return Contact(phone=raw.get("phone"), email=raw.get("email"), website=raw.get("website"))


def cutoffs_from_list(raw: list[dict[str, Any]] | None) -> list[Cutoff]:
    return [
        Cutoff(
            category=c["category"],
            year=int(c["year"]),
            marks=c.get("marks"),
            rank=c.get("rank"),
        )
        for c in raw or []
    ]


def college_from_dict(raw: dict[str, Any]) -> College:
    """Build a College from a catalog record (snake_case keys)."""
    return College(
        id=raw.get("id"),
        name=raw["name"],
        short_name=raw.get("short_name"),
        location=location_from_dict(raw["location"]),
        type=raw["type"],
        year_established=raw.get("year_established"),
        programs=programs_from_dict(raw.get("programs")),
        streams=list(raw.get("streams") or []),
        affiliated_university=raw.get("affiliated_university"),
        governing_body=raw.get("governing_body"),
        entrance_exams=list(raw.get("entrance_exams") or []),
        cutoff_info=cutoffs_from_list(raw.get("cutoff_info")),
        eligibility_criteria=raw.get("eligibility_criteria"),
        admission_process=raw.get("admission_process"),
        medium_of_instruction=list(raw.get("medium_of_instruction") or []),
        facilities=facilities_from_dict(raw.get("facilities")),
        contact=contact_from_dict(raw.get("contact")),
        is_active=bool(raw.get("is_active", True)),
        created_at=raw.get("created_at"),
    )


# ─── domain → dict ───────────────────────────────────────────────────


def point_to_dict(point: GeoPoint | None) -> dict[str, float] | None:
    if point is None:
        return None
    return {"lat": point.latitude, "lng": point.longitude}


def location_to_dict(location: CollegeLocation) -> dict[str, Any]:
    data: dict[str, Any] = {
        "city": location.city,
        "district": location.district,
        "state": location.state,
        "address": location.address,
    }
    if location.coordinates is not None:
        data["coordinates"] = point_to_dict(location.coordinates)
    return data


def programs_to_dict(programs: Programs | None) -> dict[str, list[str]] | None:
    if programs is None:
        return None
    return {
        "undergraduate": list(programs.undergraduate),
        "postgraduate": list(programs.postgraduate),
        "diploma": list(programs.diploma),
        "phd": list(programs.phd),
    }


def facilities_to_dict(facilities: Facilities | None) -> dict[str, Any] | None:
    if facilities is None:
        return None
    return {
        "hostel": {
            "boys": facilities.hostel.boys,
            "girls": facilities.hostel.girls,
            "capacity": facilities.hostel.capacity,
        },
        "library": {
            "capacity": facilities.library.capacity,
            "digital_access": facilities.library.digital_access,
            "e_resources": facilities.library.e_resources,
        },
        "labs": facilities.labs,
        "research": facilities.research,
        "internet": facilities.internet,
        "wifi": facilities.wifi,
        "sports": facilities.sports,
        "special_features": list(facilities.special_features),
    }


def contact_to_dict(contact: Contact | None) -> dict[str, str | None] | None:
    if contact is None:
        return None
    return {"phone": contact.phone, "email": contact.email, "website": contact.website}


def cutoffs_to_list(cutoffs: list[Cutoff]) -> list[dict[str, Any]]:
    return [
        {"category": c.category, "marks": c.marks, "rank": c.rank, "year": c.year}
        for c in cutoffs
    ]


def college_to_dict(college: College) -> dict[str, Any]:
    """Inverse of college_from_dict."""
    return {
        "id": college.id,
        "name": college.name,
        "short_name": college.short_name,
        "location": location_to_dict(college.location),
        "type": college.type,
        "year_established": college.year_established,
        "programs": programs_to_dict(college.programs),
        "streams": list(college.streams),
        "affiliated_university": college.affiliated_university,
        "governing_body": college.governing_body,
        "entrance_exams": list(college.entrance_exams),
        "cutoff_info": cutoffs_to_list(college.cutoff_info),
        "eligibility_criteria": college.eligibility_criteria,
        "admission_process": college.admission_process,
        "medium_of_instruction": list(college.medium_of_instruction),
        "facilities": facilities_to_dict(college.facilities),
        "contact": contact_to_dict(college.contact),
        "is_active": college.is_active,
        "created_at": college.created_at,
    }


# ─── Files ───────────────────────────────────────────────────────────


def load_catalog(file_path: Path | None = None, encoding: str = "utf-8") -> list[College]:
    """Load colleges from a JSON array file.

    Args:
        file_path: catalog file; defaults to the bundled sample catalog.
        encoding: file encoding.

    Returns:
        Colleges in file order.
    """
    path = file_path or BUNDLED_CATALOG
    with open(path, encoding=encoding) as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Catalog file {path} must contain a JSON array")

    colleges = [college_from_dict(r) for r in records]
    logger.info("Loaded %d colleges from %s", len(colleges), path.name)
    return colleges
