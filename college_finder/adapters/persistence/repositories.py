"""SQLAlchemy repository implementations."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from college_finder.adapters.catalog_loader.loader import (
    contact_from_dict,
    contact_to_dict,
    cutoffs_from_list,
    cutoffs_to_list,
    facilities_from_dict,
    facilities_to_dict,
    programs_from_dict,
    programs_to_dict,
)
from college_finder.adapters.persistence.models import CollegeModel
from college_finder.application.ports.college_repo import CollegeRepository
from college_finder.domain.entities.college import College, CollegeLocation
from college_finder.domain.value_objects.geo_point import GeoPoint

# ─── Mappers ─────────────────────────────────────────────────────────


def _college_to_domain(m: CollegeModel) -> College:
    coordinates = None
    if m.latitude is not None and m.longitude is not None:
        coordinates = GeoPoint(latitude=m.latitude, longitude=m.longitude)
    return College(
        id=m.id,
        name=m.name,
        short_name=m.short_name,
        location=CollegeLocation(
            city=m.city,
            district=m.district,
            state=m.state,
            address=m.address,
            coordinates=coordinates,
        ),
        type=m.type,
        year_established=m.year_established,
        programs=programs_from_dict(m.programs),
        streams=list(m.streams or []),
        affiliated_university=m.affiliated_university,
        governing_body=m.governing_body,
        entrance_exams=list(m.entrance_exams or []),
        cutoff_info=cutoffs_from_list(m.cutoff_info),
        eligibility_criteria=m.eligibility_criteria,
        admission_process=m.admission_process,
        medium_of_instruction=list(m.medium_of_instruction or []),
        facilities=facilities_from_dict(m.facilities),
        contact=contact_from_dict(m.contact),
        is_active=m.is_active,
        created_at=m.created_at.isoformat() if m.created_at else None,
    )


def college_to_model(college: College) -> CollegeModel:
    coordinates = college.location.coordinates
    return CollegeModel(
        id=college.id,
        name=college.name,
        short_name=college.short_name,
        type=college.type,
        year_established=college.year_established,
        city=college.location.city,
        district=college.location.district,
        state=college.location.state,
        address=college.location.address,
        latitude=coordinates.latitude if coordinates else None,
        longitude=coordinates.longitude if coordinates else None,
        programs=programs_to_dict(college.programs),
        streams=list(college.streams),
        affiliated_university=college.affiliated_university,
        governing_body=college.governing_body,
        entrance_exams=list(college.entrance_exams),
        cutoff_info=cutoffs_to_list(college.cutoff_info),
        eligibility_criteria=college.eligibility_criteria,
        admission_process=college.admission_process,
        medium_of_instruction=list(college.medium_of_instruction),
        facilities=facilities_to_dict(college.facilities),
        contact=contact_to_dict(college.contact),
        is_active=college.is_active,
        created_at=(
            datetime.fromisoformat(college.created_at.replace("Z", "+00:00"))
            if college.created_at
            else datetime.now(timezone.utc)
        ),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlCollegeRepository(CollegeRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, college: College) -> College:
        college.id = str(uuid.uuid4())
        college.created_at = datetime.now(timezone.utc).isoformat()
        m = college_to_model(college)
        self._s.add(m)
        await self._s.flush()
        return college

    async def get_by_id(self, college_id: str) -> College | None:
        m = await self._s.get(CollegeModel, college_id)
        return _college_to_domain(m) if m else None

    async def get_all_active(self) -> list[College]:
        result = await self._s.execute(
            select(CollegeModel)
            .where(CollegeModel.is_active.is_(True))
            .order_by(CollegeModel.created_at, CollegeModel.id)
        )
        return [_college_to_domain(m) for m in result.scalars()]
