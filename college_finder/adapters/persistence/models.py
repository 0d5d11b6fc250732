"""SQLAlchemy ORM models: maps to PostgreSQL tables."""

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from college_finder.adapters.persistence.database import Base


class CollegeModel(Base):
    __tablename__ = "colleges"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    short_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    year_established: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Location is flattened so the coordinates can be indexed
    city: Mapped[str] = mapped_column(String(200), nullable=False)
    district: Mapped[str] = mapped_column(String(200), nullable=False)
    state: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    programs: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    streams: Mapped[list[str]] = mapped_column(ARRAY(String(50)), nullable=False, default=list)
    affiliated_university: Mapped[str | None] = mapped_column(Text, nullable=True)
    governing_body: Mapped[str | None] = mapped_column(Text, nullable=True)

    entrance_exams: Mapped[list[str]] = mapped_column(ARRAY(String(100)), nullable=False, default=list)
    cutoff_info: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)
    eligibility_criteria: Mapped[str | None] = mapped_column(Text, nullable=True)
    admission_process: Mapped[str | None] = mapped_column(Text, nullable=True)

    medium_of_instruction: Mapped[list[str]] = mapped_column(
        ARRAY(String(50)), nullable=False, default=list
    )
    facilities: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    contact: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        Index("idx_colleges_active", "is_active"),
        Index("idx_colleges_state", "state"),
        Index("idx_colleges_coords", "latitude", "longitude"),
    )
