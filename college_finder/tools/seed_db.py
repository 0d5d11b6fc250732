"""Seed the PostgreSQL catalog from a college JSON file.

Usage:
    python -m college_finder.tools.seed_db
    python -m college_finder.tools.seed_db --catalog data/colleges.json
    python -m college_finder.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from college_finder.adapters.catalog_loader.loader import load_catalog
from college_finder.adapters.persistence.database import async_session_factory, engine
from college_finder.adapters.persistence.models import CollegeModel
from college_finder.adapters.persistence.repositories import college_to_model

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def _drop_data(session: AsyncSession) -> None:
    await session.execute(delete(CollegeModel))
    await session.commit()
    logger.info("Dropped all existing colleges")


async def seed(catalog: Path | None = None, drop: bool = False) -> dict[str, int]:
    """Insert catalog colleges that are not yet stored. Returns counts."""
    counts = {"inserted": 0, "skipped": 0}
    colleges = load_catalog(catalog)

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        for college in colleges:
            if college.id is None:
                logger.warning("College '%s' has no id, skipping", college.name)
                counts["skipped"] += 1
                continue

            existing = await session.execute(
                select(CollegeModel.id).where(CollegeModel.id == college.id)
            )
            if existing.scalar_one_or_none():
                logger.debug("College '%s' already exists, skipping", college.id)
                counts["skipped"] += 1
                continue

            session.add(college_to_model(college))
            counts["inserted"] += 1

        await session.commit()

    logger.info("Seed complete: %d inserted, %d skipped", counts["inserted"], counts["skipped"])
    return counts


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the college catalog database")
    parser.add_argument("--catalog", type=Path, default=None, help="JSON catalog file (default: bundled sample)")
    parser.add_argument("--drop", action="store_true", help="Delete existing colleges first")
    args = parser.parse_args()

    if args.catalog and not args.catalog.exists():
        logger.error("Catalog file not found: %s", args.catalog)
        return 1

    async def _run() -> None:
        try:
            await seed(args.catalog, drop=args.drop)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
