"""College Finder: FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from college_finder.adapters.persistence.database import engine
from college_finder.config import Settings, settings
from college_finder.domain.errors import CollegeNotFoundError, InvalidArgumentError
from college_finder.infrastructure.api.dependencies import build_college_repository, build_geocoder
from college_finder.infrastructure.api.routes_colleges import router as colleges_router
from college_finder.infrastructure.api.routes_geocode import router as geocode_router
from college_finder.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if app.state.college_repo is None:
        try:
            async with engine.begin():
                pass  # Connection pool warmed up
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


async def _invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _not_found_handler(request: Request, exc: CollegeNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "College not found"})


def create_app(cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or settings
    logging.basicConfig(level=cfg.log_level.upper())

    app = FastAPI(
        title="College Finder",
        description="Search, filter and locate government colleges near you",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Catalog store and geocoder are owned by the app and injected per request
    app.state.college_repo = build_college_repository(cfg)
    app.state.geocoder = build_geocoder(cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidArgumentError, _invalid_argument_handler)
    app.add_exception_handler(CollegeNotFoundError, _not_found_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(colleges_router, prefix="/api")
    app.include_router(geocode_router, prefix="/api")

    return app


app = create_app()
