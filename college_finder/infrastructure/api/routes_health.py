"""Health check endpoint."""

from fastapi import APIRouter, Request
from sqlalchemy import text

from college_finder.adapters.persistence.database import session_scope
from college_finder.infrastructure.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Check API and storage connectivity."""
    if request.app.state.college_repo is not None:
        return HealthResponse(status="ok", storage="memory")

    try:
        async with session_scope() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
        storage = "postgresql: connected"
        status = "ok"
    except Exception as e:
        storage = f"postgresql: error: {e}"
        status = "degraded"

    return HealthResponse(status=status, storage=storage)
