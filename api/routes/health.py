"""Health check routes."""

from fastapi import APIRouter

from ..state import get_session

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    session = get_session()
    return {
        "status": "healthy",
        "furniture_count": len(session.scene),
        "auto_rotating": session.auto_rotator.is_running,
    }
