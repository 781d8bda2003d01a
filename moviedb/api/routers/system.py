"""
System API endpoints (health check).
"""

from fastapi import APIRouter

from moviedb.api.config import get_environment, get_version
from moviedb.api.models.system import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/healthcheck", response_model=HealthResponse)
def health_check():
    """Report that the API is available, with its environment and version."""
    return {
        "status": "available",
        "system_info": {
            "environment": get_environment(),
            "version": get_version(),
        },
    }
