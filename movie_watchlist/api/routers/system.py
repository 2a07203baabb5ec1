"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from movie_watchlist.api.dependencies import get_coordinator
from movie_watchlist.core.coordinator import Coordinator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(coordinator: Coordinator = Depends(get_coordinator)):
    """Health check: database reachable, record counts, session state."""
    try:
        stats = coordinator.stats()
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": str(e)}
    return {"status": "healthy", "database": "connected", **stats}
