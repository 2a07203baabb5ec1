"""
FastAPI dependency injection for the coordinator.
"""

import logging

from movie_watchlist.api.config import get_database_path, get_password_scheme
from movie_watchlist.core.coordinator import Coordinator
from movie_watchlist.core.security import CredentialHasher
from movie_watchlist.database.connection import get_db_manager

logger = logging.getLogger(__name__)


# Singleton coordinator; it owns the process-wide session slot
_coordinator: Coordinator | None = None


def get_coordinator() -> Coordinator:
    """Get or create the singleton Coordinator."""
    global _coordinator
    if _coordinator is None:
        db_manager = get_db_manager(db_path=get_database_path())
        db_manager.create_tables()
        _coordinator = Coordinator(
            db_manager,
            hasher=CredentialHasher(get_password_scheme()),
        )
        logger.info("Coordinator ready (database=%s)", db_manager.db_path)
    return _coordinator

