"""
Database module for the watchlist service.

This module provides the ORM table models, connection management and schema
initialization for the SQLite database using SQLAlchemy ORM.
"""

from movie_watchlist.database.models import Base, UserRow, MovieRow, WatchlistRow
from movie_watchlist.database.connection import (
    DatabaseManager,
    get_db_manager,
    reset_db_manager,
)
from movie_watchlist.database.init_db import init_database, verify_schema

__all__ = [
    # Models
    'Base',
    'UserRow',
    'MovieRow',
    'WatchlistRow',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'reset_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
]
