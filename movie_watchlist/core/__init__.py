"""
Core service logic: the three stores, session tracking and the coordinator
that enforces the rules between them.
"""

from movie_watchlist.core.errors import (
    WatchlistError,
    ValidationError,
    Conflict,
    NotFound,
    Unauthorized,
)
from movie_watchlist.core.records import User, Movie, MoviePayload, Watchlist
from movie_watchlist.core.users import UserDirectory
from movie_watchlist.core.movies import MovieCatalog
from movie_watchlist.core.watchlists import WatchlistStore
from movie_watchlist.core.session import SessionTracker
from movie_watchlist.core.security import CredentialHasher
from movie_watchlist.core.coordinator import Coordinator

__all__ = [
    'WatchlistError',
    'ValidationError',
    'Conflict',
    'NotFound',
    'Unauthorized',
    'User',
    'Movie',
    'MoviePayload',
    'Watchlist',
    'UserDirectory',
    'MovieCatalog',
    'WatchlistStore',
    'SessionTracker',
    'CredentialHasher',
    'Coordinator',
]
