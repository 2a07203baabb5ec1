"""
Pydantic schemas for API request/response validation.
"""

from movie_watchlist.api.models.user import UserCreate, LoginRequest, MessageResponse
from movie_watchlist.api.models.movie import MoviePayloadIn, MovieResponse, MovieList
from movie_watchlist.api.models.watchlist import WatchlistResponse

__all__ = [
    "UserCreate",
    "LoginRequest",
    "MessageResponse",
    "MoviePayloadIn",
    "MovieResponse",
    "MovieList",
    "WatchlistResponse",
]
