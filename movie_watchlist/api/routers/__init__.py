"""
API route handlers.
"""

from movie_watchlist.api.routers import users, movies, watchlist, system

__all__ = ["users", "movies", "watchlist", "system"]
