"""
Movie Watchlist Service Application Package.

This package contains the user directory, movie catalog, watchlist store,
session tracking, database operations, and the REST API that exposes them.
"""

__version__ = "1.0.0"
