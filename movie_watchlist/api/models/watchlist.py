"""
Pydantic schemas for Watchlist API.
"""

from pydantic import BaseModel, ConfigDict


class WatchlistResponse(BaseModel):
    """Response model for the current user's watchlist."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    movies: list[str]
