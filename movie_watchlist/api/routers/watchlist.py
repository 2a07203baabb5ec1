"""
Watchlist API endpoints. All of them act on the logged-in user.
"""

from fastapi import APIRouter, Depends

from movie_watchlist.api.dependencies import get_coordinator
from movie_watchlist.api.models.user import MessageResponse
from movie_watchlist.api.models.watchlist import WatchlistResponse
from movie_watchlist.core.coordinator import Coordinator

router = APIRouter(prefix="/api/watchlist", tags=["watchlist"])


@router.get("", response_model=WatchlistResponse)
def get_watchlist(coordinator: Coordinator = Depends(get_coordinator)):
    """Get the current user's watchlist."""
    return WatchlistResponse.model_validate(coordinator.get_watchlist())


@router.post("/{movie_id}", response_model=MessageResponse)
def add_movie(movie_id: str, coordinator: Coordinator = Depends(get_coordinator)):
    """Add a movie to the current user's watchlist (no-op if already there)."""
    return MessageResponse(message=coordinator.add_movie_to_watchlist(movie_id))


@router.delete("/{movie_id}", response_model=MessageResponse)
def remove_movie(movie_id: str, coordinator: Coordinator = Depends(get_coordinator)):
    """Remove a movie from the current user's watchlist (no-op if absent)."""
    return MessageResponse(message=coordinator.remove_movie_from_watchlist(movie_id))
