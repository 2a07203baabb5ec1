"""
Movie API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from movie_watchlist.api.dependencies import get_coordinator
from movie_watchlist.api.models.movie import MoviePayloadIn, MovieResponse, MovieList
from movie_watchlist.core.coordinator import Coordinator

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MovieList)
def list_movies(coordinator: Coordinator = Depends(get_coordinator)):
    """List every movie in insertion order."""
    movies = coordinator.get_movies()
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in movies],
        total=len(movies),
    )


@router.get("/by-title", response_model=MovieResponse)
def get_movie_by_title(
    title: str = Query(""),
    coordinator: Coordinator = Depends(get_coordinator),
):
    """Get the first movie with exactly this title."""
    return MovieResponse.model_validate(coordinator.get_movie_by_title(title))


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, coordinator: Coordinator = Depends(get_coordinator)):
    """Get movie details by ID."""
    return MovieResponse.model_validate(coordinator.get_movie_by_id(movie_id))


@router.post("", response_model=MovieResponse, status_code=201)
def create_movie(movie_in: MoviePayloadIn, coordinator: Coordinator = Depends(get_coordinator)):
    """Add a movie to the catalog."""
    return MovieResponse.model_validate(coordinator.create_movie(movie_in.to_payload()))


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: str,
    movie_in: MoviePayloadIn,
    coordinator: Coordinator = Depends(get_coordinator),
):
    """Replace every field of a movie; returns the updated record."""
    return MovieResponse.model_validate(coordinator.update_movie(movie_id, movie_in.to_payload()))


@router.delete("/{movie_id}", response_model=MovieResponse)
def delete_movie(movie_id: str, coordinator: Coordinator = Depends(get_coordinator)):
    """Delete a movie and drop it from every watchlist; returns the removed record."""
    return MovieResponse.model_validate(coordinator.delete_movie(movie_id))
