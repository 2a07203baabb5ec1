"""
Pydantic schemas for Movie API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from movie_watchlist.core.records import MoviePayload


class MoviePayloadIn(BaseModel):
    """Request body for creating or replacing a movie.

    Blank fields are accepted here and rejected by the catalog, so the
    error shape matches every other validation failure.
    """

    title: str
    description: str
    genre: str
    image_url: str
    cover_image_url: str

    def to_payload(self) -> MoviePayload:
        return MoviePayload(
            title=self.title,
            description=self.description,
            genre=self.genre,
            image_url=self.image_url,
            cover_image_url=self.cover_image_url,
        )


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    genre: str
    image_url: str
    cover_image_url: str
    created_at: datetime
    updated_at: datetime | None = None


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieResponse]
    total: int
