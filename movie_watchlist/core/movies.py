"""
Movie catalog: CRUD over the ``movies`` table.

Deleting a movie cascades into the watchlist store before the unit of work
commits, so no watchlist can outlive a movie it references.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from movie_watchlist.core.errors import NotFound, ValidationError
from movie_watchlist.core.records import Movie, MoviePayload, new_id, utc_now
from movie_watchlist.core.watchlists import WatchlistStore
from movie_watchlist.database.models import MovieRow

logger = logging.getLogger(__name__)


def _validate(payload: MoviePayload) -> None:
    missing = payload.missing_fields()
    if missing:
        raise ValidationError(f"Missing required movie fields: {', '.join(missing)}")


class MovieCatalog:
    """Owns the ``movies`` table."""

    def __init__(
        self,
        watchlists: WatchlistStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        self._watchlists = watchlists
        self._clock = clock
        self._new_id = id_factory

    def _row(self, session: Session, movie_id: str) -> Optional[MovieRow]:
        return session.scalars(select(MovieRow).where(MovieRow.id == movie_id)).first()

    def create(self, session: Session, payload: MoviePayload) -> Movie:
        """
        Create a new movie.

        Args:
            session: Database session
            payload: Movie fields, all required

        Returns:
            Created Movie record

        Raises:
            ValidationError: If any field is empty or whitespace-only
        """
        _validate(payload)

        row = MovieRow(
            id=self._new_id(),
            title=payload.title,
            description=payload.description,
            genre=payload.genre,
            image_url=payload.image_url,
            cover_image_url=payload.cover_image_url,
            created_at=self._clock(),
            updated_at=None,
        )
        session.add(row)
        session.flush()
        logger.info("Created movie id=%s title=%r", row.id, row.title)
        return Movie.from_row(row)

    def get_by_id(self, session: Session, movie_id: str) -> Optional[Movie]:
        row = self._row(session, movie_id)
        return Movie.from_row(row) if row is not None else None

    def get_by_title(self, session: Session, title: str) -> Movie:
        """
        First movie with exactly this title, in storage order.

        Raises:
            ValidationError: If the title is empty
            NotFound: If no movie has that title
        """
        if not (title or "").strip():
            raise ValidationError("A movie title is required")

        row = session.scalars(
            select(MovieRow).where(MovieRow.title == title).order_by(MovieRow.seq)
        ).first()
        if row is None:
            raise NotFound(f"A movie with title={title} not found")
        return Movie.from_row(row)

    def list_all(self, session: Session) -> List[Movie]:
        """All movies in insertion order."""
        return [Movie.from_row(row) for row in session.scalars(select(MovieRow).order_by(MovieRow.seq))]

    def count(self, session: Session) -> int:
        return session.scalar(select(func.count(MovieRow.seq))) or 0

    def update(self, session: Session, movie_id: str, payload: MoviePayload) -> Movie:
        """
        Replace every payload field of an existing movie.

        ``id`` and ``created_at`` are preserved and ``updated_at`` is
        refreshed.

        Returns:
            The updated Movie record

        Raises:
            NotFound: If the movie does not exist
            ValidationError: If any field is empty or whitespace-only
        """
        row = self._row(session, movie_id)
        if row is None:
            raise NotFound(f"A movie with id={movie_id} not found")
        _validate(payload)

        row.title = payload.title
        row.description = payload.description
        row.genre = payload.genre
        row.image_url = payload.image_url
        row.cover_image_url = payload.cover_image_url
        row.updated_at = self._clock()
        session.flush()
        logger.info("Updated movie id=%s", movie_id)
        return Movie.from_row(row)

    def delete(self, session: Session, movie_id: str) -> Movie:
        """
        Remove a movie and strip it from every watchlist.

        Returns:
            The removed Movie record

        Raises:
            NotFound: If the movie does not exist
        """
        row = self._row(session, movie_id)
        if row is None:
            raise NotFound(f"A movie with id={movie_id} not found")

        removed = Movie.from_row(row)
        session.delete(row)
        session.flush()
        self._watchlists.cascade_remove(session, movie_id)
        logger.info("Deleted movie id=%s", movie_id)
        return removed
