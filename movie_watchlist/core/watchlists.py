"""
Watchlist store: one watchlist per user, keyed by user id.

The ``movies`` column is a JSON array. It is always replaced with a new list,
never mutated in place, so the ORM sees every change.
"""

import logging
from typing import Callable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from movie_watchlist.core.errors import Conflict, NotFound
from movie_watchlist.core.records import Watchlist, new_id
from movie_watchlist.database.models import WatchlistRow

logger = logging.getLogger(__name__)


class WatchlistStore:
    """Owns the ``watchlists`` table."""

    def __init__(self, id_factory: Callable[[], str] = new_id):
        self._new_id = id_factory

    def _row(self, session: Session, user_id: str) -> Optional[WatchlistRow]:
        return session.get(WatchlistRow, user_id)

    def _require_row(self, session: Session, user_id: str) -> WatchlistRow:
        row = self._row(session, user_id)
        if row is None:
            raise NotFound(f"A watchlist for user with id={user_id} not found")
        return row

    def create_for(self, session: Session, user_id: str) -> Watchlist:
        """
        Create the empty watchlist for a freshly created user.

        Raises:
            Conflict: If the user already has a watchlist
        """
        if self._row(session, user_id) is not None:
            raise Conflict(f"A watchlist for user with id={user_id} already exists")

        row = WatchlistRow(user_id=user_id, id=self._new_id(), movies=[])
        session.add(row)
        session.flush()
        return Watchlist.from_row(row)

    def get(self, session: Session, user_id: str) -> Optional[Watchlist]:
        row = self._row(session, user_id)
        return Watchlist.from_row(row) if row is not None else None

    def add_movie(self, session: Session, user_id: str, movie_id: str) -> str:
        """
        Append ``movie_id`` to the user's watchlist.

        Adding a movie that is already present is a successful no-op. The
        caller is responsible for checking that the movie exists.

        Returns:
            Outcome message
        """
        row = self._require_row(session, user_id)
        if movie_id in row.movies:
            return f"Movie with id={movie_id} is already in the watchlist"

        row.movies = [*row.movies, movie_id]
        session.flush()
        logger.info("Added movie id=%s to watchlist of user id=%s", movie_id, user_id)
        return f"Successfully added movie with id={movie_id} to watchlist"

    def remove_movie(self, session: Session, user_id: str, movie_id: str) -> str:
        """Remove ``movie_id``; removing an absent movie is a successful no-op."""
        row = self._require_row(session, user_id)
        if movie_id not in row.movies:
            return f"Movie with id={movie_id} is not in the watchlist"

        row.movies = [m for m in row.movies if m != movie_id]
        session.flush()
        logger.info("Removed movie id=%s from watchlist of user id=%s", movie_id, user_id)
        return f"Successfully removed movie with id={movie_id} from watchlist"

    def cascade_remove(self, session: Session, movie_id: str) -> int:
        """
        Drop ``movie_id`` from every watchlist.

        Only rows that actually contained the movie are rewritten.

        Returns:
            Number of watchlists changed
        """
        changed = 0
        for row in session.scalars(select(WatchlistRow)):
            if movie_id in row.movies:
                row.movies = [m for m in row.movies if m != movie_id]
                changed += 1
        session.flush()
        if changed:
            logger.info("Removed deleted movie id=%s from %d watchlist(s)", movie_id, changed)
        return changed
