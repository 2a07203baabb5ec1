"""
Coordinator: the operations the service exposes.

Each operation runs inside one database unit of work and under one process
lock, so operations never interleave and a failed operation leaves every
table as it was. Cross-store rules live here: a user is always created
together with its watchlist, and watchlist edits require a logged-in user
and an existing movie.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from movie_watchlist.core.errors import NotFound, ValidationError
from movie_watchlist.core.movies import MovieCatalog
from movie_watchlist.core.records import Movie, MoviePayload, Watchlist
from movie_watchlist.core.security import CredentialHasher
from movie_watchlist.core.session import SessionTracker
from movie_watchlist.core.users import UserDirectory
from movie_watchlist.core.watchlists import WatchlistStore
from movie_watchlist.database.connection import DatabaseManager

logger = logging.getLogger(__name__)


class Coordinator:
    """
    Composes the user directory, movie catalog, watchlist store and session
    tracker behind a single set of operations.

    Args:
        db_manager: Database manager providing ``session_scope()``
        users: User directory (default: new instance)
        watchlists: Watchlist store (default: new instance)
        movies: Movie catalog, must cascade into ``watchlists``
            (default: new instance bound to ``watchlists``)
        hasher: Credential hasher (default: pbkdf2_sha256)
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        users: Optional[UserDirectory] = None,
        watchlists: Optional[WatchlistStore] = None,
        movies: Optional[MovieCatalog] = None,
        hasher: Optional[CredentialHasher] = None,
    ):
        self.db = db_manager
        self.users = users or UserDirectory()
        self.watchlists = watchlists or WatchlistStore()
        self.movies = movies or MovieCatalog(self.watchlists)
        self.hasher = hasher or CredentialHasher()
        self.sessions = SessionTracker(self.users, self.hasher)
        self._lock = threading.RLock()

    # ==================== USER OPERATIONS ====================

    def create_user(self, name: str, email: str, credential: str) -> str:
        """
        Register a user and create their empty watchlist.

        Raises:
            ValidationError: If any field is empty
            Conflict: If the email is already registered
        """
        missing = [
            field for field, value in (("name", name), ("email", email), ("credential", credential))
            if not (value or "").strip()
        ]
        if missing:
            raise ValidationError(f"Missing required user fields: {', '.join(missing)}")

        with self._lock, self.db.session_scope() as session:
            user = self.users.create(session, name, email, self.hasher.hash(credential))
            self.watchlists.create_for(session, user.id)
        return f"A user with email={email} successfully created!"

    def login_user(self, email: str, credential: str) -> str:
        with self._lock, self.db.session_scope() as session:
            return self.sessions.login(session, email, credential)

    def logout_user(self) -> str:
        with self._lock:
            return self.sessions.logout()

    # ==================== MOVIE OPERATIONS ====================

    def get_movies(self) -> List[Movie]:
        with self._lock, self.db.session_scope() as session:
            return self.movies.list_all(session)

    def get_movie_by_id(self, movie_id: str) -> Movie:
        with self._lock, self.db.session_scope() as session:
            movie = self.movies.get_by_id(session, movie_id)
        if movie is None:
            raise NotFound(f"A movie with id={movie_id} not found")
        return movie

    def get_movie_by_title(self, title: str) -> Movie:
        with self._lock, self.db.session_scope() as session:
            return self.movies.get_by_title(session, title)

    def create_movie(self, payload: MoviePayload) -> Movie:
        with self._lock, self.db.session_scope() as session:
            return self.movies.create(session, payload)

    def update_movie(self, movie_id: str, payload: MoviePayload) -> Movie:
        with self._lock, self.db.session_scope() as session:
            return self.movies.update(session, movie_id, payload)

    def delete_movie(self, movie_id: str) -> Movie:
        """Delete a movie; every watchlist drops it in the same unit of work."""
        with self._lock, self.db.session_scope() as session:
            return self.movies.delete(session, movie_id)

    # ==================== WATCHLIST OPERATIONS ====================

    def get_watchlist(self) -> Watchlist:
        """
        The current user's watchlist.

        Raises:
            Unauthorized: If nobody is logged in
            NotFound: If the user somehow has no watchlist
        """
        with self._lock, self.db.session_scope() as session:
            user = self.sessions.require_current_user(session)
            watchlist = self.watchlists.get(session, user.id)
        if watchlist is None:
            raise NotFound(f"A watchlist for user with id={user.id} not found")
        return watchlist

    def add_movie_to_watchlist(self, movie_id: str) -> str:
        with self._lock, self.db.session_scope() as session:
            user = self.sessions.require_current_user(session)
            self._require_movie(session, movie_id)
            return self.watchlists.add_movie(session, user.id, movie_id)

    def remove_movie_from_watchlist(self, movie_id: str) -> str:
        with self._lock, self.db.session_scope() as session:
            user = self.sessions.require_current_user(session)
            self._require_movie(session, movie_id)
            return self.watchlists.remove_movie(session, user.id, movie_id)

    def _require_movie(self, session, movie_id: str) -> None:
        if self.movies.get_by_id(session, movie_id) is None:
            raise NotFound(f"A movie with id={movie_id} not found")

    # ==================== SYSTEM ====================

    def stats(self) -> Dict[str, Any]:
        """Record counts and session state for health checks."""
        with self._lock, self.db.session_scope() as session:
            return {
                "users": self.users.count(session),
                "movies": self.movies.count(session),
                "logged_in": self.sessions.current_user_id is not None,
            }
