"""
Session tracking: the single "current user" slot for the process.

The slot lives on a SessionTracker instance owned by the Coordinator, not in
a module global. It only ever holds a user id; the user record is looked up
again whenever it is needed.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from movie_watchlist.core.errors import NotFound, Unauthorized
from movie_watchlist.core.records import User
from movie_watchlist.core.security import CredentialHasher
from movie_watchlist.core.users import UserDirectory

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "No user is logged in!"


class SessionTracker:
    """Holds zero or one authenticated user id."""

    def __init__(self, users: UserDirectory, hasher: CredentialHasher):
        self._users = users
        self._hasher = hasher
        self._current: Optional[str] = None

    @property
    def current_user_id(self) -> Optional[str]:
        return self._current

    def login(self, session: Session, email: str, credential: str) -> str:
        """
        Authenticate and make the user current.

        Logging in while someone else is logged in replaces them.

        Raises:
            NotFound: If no user has that email
            Unauthorized: If the credential does not match
        """
        user = self._users.find_by_email(session, email)
        if user is None:
            raise NotFound(f"A user with email={email} does not exist!")
        if not self._hasher.verify(credential, user.credential):
            logger.warning("Rejected login for user id=%s: wrong credential", user.id)
            raise Unauthorized("Wrong password!")

        self._current = user.id
        logger.info("User id=%s logged in", user.id)
        return "Successfully logged in!"

    def logout(self) -> str:
        """
        Clear the current session.

        Raises:
            Unauthorized: If nobody is logged in
        """
        if self._current is None:
            raise Unauthorized(NOT_LOGGED_IN)
        logger.info("User id=%s logged out", self._current)
        self._current = None
        return "Successfully logged out!"

    def require_current_user(self, session: Session) -> User:
        """
        Resolve the current user.

        Raises:
            Unauthorized: If nobody is logged in or the id no longer resolves
        """
        if self._current is None:
            raise Unauthorized(NOT_LOGGED_IN)
        user = self._users.find_by_id(session, self._current)
        if user is None:
            logger.warning("Session user id=%s no longer exists; clearing session", self._current)
            self._current = None
            raise Unauthorized(NOT_LOGGED_IN)
        return user

    def reset(self) -> None:
        """Forget the current user (process restart semantics)."""
        self._current = None
