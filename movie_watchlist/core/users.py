"""
User directory: user records keyed by generated id.

Email lookup is a linear scan over the table in insertion order. The unique
index on ``users.email`` backs the uniqueness rule at the storage level, but
the directory checks first so a duplicate surfaces as ``Conflict`` rather
than an integrity error.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from movie_watchlist.core.errors import Conflict
from movie_watchlist.core.records import User, new_id, utc_now
from movie_watchlist.database.models import UserRow

logger = logging.getLogger(__name__)


class UserDirectory:
    """Owns the ``users`` table."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ):
        self._clock = clock
        self._new_id = id_factory

    def create(self, session: Session, name: str, email: str, credential: str) -> User:
        """
        Create a new user.

        Args:
            session: Database session
            name: Display name
            email: Login email, must not already be registered
            credential: Already-hashed credential

        Returns:
            Created User record

        Raises:
            Conflict: If a user with that email already exists
        """
        if self.find_by_email(session, email) is not None:
            raise Conflict(f"A user with email={email} already exists!")

        row = UserRow(
            id=self._new_id(),
            name=name,
            email=email,
            credential=credential,
            created_at=self._clock(),
            updated_at=None,
        )
        session.add(row)
        session.flush()
        logger.info("Created user id=%s", row.id)
        return User.from_row(row)

    def find_by_email(self, session: Session, email: str) -> Optional[User]:
        """Exact, case-sensitive match; first hit in insertion order."""
        for row in session.scalars(select(UserRow).order_by(UserRow.seq)):
            if row.email == email:
                return User.from_row(row)
        return None

    def find_by_id(self, session: Session, user_id: str) -> Optional[User]:
        row = session.scalars(select(UserRow).where(UserRow.id == user_id)).first()
        return User.from_row(row) if row is not None else None

    def count(self, session: Session) -> int:
        return session.scalar(select(func.count(UserRow.seq))) or 0
