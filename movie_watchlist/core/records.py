"""
Immutable record values handed out by the stores.

ORM rows never leave a store. Each store rebuilds one of these frozen
dataclasses field by field, so a caller holding a record cannot alias the
stored row and later edits always produce a new value.
"""

import uuid
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Optional, Tuple

from movie_watchlist.database.models import UserRow, MovieRow, WatchlistRow


@dataclass(frozen=True)
class User:
    """A registered user. ``credential`` is the stored hash, never plaintext."""

    id: str
    name: str
    email: str
    credential: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: UserRow) -> "User":
        return cls(
            id=row.id,
            name=row.name,
            email=row.email,
            credential=row.credential,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True)
class MoviePayload:
    """Client-supplied movie fields, used by both create and update."""

    title: str
    description: str
    genre: str
    image_url: str
    cover_image_url: str

    def missing_fields(self) -> Tuple[str, ...]:
        """Names of fields that are empty or whitespace-only."""
        return tuple(
            f.name for f in fields(self)
            if not (getattr(self, f.name) or "").strip()
        )


@dataclass(frozen=True)
class Movie:
    """A catalog entry."""

    id: str
    title: str
    description: str
    genre: str
    image_url: str
    cover_image_url: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: MovieRow) -> "Movie":
        return cls(
            id=row.id,
            title=row.title,
            description=row.description,
            genre=row.genre,
            image_url=row.image_url,
            cover_image_url=row.cover_image_url,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


@dataclass(frozen=True)
class Watchlist:
    """Ordered, duplicate-free movie ids owned by one user."""

    id: str
    user_id: str
    movies: Tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: WatchlistRow) -> "Watchlist":
        return cls(id=row.id, user_id=row.user_id, movies=tuple(row.movies or ()))


def utc_now() -> datetime:
    """Default clock: naive UTC, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    """Default id factory."""
    return str(uuid.uuid4())
