"""
SQLAlchemy ORM models for the watchlist service database.

This module defines the users, movies and watchlists tables. Each table is an
independent key -> record collection; the ``seq`` columns give the stable
insertion order that listing and first-match lookups rely on.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import Integer, String, Text, JSON, TIMESTAMP, Index, ForeignKey
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class UserRow(Base):
    """
    User table storing identity and the stored credential.

    Attributes:
        seq: Insertion order, auto-incremented
        id: Generated unique identifier (primary lookup key)
        name: Display name
        email: Login email, unique across all users
        credential: Hashed credential
        created_at: Timestamp when record was created
        updated_at: Timestamp of last mutation (never set today)
    """
    __tablename__ = 'users'

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    credential: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(TIMESTAMP, nullable=True)

    def __repr__(self) -> str:
        return f"<UserRow(id={self.id}, email='{self.email}')>"


class MovieRow(Base):
    """
    Movie table storing catalog entries.

    Attributes:
        seq: Insertion order, auto-incremented
        id: Generated unique identifier
        title: Movie title (not unique)
        description: Free-text description
        genre: Genre label
        image_url: Poster image URL
        cover_image_url: Cover/backdrop image URL
        created_at: Timestamp when record was created
        updated_at: Timestamp of the last update, None until updated
    """
    __tablename__ = 'movies'

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image_url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(TIMESTAMP, nullable=True)

    __table_args__ = (
        Index('idx_movies_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<MovieRow(id={self.id}, title='{self.title}')>"


class WatchlistRow(Base):
    """
    Watchlist table, one row per user.

    Attributes:
        user_id: Owning user's id (primary key)
        id: Generated watchlist identifier
        movies: JSON array of movie ids, ordered, no duplicates
    """
    __tablename__ = 'watchlists'

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey('users.id', ondelete='CASCADE'),
        primary_key=True
    )
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    movies: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<WatchlistRow(user_id={self.user_id}, movies={len(self.movies or [])})>"
