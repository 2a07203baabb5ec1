"""
Unit tests for database connection management and schema initialization.
"""

import pytest
from sqlalchemy import inspect

from movie_watchlist.database import init_database, verify_schema, reset_db_manager
from movie_watchlist.database.connection import DatabaseManager, get_database_url, MEMORY_DB_PATH
from movie_watchlist.database.models import MovieRow, WatchlistRow


class TestDatabaseURL:
    """Tests for get_database_url."""

    def test_memory_url(self):
        assert get_database_url(MEMORY_DB_PATH) == "sqlite://"

    def test_file_url_creates_directory(self, tmp_path):
        db_path = tmp_path / "nested" / "watchlist.db"

        url = get_database_url(str(db_path))

        assert url == f"sqlite:///{db_path}"
        assert db_path.parent.exists()


class TestDatabaseManager:
    """Tests for DatabaseManager."""

    def test_create_tables(self, db_manager):
        tables = set(inspect(db_manager.engine).get_table_names())
        assert {'users', 'movies', 'watchlists'} <= tables
        assert verify_schema(db_manager)

    def test_verify_schema_detects_missing_tables(self):
        manager = DatabaseManager(db_path=MEMORY_DB_PATH)
        assert not verify_schema(manager)
        manager.close()

    def test_session_scope_commits(self, db_manager, clock):
        with db_manager.session_scope() as session:
            session.add(MovieRow(
                id="m1", title="T", description="D", genre="G",
                image_url="i", cover_image_url="c", created_at=clock(),
            ))

        with db_manager.session_scope() as session:
            assert session.get(MovieRow, 1).id == "m1"

    def test_session_scope_rolls_back_on_error(self, db_manager, clock):
        with pytest.raises(RuntimeError):
            with db_manager.session_scope() as session:
                session.add(MovieRow(
                    id="m1", title="T", description="D", genre="G",
                    image_url="i", cover_image_url="c", created_at=clock(),
                ))
                session.flush()
                raise RuntimeError("boom")

        with db_manager.session_scope() as session:
            assert session.query(MovieRow).count() == 0

    def test_watchlist_requires_existing_user(self, db_manager):
        """Foreign keys are enforced, so orphan watchlists cannot be stored."""
        from sqlalchemy.exc import IntegrityError

        with pytest.raises(IntegrityError):
            with db_manager.session_scope() as session:
                session.add(WatchlistRow(user_id="ghost", id="w1", movies=[]))

    def test_reset_database(self, db_manager, clock):
        with db_manager.session_scope() as session:
            session.add(MovieRow(
                id="m1", title="T", description="D", genre="G",
                image_url="i", cover_image_url="c", created_at=clock(),
            ))

        db_manager.reset_database()

        with db_manager.session_scope() as session:
            assert session.query(MovieRow).count() == 0


def test_init_database_on_file(tmp_path):
    reset_db_manager()
    try:
        manager = init_database(db_path=str(tmp_path / "watchlist.db"))
        assert verify_schema(manager)
        assert (tmp_path / "watchlist.db").exists()
    finally:
        reset_db_manager()
