"""
Tests for the Coordinator: the operations exposed to the API and the rules
that span more than one store.
"""

import threading

import pytest

from movie_watchlist.core import Conflict, NotFound, Unauthorized, ValidationError
from movie_watchlist.database.models import WatchlistRow, UserRow


def all_watchlists(db_manager):
    with db_manager.session_scope() as session:
        return {row.user_id: list(row.movies) for row in session.query(WatchlistRow).all()}


@pytest.fixture
def logged_in(coordinator):
    """John Doe registered and logged in."""
    coordinator.create_user("John Doe", "john@x.com", "pw")
    coordinator.login_user("john@x.com", "pw")
    return coordinator


class TestUserOperations:
    """Tests for create/login/logout."""

    def test_create_user_creates_watchlist(self, coordinator, db_manager):
        message = coordinator.create_user("John Doe", "john@x.com", "pw")

        assert message == "A user with email=john@x.com successfully created!"
        with db_manager.session_scope() as session:
            user = coordinator.users.find_by_email(session, "john@x.com")
            assert user.id
            assert user.credential != "pw"
            assert coordinator.watchlists.get(session, user.id).movies == ()

    def test_duplicate_email_leaves_original_untouched(self, logged_in, db_manager, payload_factory):
        movie = logged_in.create_movie(payload_factory())
        logged_in.add_movie_to_watchlist(movie.id)
        before = all_watchlists(db_manager)

        with pytest.raises(Conflict):
            logged_in.create_user("Impostor", "john@x.com", "other")

        assert all_watchlists(db_manager) == before
        with db_manager.session_scope() as session:
            assert session.query(UserRow).count() == 1

    @pytest.mark.parametrize(
        "name,email,credential",
        [("", "a@x.com", "pw"), ("A", "  ", "pw"), ("A", "a@x.com", "")],
    )
    def test_create_user_requires_fields(self, coordinator, name, email, credential):
        with pytest.raises(ValidationError):
            coordinator.create_user(name, email, credential)
        assert coordinator.stats()["users"] == 0

    def test_login_logout_cycle(self, coordinator):
        coordinator.create_user("John Doe", "john@x.com", "pw")

        assert coordinator.login_user("john@x.com", "pw") == "Successfully logged in!"
        assert coordinator.stats()["logged_in"] is True
        assert coordinator.logout_user() == "Successfully logged out!"
        with pytest.raises(Unauthorized):
            coordinator.logout_user()

    def test_login_failures(self, coordinator):
        coordinator.create_user("John Doe", "john@x.com", "pw")

        with pytest.raises(NotFound):
            coordinator.login_user("jane@x.com", "pw")
        with pytest.raises(Unauthorized):
            coordinator.login_user("john@x.com", "nope")

    def test_oversized_credential_is_validation_error(self, coordinator):
        with pytest.raises(ValidationError, match="maximum size"):
            coordinator.create_user("John Doe", "john@x.com", "x" * 5000)
        assert coordinator.stats()["users"] == 0

    def test_second_login_switches_user(self, coordinator):
        coordinator.create_user("John Doe", "john@x.com", "pw")
        coordinator.create_user("Jane Doe", "jane@x.com", "pw2")
        coordinator.login_user("john@x.com", "pw")
        coordinator.login_user("jane@x.com", "pw2")

        with coordinator.db.session_scope() as session:
            jane = coordinator.users.find_by_email(session, "jane@x.com")
        assert coordinator.get_watchlist().user_id == jane.id


class TestMovieOperations:
    """Tests for movie CRUD through the coordinator."""

    def test_create_then_delete_returns_same_record(self, coordinator, payload_factory):
        created = coordinator.create_movie(payload_factory(title="A"))

        assert coordinator.delete_movie(created.id) == created
        with pytest.raises(NotFound):
            coordinator.get_movie_by_id(created.id)

    def test_delete_returns_latest_edit(self, coordinator, payload_factory):
        created = coordinator.create_movie(payload_factory(title="A"))
        updated = coordinator.update_movie(created.id, payload_factory(title="B"))

        assert coordinator.delete_movie(created.id) == updated

    def test_update_missing_creates_nothing(self, coordinator, payload_factory):
        with pytest.raises(NotFound):
            coordinator.update_movie("missing", payload_factory())
        assert coordinator.get_movies() == []

    def test_update_returns_updated_record(self, coordinator, payload_factory):
        created = coordinator.create_movie(payload_factory())

        updated = coordinator.update_movie(created.id, payload_factory(description="Remastered"))

        assert updated.description == "Remastered"
        assert coordinator.get_movie_by_id(created.id) == updated

    def test_get_movies_and_by_title(self, coordinator, payload_factory):
        a = coordinator.create_movie(payload_factory(title="A"))
        b = coordinator.create_movie(payload_factory(title="B"))

        assert coordinator.get_movies() == [a, b]
        assert coordinator.get_movie_by_title("B") == b
        with pytest.raises(NotFound):
            coordinator.get_movie_by_title("C")
        with pytest.raises(ValidationError):
            coordinator.get_movie_by_title("")

    def test_failed_create_writes_nothing(self, coordinator, payload_factory):
        with pytest.raises(ValidationError):
            coordinator.create_movie(payload_factory(title=""))
        assert coordinator.stats()["movies"] == 0


class TestWatchlistOperations:
    """Tests for watchlist operations and the cascade on movie delete."""

    def test_requires_session(self, coordinator, payload_factory):
        movie = coordinator.create_movie(payload_factory())

        with pytest.raises(Unauthorized):
            coordinator.get_watchlist()
        with pytest.raises(Unauthorized):
            coordinator.add_movie_to_watchlist(movie.id)
        with pytest.raises(Unauthorized):
            coordinator.remove_movie_from_watchlist(movie.id)

    def test_requires_existing_movie(self, logged_in):
        with pytest.raises(NotFound):
            logged_in.add_movie_to_watchlist("missing")
        with pytest.raises(NotFound):
            logged_in.remove_movie_from_watchlist("missing")
        assert logged_in.get_watchlist().movies == ()

    def test_stale_session_is_cleared(self, logged_in, db_manager):
        with db_manager.session_scope() as session:
            session.query(UserRow).delete()

        with pytest.raises(Unauthorized, match="No user is logged in"):
            logged_in.get_watchlist()
        assert logged_in.sessions.current_user_id is None

    def test_missing_watchlist_is_not_found(self, logged_in, db_manager):
        with db_manager.session_scope() as session:
            session.query(WatchlistRow).delete()

        with pytest.raises(NotFound, match="watchlist"):
            logged_in.get_watchlist()
        assert logged_in.sessions.current_user_id is not None

    def test_add_twice(self, logged_in, payload_factory):
        movie = logged_in.create_movie(payload_factory())

        logged_in.add_movie_to_watchlist(movie.id)
        second = logged_in.add_movie_to_watchlist(movie.id)

        assert second == f"Movie with id={movie.id} is already in the watchlist"
        assert logged_in.get_watchlist().movies == (movie.id,)

    def test_remove_never_added(self, logged_in, payload_factory):
        movie = logged_in.create_movie(payload_factory())
        other = logged_in.create_movie(payload_factory(title="Other"))
        logged_in.add_movie_to_watchlist(other.id)

        message = logged_in.remove_movie_from_watchlist(movie.id)

        assert message == f"Movie with id={movie.id} is not in the watchlist"
        assert logged_in.get_watchlist().movies == (other.id,)

    def test_delete_movie_cascades_for_every_user(self, coordinator, db_manager, payload_factory):
        movie = coordinator.create_movie(payload_factory())
        survivor = coordinator.create_movie(payload_factory(title="Survivor"))
        for n in range(3):
            email = f"user{n}@x.com"
            coordinator.create_user(f"User {n}", email, "pw")
            coordinator.login_user(email, "pw")
            coordinator.add_movie_to_watchlist(movie.id)
            if n % 2 == 0:
                coordinator.add_movie_to_watchlist(survivor.id)
        coordinator.create_user("Bystander", "by@x.com", "pw")

        coordinator.delete_movie(movie.id)

        watchlists = all_watchlists(db_manager)
        assert len(watchlists) == 4
        assert all(movie.id not in movies for movies in watchlists.values())
        assert sorted(len(movies) for movies in watchlists.values()) == [0, 0, 1, 1]

    def test_concurrent_deletes_keep_invariant(self, logged_in, db_manager, payload_factory):
        movies = [logged_in.create_movie(payload_factory(title=f"M{i}")) for i in range(10)]
        for movie in movies:
            logged_in.add_movie_to_watchlist(movie.id)

        threads = [
            threading.Thread(target=logged_in.delete_movie, args=(movie.id,))
            for movie in movies[:5]
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert list(logged_in.get_watchlist().movies) == [m.id for m in movies[5:]]
        assert len(logged_in.get_movies()) == 5


def test_end_to_end_scenario(coordinator, payload_factory):
    """Register, log in, watch a movie, delete it, and see the watchlist empty."""
    coordinator.create_user("John Doe", "john@x.com", "pw")
    coordinator.login_user("john@x.com", "pw")
    movie = coordinator.create_movie(payload_factory(title="The Godfather"))

    coordinator.add_movie_to_watchlist(movie.id)
    assert list(coordinator.get_watchlist().movies) == [movie.id]

    coordinator.delete_movie(movie.id)
    assert list(coordinator.get_watchlist().movies) == []

