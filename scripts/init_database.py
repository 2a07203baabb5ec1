#!/usr/bin/env python
"""
Database initialization script for the Movie Watchlist service.

This script:
1. Creates the database schema (users, movies, watchlists)
2. Optionally seeds a handful of demo movies and a demo user
3. Verifies the schema and prints record counts

Usage:
    # Create tables only
    python scripts/init_database.py

    # Drop everything and start over with demo data
    python scripts/init_database.py --reset --seed
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_watchlist.core import Coordinator, MoviePayload, Conflict
from movie_watchlist.database import init_database, verify_schema
from movie_watchlist.database.connection import DEFAULT_DB_PATH
from movie_watchlist.utils.logging_config import configure_script_logging, get_logger

logger = get_logger(__name__)


DEMO_MOVIES = [
    MoviePayload(
        title="The Godfather",
        description="The aging patriarch of an organized crime dynasty transfers control to his son.",
        genre="Crime",
        image_url="https://example.com/images/godfather.jpg",
        cover_image_url="https://example.com/covers/godfather.jpg",
    ),
    MoviePayload(
        title="Spirited Away",
        description="A girl wanders into a world ruled by gods, witches and spirits.",
        genre="Animation",
        image_url="https://example.com/images/spirited-away.jpg",
        cover_image_url="https://example.com/covers/spirited-away.jpg",
    ),
    MoviePayload(
        title="Alien",
        description="The crew of a commercial spacecraft encounter a deadly lifeform.",
        genre="Sci-Fi",
        image_url="https://example.com/images/alien.jpg",
        cover_image_url="https://example.com/covers/alien.jpg",
    ),
]

DEMO_USER = ("Demo User", "demo@example.com", "demo")


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def seed_demo_data(coordinator: Coordinator, verbose: bool = True) -> int:
    """
    Insert the demo movies and the demo user.

    Movies whose title already exists are skipped. The demo user is skipped
    if the email is already registered.

    Returns:
        Number of movies created
    """
    if verbose:
        print_section("Seeding Demo Data")

    existing_titles = {m.title for m in coordinator.get_movies()}
    created = 0
    for payload in DEMO_MOVIES:
        if payload.title in existing_titles:
            continue
        movie = coordinator.create_movie(payload)
        created += 1
        if verbose:
            print(f"  Created movie: {movie.title} ({movie.id})")

    try:
        logger.info(coordinator.create_user(*DEMO_USER))
    except Conflict as e:
        logger.info("Skipped demo user: %s", e.message)

    return created


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize the Movie Watchlist database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert demo movies and a demo user'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'Path to SQLite database file (default: {DEFAULT_DB_PATH})'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress verbose output'
    )

    args = parser.parse_args()
    verbose = not args.quiet
    configure_script_logging()

    if verbose:
        print_section("Movie Watchlist Database Initialization")
        print(f"\nDatabase: {args.db_path}")
        print(f"Mode: {'Reset' if args.reset else 'Keep existing'}")

    db_manager = init_database(db_path=args.db_path, reset=args.reset)
    if not verify_schema(db_manager):
        print("\n[ERROR] Schema verification failed")
        sys.exit(1)

    coordinator = Coordinator(db_manager)
    if args.seed:
        seed_demo_data(coordinator, verbose=verbose)

    if verbose:
        stats = coordinator.stats()
        print_section("Summary")
        print(f"  Users:  {stats['users']:,}")
        print(f"  Movies: {stats['movies']:,}")
        print("\nStart the API with: uvicorn movie_watchlist.api.main:app --port 8000")

    sys.exit(0)


if __name__ == "__main__":
    main()
