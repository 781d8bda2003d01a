#!/usr/bin/env python
"""
Database initialization script for the movie API.

This script:
1. Creates the database schema (or drops and recreates it with --reset)
2. Optionally seeds sample movies, or movies from a JSON file
3. Verifies the schema

Usage:
    # Create tables in the configured database (DATABASE_URL)
    python scripts/init_database.py

    # Drop everything, recreate and add the sample movies
    python scripts/init_database.py --reset --seed

    # Seed from a JSON file holding a list of movie objects
    python scripts/init_database.py --seed-file movies.json
"""

import sys
import json
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moviedb.api.config import get_database_url, get_db_query_timeout
from moviedb.core.movie import Movie, validate_movie
from moviedb.database import DatabaseManager, SQLMovieCRUD, init_database, verify_schema
from moviedb.utils.logging_config import setup_logging
from moviedb.utils.validator import Validator


SAMPLE_MOVIES = [
    {"title": "Casablanca", "year": 1942, "runtime": 102, "genres": ["drama", "romance", "war"]},
    {"title": "Black Panther", "year": 2018, "runtime": 134, "genres": ["action", "adventure"]},
    {"title": "Deadpool", "year": 2016, "runtime": 108, "genres": ["action", "comedy"]},
    {"title": "The Breakfast Club", "year": 1985, "runtime": 96, "genres": ["drama"]},
    {"title": "Moana", "year": 2016, "runtime": 107, "genres": ["animation", "adventure"]},
]


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def seed_movies(db_manager, movies, timeout, verbose=True):
    """
    Insert movies through the movie store, skipping invalid entries.

    Args:
        db_manager: DatabaseManager instance
        movies: List of dicts with title, year, runtime and genres
        timeout: Per-operation timeout in seconds
        verbose: Print progress information

    Returns:
        Number of movies inserted
    """
    if verbose:
        print_section("Seeding Movies")

    store = SQLMovieCRUD(db_manager, timeout=timeout)
    inserted_count = 0

    for data in movies:
        movie = Movie(
            title=data.get("title", ""),
            year=data.get("year", 0),
            runtime=data.get("runtime", 0),
            genres=data.get("genres"),
        )

        v = Validator()
        validate_movie(v, movie)
        if not v.valid():
            print(f"[SKIP] {movie.title!r}: {v.errors}")
            continue

        store.insert(movie)
        inserted_count += 1

        if verbose:
            print(f"  Inserted movie {movie.id}: {movie.title} ({movie.year})")

    if verbose:
        print(f"\n[SUCCESS] Inserted {inserted_count} of {len(movies)} movies")

    return inserted_count


def main():
    parser = argparse.ArgumentParser(description="Initialize the movie database")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (default: DATABASE_URL)")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    parser.add_argument("--seed", action="store_true", help="Insert the sample movies")
    parser.add_argument("--seed-file", default=None, help="JSON file with a list of movies to insert")
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    args = parser.parse_args()

    verbose = not args.quiet
    setup_logging(level="WARNING" if args.quiet else "INFO")

    try:
        db_manager = DatabaseManager(database_url=args.database_url or get_database_url())
        init_database(db_manager=db_manager, reset=args.reset)

        timeout = get_db_query_timeout()
        if args.seed:
            seed_movies(db_manager, SAMPLE_MOVIES, timeout, verbose=verbose)
        if args.seed_file:
            with open(args.seed_file, "r", encoding="utf-8") as f:
                seed_movies(db_manager, json.load(f), timeout, verbose=verbose)

        success = verify_schema(db_manager)
        db_manager.close()
        sys.exit(0 if success else 1)

    except Exception as e:
        print(f"\n[ERROR] Initialization failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
