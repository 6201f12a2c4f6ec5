"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from razzies.db.schema import Movie
from razzies.models.domain import MovieRecord

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy <-> Domain
# ============================================================================


def _movie_to_record(movie: Movie) -> MovieRecord:
    """Convert SQLAlchemy Movie to domain record."""
    return MovieRecord(
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=movie.producers,
        winner=movie.winner,
    )


def _record_to_movie(record: MovieRecord) -> Movie:
    """Convert domain record to SQLAlchemy Movie."""
    return Movie(
        year=record.year,
        title=record.title,
        studios=record.studios,
        producers=record.producers,
        winner=record.winner,
    )


# ============================================================================
# Movie Repository
# ============================================================================


def get_all_movies(session: DbSession) -> list[MovieRecord]:
    """Get every catalogue entry in insertion order."""
    movies = session.scalars(select(Movie).order_by(Movie.id)).all()
    return [_movie_to_record(m) for m in movies]


def replace_movies(session: DbSession, records: Iterable[MovieRecord]) -> int:
    """Replace the whole catalogue table.

    Runs in the caller's transaction; nothing is visible to other
    sessions until the caller commits.

    Returns:
        Number of movies inserted.
    """
    session.execute(delete(Movie))
    movies = [_record_to_movie(r) for r in records]
    session.add_all(movies)
    session.flush()
    return len(movies)
