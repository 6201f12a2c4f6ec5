"""Catalogue startup loading.

Seeds the movies table from the CSV movie list and reads it back as
domain records for the in-memory catalogue.
"""

from __future__ import annotations

import logging
from pathlib import Path

from razzies.catalogue.loader import CatalogueLoadError, load_movies_csv
from razzies.db import repo
from razzies.db.session import get_db_session, init_db
from razzies.models.domain import MovieRecord

logger = logging.getLogger(__name__)


def seed_database(csv_path: Path, db_path: Path | None = None) -> int:
    """Replace the movies table with the contents of the CSV.

    Args:
        csv_path: Movie list to load.
        db_path: SQLite file, or None for in-memory.

    Returns:
        Number of movies stored.

    Raises:
        CatalogueLoadError: If the CSV cannot be read or parsed.
    """
    records = load_movies_csv(csv_path)

    init_db(db_path)
    with get_db_session(db_path) as session:
        count = repo.replace_movies(session, records)

    logger.info("Seeded movies table", extra={"movies": count, "db_path": str(db_path)})
    return count


def load_catalogue_records(csv_path: Path, db_path: Path | None = None) -> list[MovieRecord]:
    """Load catalogue records for serving.

    When the CSV exists it is reloaded into the database first.
    Otherwise an existing database is served as-is.

    Args:
        csv_path: Movie list to seed from.
        db_path: SQLite file, or None for in-memory.

    Returns:
        Every stored movie.

    Raises:
        CatalogueLoadError: If the CSV is malformed, or there is neither a
            CSV nor a populated database.
    """
    csv_found = Path(csv_path).is_file()
    if csv_found:
        seed_database(csv_path, db_path)
    else:
        init_db(db_path)
        logger.warning("Movie list not found, using stored catalogue", extra={"path": str(csv_path)})

    with get_db_session(db_path) as session:
        records = repo.get_all_movies(session)

    if not csv_found and not records:
        raise CatalogueLoadError(f"No movies available: {csv_path} missing and database empty")

    return records
