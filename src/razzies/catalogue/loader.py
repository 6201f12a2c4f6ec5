"""Catalogue CSV loader.

Reads the semicolon-separated movie list:

    year;title;studios;producers;winner
    1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes

The first row is a header. Blank lines are ignored. winner is "yes"
(any case) for winners and empty otherwise.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from razzies.models.domain import MovieRecord

logger = logging.getLogger(__name__)

CSV_DELIMITER = ";"


class CatalogueLoadError(Exception):
    """Raised when the catalogue source cannot be read or parsed."""


def load_movies_csv(csv_path: Path) -> list[MovieRecord]:
    """Load movie records from a CSV file.

    Args:
        csv_path: Path to the movie list.

    Returns:
        Records in file order.

    Raises:
        CatalogueLoadError: If the file is missing or a row is malformed.
    """
    csv_path = Path(csv_path)
    if not csv_path.is_file():
        raise CatalogueLoadError(f"Catalogue file not found: {csv_path}")

    movies: list[MovieRecord] = []
    with csv_path.open(encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle, delimiter=CSV_DELIMITER)
        header_seen = False
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            if not header_seen:
                header_seen = True
                continue
            movies.append(parse_movie_row(row, reader.line_num))

    logger.info("Loaded movie list", extra={"path": str(csv_path), "movies": len(movies)})
    return movies


def parse_movie_row(row: list[str], line_number: int) -> MovieRecord:
    """Parse one CSV row into a MovieRecord.

    Args:
        row: Raw cells (year, title, studios, producers, winner).
        line_number: 1-based line in the source file, for error messages.

    Returns:
        Parsed MovieRecord.

    Raises:
        CatalogueLoadError: If a required cell is empty or year is not an integer.
    """
    cells = [cell.strip() for cell in row]
    cells += [""] * (5 - len(cells))
    year, title, studios, producers, winner = cells[:5]

    if not (year and title and studios and producers):
        raise CatalogueLoadError(f"Line {line_number} is incomplete and could not be loaded")

    try:
        year_value = int(year)
    except ValueError as e:
        raise CatalogueLoadError(
            f"Line {line_number}: year {year!r} is not a valid number"
        ) from e

    return MovieRecord(
        year=year_value,
        title=title,
        studios=studios,
        producers=producers,
        winner=winner.lower() == "yes",
    )
