"""In-memory catalogue store.

Holds the movie records as an immutable snapshot, pre-sorted by year
then title, and answers filter/paginate and winner queries over it.
"""

from __future__ import annotations

import logging
from typing import Iterable

from razzies.core.names import collation_key
from razzies.models.domain import MovieFilters, MoviePage, MovieRecord, Pagination

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
MAX_PER_PAGE = 50


def _catalogue_order(movie: MovieRecord) -> tuple:
    return (movie.year, collation_key(movie.title))


def _is_positive_int(value: object) -> bool:
    # bool is an int subclass but never a valid page number
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def resolve_pagination(pagination: Pagination | None) -> tuple[int, int, int]:
    """Resolve requested pagination to (page, per_page, offset).

    Non-positive or non-integer values fall back to the defaults, and
    per_page is capped at MAX_PER_PAGE.

    Args:
        pagination: Requested window, or None for the first full page.

    Returns:
        Tuple of (page, per_page, offset).
    """
    if pagination is None:
        pagination = Pagination()

    page = pagination.page if _is_positive_int(pagination.page) else DEFAULT_PAGE
    per_page = pagination.per_page if _is_positive_int(pagination.per_page) else MAX_PER_PAGE
    per_page = min(per_page, MAX_PER_PAGE)

    return page, per_page, (page - 1) * per_page


class CatalogueStore:
    """Read-only movie catalogue.

    Queries read a single tuple reference; replace() swaps that
    reference, so each call sees one consistent snapshot.
    """

    def __init__(self, records: Iterable[MovieRecord] = ()):
        self._movies: tuple[MovieRecord, ...] = tuple(sorted(records, key=_catalogue_order))

    def __len__(self) -> int:
        return len(self._movies)

    def replace(self, records: Iterable[MovieRecord]) -> None:
        """Replace the whole catalogue with a new snapshot."""
        snapshot = tuple(sorted(records, key=_catalogue_order))
        self._movies = snapshot
        logger.info("Catalogue snapshot replaced", extra={"movies": len(snapshot)})

    def find_movies(
        self,
        filters: MovieFilters | None = None,
        pagination: Pagination | None = None,
    ) -> MoviePage:
        """Find movies matching filters, one page at a time.

        Args:
            filters: Exact-match year/winner filters (ANDed).
            pagination: Requested page window.

        Returns:
            MoviePage with the pre-pagination total and the page slice.
            Pages past the end have no items.
        """
        if filters is None:
            filters = MovieFilters()

        movies = self._movies
        matched = [
            movie
            for movie in movies
            if (filters.year is None or movie.year == filters.year)
            and (filters.winner is None or movie.winner == filters.winner)
        ]

        page, per_page, offset = resolve_pagination(pagination)

        return MoviePage(
            total=len(matched),
            page=page,
            per_page=per_page,
            items=matched[offset : offset + per_page],
        )

    def find_winner_movies(self) -> list[MovieRecord]:
        """All winning movies, ordered by year then title."""
        return [movie for movie in self._movies if movie.winner]
