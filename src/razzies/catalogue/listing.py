"""Movie listing for API consumers.

Turns catalogue pages into response payloads with studios and
producers as name lists.
"""

from __future__ import annotations

from razzies.catalogue.store import CatalogueStore
from razzies.models.domain import MovieFilters, MovieRecord, Pagination
from razzies.models.types import MoviePageResponse, MovieView


def _build_movie_view(movie: MovieRecord) -> MovieView:
    """Convert MovieRecord to its API view."""
    return MovieView(
        year=movie.year,
        title=movie.title,
        studios=list(movie.studio_names),
        producers=list(movie.producer_names),
        winner=movie.winner,
    )


def list_movies(
    catalogue: CatalogueStore,
    filters: MovieFilters | None = None,
    pagination: Pagination | None = None,
) -> MoviePageResponse:
    """List one page of movies.

    Args:
        catalogue: Catalogue to query.
        filters: Optional year/winner filters.
        pagination: Optional page window.

    Returns:
        MoviePageResponse with resolved page, per_page and total.
    """
    result = catalogue.find_movies(filters, pagination)

    return MoviePageResponse(
        total=result.total,
        page=result.page,
        per_page=result.per_page,
        items=[_build_movie_view(movie) for movie in result.items],
    )
