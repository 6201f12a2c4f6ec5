"""Movies API endpoints.

GET /api/movies                       - List movies (filters + pagination)
GET /api/movies/producers/intervals   - Shortest/longest producer win intervals
"""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends, Query

from razzies.aggregation.intervals import producer_intervals
from razzies.api.deps import get_catalogue
from razzies.api.errors import InvalidQueryParameterError
from razzies.catalogue.listing import list_movies
from razzies.catalogue.store import DEFAULT_PAGE, MAX_PER_PAGE, CatalogueStore
from razzies.models.domain import MovieFilters, Pagination
from razzies.models.types import ErrorResponse, MoviePageResponse, ProducerIntervalsResponse

router = APIRouter()

TRUE_VALUES = ("true", "1", "yes")
FALSE_VALUES = ("false", "0", "no")
MIN_YEAR = 1900

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)(?:\.0*)?\s*\Z")


def _parse_winner(winner: str | None) -> bool | None:
    if winner is None:
        return None

    normalized = winner.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False

    raise InvalidQueryParameterError(f'Invalid "winner" parameter: {winner}. Use true or false.')


def _parse_int(value: str) -> int | None:
    # ASCII digits only; a zero fraction ("1990.0") is still an integer
    match = _INTEGER.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _parse_year(year: str | None) -> int | None:
    if year is None:
        return None

    parsed = _parse_int(year)
    if parsed is None or parsed < MIN_YEAR:
        raise InvalidQueryParameterError(f'Invalid "year" parameter: {year}. Provide a numeric year.')
    return parsed


def _parse_positive_int(value: str | None, default: int, label: str) -> int:
    if value is None:
        return default

    parsed = _parse_int(value)
    if parsed is None or parsed <= 0:
        raise InvalidQueryParameterError(f'Invalid "{label}" parameter: {value}. Provide a positive integer.')
    return parsed


def _parse_pagination(page: str | None, per_page: str | None) -> Pagination:
    parsed_page = _parse_positive_int(page, DEFAULT_PAGE, "page")
    parsed_per_page = _parse_positive_int(per_page, MAX_PER_PAGE, "perPage")

    if parsed_per_page > MAX_PER_PAGE:
        raise InvalidQueryParameterError(f'"perPage" must be less than or equal to {MAX_PER_PAGE}.')

    return Pagination(page=parsed_page, per_page=parsed_per_page)


@router.get(
    "/movies",
    response_model=MoviePageResponse,
    responses={400: {"model": ErrorResponse}},
)
def get_movies(
    winner: str | None = Query(default=None, description="true/false (also 1/0, yes/no)"),
    year: str | None = Query(default=None, description="Award year, e.g. 1990"),
    page: str | None = Query(default=None, description="1-based page number"),
    per_page: str | None = Query(
        default=None, alias="perPage", description=f"Page size, at most {MAX_PER_PAGE}"
    ),
    catalogue: CatalogueStore = Depends(get_catalogue),
) -> MoviePageResponse:
    """List movies.

    Args:
        winner: Optional winner filter.
        year: Optional year filter.
        page: Optional page number.
        per_page: Optional page size.
        catalogue: Movie catalogue (injected).

    Returns:
        MoviePageResponse ordered by year then title.

    Raises:
        InvalidQueryParameterError: 400 for unparseable or out-of-range parameters.
    """
    filters = MovieFilters(year=_parse_year(year), winner=_parse_winner(winner))
    pagination = _parse_pagination(page, per_page)

    return list_movies(catalogue, filters, pagination)


@router.get("/movies/producers/intervals", response_model=ProducerIntervalsResponse)
def get_producer_intervals(
    catalogue: CatalogueStore = Depends(get_catalogue),
) -> ProducerIntervalsResponse:
    """Get producers with the shortest and longest intervals between wins."""
    return producer_intervals(catalogue)
