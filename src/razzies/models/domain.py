"""Domain models for the Razzies catalogue.

Pure Python dataclasses representing catalogue entries and derived
interval statistics. Independent of SQLAlchemy and pydantic so the
catalogue and aggregation layers stay free of transport concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from razzies.core.names import split_names

# ============================================================================
# Catalogue Domain
# ============================================================================


@dataclass(frozen=True)
class MovieRecord:
    """One catalogue entry.

    studios and producers keep the raw delimited strings; the parsed
    name lists are computed once on construction.
    """

    year: int
    title: str
    studios: str
    producers: str
    winner: bool
    studio_names: tuple[str, ...] = field(init=False, repr=False, compare=False)
    producer_names: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "studio_names", split_names(self.studios))
        object.__setattr__(self, "producer_names", split_names(self.producers))


@dataclass(frozen=True)
class MovieFilters:
    """Exact-match filters. None means no constraint on that field."""

    year: int | None = None
    winner: bool | None = None


@dataclass(frozen=True)
class Pagination:
    """Requested page window.

    Values are taken as given; the catalogue resolves invalid values
    to defaults instead of rejecting them.
    """

    page: int | None = None
    per_page: int | None = None


@dataclass
class MoviePage:
    """A resolved page of catalogue results."""

    total: int
    page: int
    per_page: int
    items: list[MovieRecord]


# ============================================================================
# Interval Domain
# ============================================================================


@dataclass(frozen=True)
class ProducerInterval:
    """Years between two consecutive wins of one producer."""

    producer: str
    previous_win: int
    following_win: int
    interval: int


@dataclass
class ProducerIntervalSummary:
    """Producers with the shortest and longest win intervals."""

    min: list[ProducerInterval]
    max: list[ProducerInterval]
