"""Producer award-interval aggregation.

Computes, for every producer with two or more wins, the years between
consecutive wins, then keeps only the global minimum and maximum.
Domain logic is pure - catalogue access goes through CatalogueStore.
"""

from __future__ import annotations

from razzies.catalogue.store import CatalogueStore
from razzies.core.names import collation_key
from razzies.models.domain import MovieRecord, ProducerInterval, ProducerIntervalSummary
from razzies.models.types import ProducerIntervalEntry, ProducerIntervalsResponse


def producer_intervals(catalogue: CatalogueStore) -> ProducerIntervalsResponse:
    """Compute the producer interval report for the current catalogue.

    Args:
        catalogue: Catalogue to read winners from.

    Returns:
        ProducerIntervalsResponse with min and max interval entries.
    """
    summary = summarize_intervals(catalogue.find_winner_movies())

    return ProducerIntervalsResponse(
        min=[_to_entry(item) for item in summary.min],
        max=[_to_entry(item) for item in summary.max],
    )


def summarize_intervals(winners: list[MovieRecord]) -> ProducerIntervalSummary:
    """Reduce all producer intervals to the min and max groups.

    Pure function - no catalogue access. Both groups hold every
    interval equal to the extreme value and may share entries when
    only one interval length exists.

    Args:
        winners: Winning movies.

    Returns:
        ProducerIntervalSummary, empty when no producer won twice.
    """
    intervals = compute_producer_intervals(winners)

    if not intervals:
        return ProducerIntervalSummary(min=[], max=[])

    min_interval = min(item.interval for item in intervals)
    max_interval = max(item.interval for item in intervals)

    return ProducerIntervalSummary(
        min=_sort_entries([item for item in intervals if item.interval == min_interval]),
        max=_sort_entries([item for item in intervals if item.interval == max_interval]),
    )


def compute_producer_intervals(winners: list[MovieRecord]) -> list[ProducerInterval]:
    """Compute intervals between consecutive wins of each producer.

    A producer credited on several winning movies in the same year gets
    that year once per movie, which yields zero-length intervals.

    Args:
        winners: Winning movies.

    Returns:
        One ProducerInterval per adjacent pair of sorted win years.
    """
    # Group win years by producer
    wins_by_producer: dict[str, list[int]] = {}
    for movie in winners:
        for producer in movie.producer_names:
            wins_by_producer.setdefault(producer, []).append(movie.year)

    intervals: list[ProducerInterval] = []
    for producer, years in wins_by_producer.items():
        if len(years) < 2:
            continue

        years = sorted(years)
        for previous_win, following_win in zip(years, years[1:]):
            intervals.append(
                ProducerInterval(
                    producer=producer,
                    previous_win=previous_win,
                    following_win=following_win,
                    interval=following_win - previous_win,
                )
            )

    return intervals


def _sort_entries(entries: list[ProducerInterval]) -> list[ProducerInterval]:
    return sorted(
        entries,
        key=lambda item: (item.interval, item.following_win, collation_key(item.producer)),
    )


def _to_entry(item: ProducerInterval) -> ProducerIntervalEntry:
    return ProducerIntervalEntry(
        producer=item.producer,
        interval=item.interval,
        previous_win=item.previous_win,
        following_win=item.following_win,
    )
