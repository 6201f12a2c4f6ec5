"""Tests for domain and pydantic models.

Tests validate:
1. MovieRecord parses name lists once and is immutable
2. Response models serialize with camelCase aliases
3. Response models reject invalid values
"""

import dataclasses

import pytest
from pydantic import ValidationError

from razzies.models.domain import MovieRecord
from razzies.models.types import MoviePageResponse, ProducerIntervalEntry


class TestMovieRecord:
    """Test MovieRecord."""

    def test_parsed_names(self):
        """studio_names and producer_names are split from the raw fields."""
        movie = MovieRecord(
            year=2000,
            title="Battlefield Earth",
            studios="Warner Bros., Franchise Pictures",
            producers="Elie Samaha, Jonathan D. Krane and John Travolta",
            winner=True,
        )
        assert movie.studio_names == ("Warner Bros.", "Franchise Pictures")
        assert movie.producer_names == ("Elie Samaha", "Jonathan D. Krane", "John Travolta")

    def test_immutable(self):
        """Records cannot be modified after creation."""
        movie = MovieRecord(year=2000, title="T", studios="S", producers="P", winner=False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            movie.year = 2001

    def test_title_with_and_not_split(self):
        """Only producers/studios are parsed; titles stay as-is."""
        movie = MovieRecord(year=2011, title="Jack and Jill", studios="Columbia", producers="Adam Sandler", winner=True)
        assert movie.title == "Jack and Jill"
        assert movie.producer_names == ("Adam Sandler",)


class TestMoviePageResponse:
    """Test MoviePageResponse."""

    def test_serializes_per_page_alias(self):
        """per_page is perPage on the wire."""
        response = MoviePageResponse(total=0, page=1, per_page=50, items=[])
        assert response.model_dump(by_alias=True) == {"total": 0, "page": 1, "perPage": 50, "items": []}

    def test_accepts_alias_input(self):
        """perPage is accepted when parsing."""
        response = MoviePageResponse.model_validate({"total": 0, "page": 1, "perPage": 10, "items": []})
        assert response.per_page == 10

    def test_rejects_per_page_over_ceiling(self):
        """perPage above 50 is invalid."""
        with pytest.raises(ValidationError):
            MoviePageResponse(total=0, page=1, per_page=51, items=[])


class TestProducerIntervalEntry:
    """Test ProducerIntervalEntry."""

    def test_rejects_negative_interval(self):
        """Intervals are never negative."""
        with pytest.raises(ValidationError):
            ProducerIntervalEntry(producer="A", interval=-1, previous_win=2001, following_win=2000)
