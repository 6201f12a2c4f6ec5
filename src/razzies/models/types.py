"""Pydantic models for the Razzies API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field


class MovieView(BaseModel):
    """Movie as returned by the listing endpoint."""

    year: int
    title: str
    studios: list[str]
    producers: list[str]
    winner: bool


class MoviePageResponse(BaseModel):
    """Paginated movie listing."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    per_page: int = Field(alias="perPage", ge=1, le=50)
    items: list[MovieView]


class ProducerIntervalEntry(BaseModel):
    """Interval between two consecutive wins of a producer."""

    model_config = ConfigDict(populate_by_name=True)

    producer: str
    interval: int = Field(ge=0)
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")


class ProducerIntervalsResponse(BaseModel):
    """Producers with the shortest and longest win intervals."""

    min: list[ProducerIntervalEntry]
    max: list[ProducerIntervalEntry]


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses."""

    name: str
    message: str


class HealthStatus(BaseModel):
    """Health check payload."""

    status: str
    movies: int
