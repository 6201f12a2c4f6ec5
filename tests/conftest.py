"""Shared pytest fixtures for razzies tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from razzies.catalogue.store import CatalogueStore
from razzies.db.schema import Base
from razzies.models.domain import MovieRecord


def make_movie(year, title, producers="Some Producer", winner=False, studios="Some Studio"):
    """Build a MovieRecord with sensible defaults."""
    return MovieRecord(
        year=year,
        title=title,
        studios=studios,
        producers=producers,
        winner=winner,
    )


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sample_movies():
    """Small catalogue: Joel Silver wins twice in a row, Matthew Vaughn 13 years apart."""
    return [
        make_movie(1990, "The Adventures of Ford Fairlane", "Steven Perry and Joel Silver", True),
        make_movie(1990, "Rocky V", "Robert Chartoff and Irwin Winkler"),
        make_movie(1991, "Hudson Hawk", "Joel Silver", True),
        make_movie(2002, "Swept Away", "Matthew Vaughn", True),
        make_movie(2015, "Fantastic Four", "Simon Kinberg, Matthew Vaughn and Hutch Parker", True),
        make_movie(2015, "Fifty Shades of Grey", "Michael De Luca, Dana Brunetti and E. L. James"),
    ]


@pytest.fixture
def catalogue(sample_movies):
    """CatalogueStore holding sample_movies."""
    return CatalogueStore(sample_movies)
