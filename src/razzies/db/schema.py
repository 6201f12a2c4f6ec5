"""Database schema for the Razzies catalogue."""

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Movie(Base):
    """Catalogue entry as loaded from the movie list.

    studios and producers keep the raw delimited strings; parsing
    happens in the domain layer.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    studios: Mapped[str] = mapped_column(Text, nullable=False)
    producers: Mapped[str] = mapped_column(Text, nullable=False)
    winner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (Index("ix_movies_year_winner", "year", "winner"),)
