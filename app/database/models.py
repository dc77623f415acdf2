"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the Movie, Genre and MovieGenre (link) tables. Movie ids
are UUIDs stored in compact 16-byte binary form.
"""

import uuid
from datetime import datetime
from typing import List

from sqlalchemy import (
    BINARY, Integer, String, Float, Text, ForeignKey,
    CheckConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.types import TypeDecorator


class BinaryUUID(TypeDecorator):
    """
    UUID stored as BINARY(16).

    Uses the same byte layout as MySQL's UUID_TO_BIN() without swap, so rows
    written by other MySQL clients read back as the same UUID.
    """

    impl = BINARY(16)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return value.bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing the catalog.

    Attributes:
        id: Primary key, UUID generated by the application
        title: Movie title (required)
        year: Release year (1900 to 2025)
        director: Director name
        duration: Length in minutes (positive)
        poster: Poster URL
        rate: Rating from 0 to 10
        created_at: Timestamp when record was created
    """
    __tablename__ = 'movies'

    id: Mapped[uuid.UUID] = mapped_column(BinaryUUID, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    poster: Mapped[str] = mapped_column(Text, nullable=False)
    rate: Mapped[float] = mapped_column(Float, nullable=False, server_default='5')
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    genre_links: Mapped[List["MovieGenre"]] = relationship(
        "MovieGenre",
        back_populates="movie",
        order_by="MovieGenre.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("year >= 1900 AND year <= 2025", name='check_movie_year'),
        CheckConstraint("duration > 0", name='check_movie_duration'),
        CheckConstraint("rate >= 0 AND rate <= 10", name='check_movie_rate'),
        Index('idx_movies_title', 'title'),
    )

    @property
    def genre(self) -> List[str]:
        """Genre names in the order they were submitted."""
        return [link.genre.name for link in self.genre_links]

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.year})>"


class Genre(Base):
    """
    Genre lookup table, seeded with the fixed genre list.

    Attributes:
        id: Primary key, auto-incremented
        name: Genre name (unique)
    """
    __tablename__ = 'genres'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"


class MovieGenre(Base):
    """
    Link table between movies and genres.

    Attributes:
        movie_id: Foreign key to movies table
        position: Index of the genre in the movie's genre list
        genre_id: Foreign key to genres table
    """
    __tablename__ = 'movie_genres'

    movie_id: Mapped[uuid.UUID] = mapped_column(
        BinaryUUID,
        ForeignKey('movies.id', ondelete='CASCADE'),
        primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('genres.id', ondelete='CASCADE'),
        nullable=False
    )

    # Relationships
    movie: Mapped["Movie"] = relationship("Movie", back_populates="genre_links")
    genre: Mapped["Genre"] = relationship("Genre", lazy="joined")

    __table_args__ = (
        Index('idx_movie_genres_genre', 'genre_id'),
    )

    def __repr__(self) -> str:
        return f"<MovieGenre(movie_id={self.movie_id}, position={self.position}, genre_id={self.genre_id})>"
