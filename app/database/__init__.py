"""
Database module for the movie catalog.

This module provides database models, connection management, CRUD operations
and the relational MovieStore, using SQLAlchemy ORM.
"""

from app.database.models import Base, Movie, Genre, MovieGenre
from app.database.connection import DatabaseManager, get_db_manager, get_database_url
from app.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    'Genre',
    'MovieGenre',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'get_database_url',
    # CRUD module
    'crud',
]
