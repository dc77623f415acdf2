"""
Database connection management using SQLAlchemy.

This module handles engine creation for MySQL (production) and SQLite
(tests, local runs), session management, and table creation.
"""

import logging
from contextlib import contextmanager
from typing import Generator
from urllib.parse import quote_plus

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.database.models import Base

logger = logging.getLogger(__name__)


def get_database_url(
    host: str = "localhost",
    user: str = "root",
    password: str = "",
    port: int = 3306,
    database: str = "moviesdb",
) -> str:
    """
    Build a MySQL database URL for the PyMySQL driver.

    Args:
        host: Database host
        user: Database user
        password: Database password (may be empty)
        port: Database port
        database: Database name

    Returns:
        SQLAlchemy database URL
    """
    credentials = quote_plus(user)
    if password:
        credentials += f":{quote_plus(password)}"
    return f"mysql+pymysql://{credentials}@{host}:{port}/{database}?charset=utf8mb4"


def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.

    SQLite disables foreign key constraints by default, which would leave
    link rows behind when a movie is deleted.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and database initialization.
    """

    def __init__(self, database_url: str, echo: bool = False):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy database URL
            echo: If True, log all SQL statements (useful for debugging)
        """
        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        if self.is_sqlite:
            # One shared connection so in-memory databases survive across sessions
            self.engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
            event.listen(self.engine, "connect", set_sqlite_pragma)
        else:
            # pool_pre_ping drops connections MySQL closed after wait_timeout
            self.engine = create_engine(
                database_url,
                echo=echo,
                pool_pre_ping=True,
                pool_recycle=3600
            )

        # Create session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def create_tables(self):
        """
        Create all tables defined in the models.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """Get a new database session. The caller must close it."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                session.add(movie)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


# Global database manager instance (singleton pattern)
_db_manager = None


def get_db_manager(database_url: str, echo: bool = False) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    Args:
        database_url: SQLAlchemy database URL, used on first call only
        echo: If True, log all SQL statements

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        logger.info("Connecting to %s", _db_manager_label(database_url))
        _db_manager = DatabaseManager(database_url=database_url, echo=echo)
    return _db_manager


def _db_manager_label(database_url: str) -> str:
    # Hide credentials in logs
    scheme, _, rest = database_url.partition("://")
    return f"{scheme}://{rest.rpartition('@')[2]}"
