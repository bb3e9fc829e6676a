"""
Database configuration and session management

This module provides the SQLAlchemy setup for database connectivity.
Each FastAPI app owns one Database instance (engine + session factory),
stored on app.state and handed to endpoints through get_db.
"""

import logging
import os
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)

# Get database URLs from environment variables
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql+psycopg2://blog_user:changeme@db:5432/blog_db")
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test-blog.db")

# Base class for ORM models
Base = declarative_base()


class Database:
    """
    Engine and session factory bound to a single database URL.

    Using NullPool for better compatibility with containerized environments.
    """

    def __init__(self, url: str = DATABASE_URL, echo: bool = False):
        self.url = url
        connect_args = {}
        if url.startswith("sqlite"):
            # Sessions are opened and closed from FastAPI's threadpool
            connect_args["check_same_thread"] = False

        self.engine = create_engine(
            url,
            poolclass=NullPool,
            echo=echo,  # Set to True for SQL query logging during development
            connect_args=connect_args,
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def check_connection(self) -> bool:
        """
        Test database connectivity
        Returns True if connection successful, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database connectivity check failed for %s", self.engine.url, exc_info=True)
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the Database instance attached to the running app."""
    return request.app.state.database


def get_db(request: Request):
    """
    Dependency injection for database sessions
    Usage in FastAPI endpoints:

    @app.get("/endpoint")
    def endpoint(db: Session = Depends(get_db)):
        # use db here
        pass
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
