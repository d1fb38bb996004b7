"""
Database configuration and session management

This module provides the SQLAlchemy setup for database connectivity.
Content models live in their own apps and inherit from Base.
"""

import os
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

# Get database URL from environment variable
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql+psycopg2://backend_user:changeme@db:5432/backend_db")

# Using NullPool for better compatibility with containerized environments
engine = create_engine(
    DATABASE_URL,
    poolclass=NullPool,
    echo=False,  # Set to True for SQL query logging during development
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


def get_db():
    """
    Dependency injection for database sessions
    Usage in FastAPI endpoints:

    @router.get("/endpoint")
    def endpoint(db: Session = Depends(get_db)):
        # use db here
        pass
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables for the registered models."""
    # Import models so they are registered on Base.metadata
    import apps.blog.models  # noqa: F401
    import apps.projects.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_db_connection(db: Session) -> bool:
    """
    Test database connectivity
    Returns True if connection successful, False otherwise
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
