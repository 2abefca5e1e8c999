"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Locations API.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Close session when request ends

The API only reads, so nothing is ever committed from a request session.
This is implemented using FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import Settings, get_settings

# Get settings instance
settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (server databases only)
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements (useful for debugging, disable in production)

def build_engine(settings: Settings) -> Engine:
    """
    Create the engine for the configured connection string.

    SQLite (used for local runs and tests) gets no pool sizing and is
    allowed to be shared across threads.
    """
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


engine = build_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit (explicit is better than implicit)
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)
# - bind=engine: Connect sessions to our database engine

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to find all models for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the request handler (or GraphQL
    context), and closes it when the request ends. The finally block
    ensures cleanup happens even if an exception occurs.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    WARNING: In production, use Alembic migrations instead!
    """
    Base.metadata.create_all(bind=engine)

