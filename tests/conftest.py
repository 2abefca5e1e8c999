"""
pytest Fixtures for Locations API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# The application engine points at SQLite so no database server is needed.
import os

os.environ["CONNECTIONSTRINGS__DEFAULT"] = "sqlite://"
os.environ["GRAPHQL_IDE"] = "graphiql"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Location
from app.repositories.locations import LocationStore
from app.services.locations import LocationQueries

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory for tests:
# - Fast: No disk I/O, runs in memory
# - Isolated: Each test run starts fresh
# - Simple: No external database needed


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    # A failed flush inside a test may already have rolled it back
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency so the GraphQL context uses the
    test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def location_queries(db_session: Session) -> LocationQueries:
    """Query service bound to the test session."""
    return LocationQueries(LocationStore(db_session))


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def add_location(db_session: Session, name: str, code: str, active: bool) -> Location:
    """Insert one location directly into the store."""
    location = Location(name=name, code=code, active=active)
    db_session.add(location)
    db_session.commit()
    db_session.refresh(location)
    return location


@pytest.fixture
def sample_location(db_session: Session) -> Location:
    """Create a single sample location."""
    return add_location(db_session, "Denver", "DEN", True)


@pytest.fixture
def boston_and_austin(db_session: Session) -> list[Location]:
    """
    Boston is inserted before Austin so that ordering by name
    differs from insertion order.
    """
    return [
        add_location(db_session, "Boston", "BOS", True),
        add_location(db_session, "Austin", "AUS", False),
    ]


@pytest.fixture
def shared_code_locations(db_session: Session) -> list[Location]:
    """Several locations, two of which share the code 'CHI'."""
    return [
        add_location(db_session, "Chicago O'Hare", "CHI", True),
        add_location(db_session, "Seattle", "SEA", True),
        add_location(db_session, "Chicago Midway", "CHI", False),
    ]
