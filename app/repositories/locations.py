"""
Location Store

Read-only access to the Locations table.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from app.models.location import Location


class LocationStore:
    """
    Handle on the Locations collection for one database session.

    Usage:
        store = LocationStore(db)
        stmt = store.select().where(Location.code == "DEN")
        rows = store.fetch(stmt)

    Database errors are not caught here; they reach the caller as raised
    by SQLAlchemy.
    """

    def __init__(self, db: Session):
        self.db = db

    def select(self) -> Select[tuple[Location]]:
        """Base SELECT over every Location row."""
        return select(Location)

    def fetch(self, stmt: Select[tuple[Location]]) -> list[Location]:
        """Execute a Location statement and return the rows."""
        return list(self.db.scalars(stmt).all())
