"""
Location Query Service

The two read operations of the API:
- list_locations: every location, sorted by name
- find_locations_by_code: locations with an exact code match, sorted by name

Results are returned as LocationRead snapshots, never as session-bound
ORM objects.
"""

import logging

from app.models.location import Location
from app.repositories.locations import LocationStore
from app.schemas.location import LocationRead

logger = logging.getLogger(__name__)


class LocationQueries:
    """
    Read-only queries over the Locations table.

    The store is passed in at construction; the service keeps no other
    state and may be created once per request.
    """

    def __init__(self, store: LocationStore):
        self.store = store

    def list_locations(self) -> list[LocationRead]:
        """
        Return all locations ordered by name (ascending).

        No pagination or filtering. Ordering follows the database collation.
        """
        stmt = self.store.select().order_by(Location.name.asc())
        rows = self.store.fetch(stmt)
        logger.debug(f"list_locations returned {len(rows)} rows")
        return [LocationRead.model_validate(row) for row in rows]

    def find_locations_by_code(self, code: str) -> list[LocationRead]:
        """
        Return the locations whose code equals `code`, ordered by name.

        The code is used as given: no trimming, case folding or length
        check. A code that matches nothing yields an empty list.

        Args:
            code: Location code to match exactly

        Returns:
            Matching locations (possibly empty)
        """
        stmt = (
            self.store.select()
            .where(Location.code == code)
            .order_by(Location.name.asc())
        )
        rows = self.store.fetch(stmt)
        logger.debug(f"find_locations_by_code({code!r}) returned {len(rows)} rows")
        return [LocationRead.model_validate(row) for row in rows]
