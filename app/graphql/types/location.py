"""
GraphQL Location Type

Defines the Location type for GraphQL queries.
"""

import strawberry

from app.schemas.location import LocationRead


@strawberry.type(name="Location")
class LocationType:
    """
    GraphQL type representing a location.

    Maps to the Location SQLAlchemy model (via LocationRead).
    """

    id: int
    name: str
    code: str
    active: bool


def location_to_graphql(location: LocationRead) -> LocationType:
    """Convert a LocationRead snapshot to the GraphQL LocationType."""
    return LocationType(
        id=location.id,
        name=location.name,
        code=location.code,
        active=location.active,
    )
