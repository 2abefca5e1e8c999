"""
GraphQL Query Resolvers

Defines the read operations of the GraphQL API.

Each root field is declared on Query with an explicit resolver function;
the resolvers only delegate to the LocationQueries service found in the
request context.
"""

from typing import Optional

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.location import LocationType, location_to_graphql


def resolve_locations(info: Info[GraphQLContext, None]) -> Optional[list[LocationType]]:
    """All locations ordered by name."""
    locations = info.context.locations.list_locations()
    return [location_to_graphql(loc) for loc in locations]


def resolve_location(
    info: Info[GraphQLContext, None],
    code: str,
) -> Optional[list[LocationType]]:
    """Locations whose code matches exactly, ordered by name."""
    locations = info.context.locations.find_locations_by_code(code)
    return [location_to_graphql(loc) for loc in locations]


@strawberry.type
class Query:
    """
    Root Query type for GraphQL API.

    Field table:
        locations                 -> resolve_locations
        location(code: String!)   -> resolve_location
    """

    locations: Optional[list[LocationType]] = strawberry.field(
        resolver=resolve_locations,
        description="Get all locations sorted by name",
    )

    location: Optional[list[LocationType]] = strawberry.field(
        resolver=resolve_location,
        description="Get the locations with the given code, sorted by name",
    )
