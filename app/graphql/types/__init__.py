"""
GraphQL Types Package

GraphQL type definitions, declared with Strawberry's decorator syntax.

Types defined here:
- LocationType: exposed in the schema as `Location`
"""

from app.graphql.types.location import LocationType, location_to_graphql

__all__ = [
    "LocationType",
    "location_to_graphql",
]
