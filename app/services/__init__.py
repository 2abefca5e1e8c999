"""
Services Package

Query logic separated from transport (GraphQL resolvers) so it can be
tested in isolation.

Current services:
- locations.py: location listing and lookup by code
"""

from app.services.locations import LocationQueries

__all__ = ["LocationQueries"]
