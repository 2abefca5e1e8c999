"""
Repositories Package

Typed, read-only handles on database tables. A repository is bound to a
single request-scoped session and knows how to build and run queries
against one table; ordering and filtering rules live in the services.
"""

from app.repositories.locations import LocationStore

__all__ = ["LocationStore"]
