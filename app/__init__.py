"""
Locations API Application Package

A read-only GraphQL API over the Locations table.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models
- repositories/: Read-only table handles bound to a session
- schemas/: Pydantic read projections
- services/: Query services used by the GraphQL resolvers
- graphql/: Strawberry schema, context and router
"""

__version__ = "0.1.0"
