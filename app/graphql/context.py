"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Database session for the request
- The location query service bound to that session

The context is created fresh for each GraphQL request (or WebSocket
connection) and passed to all resolvers via the `info` parameter.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from app.database import get_db
from app.repositories.locations import LocationStore
from app.services.locations import LocationQueries


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        db: SQLAlchemy database session
        locations: LocationQueries service over `db`
    """

    def __init__(self, db: Session):
        super().__init__()
        self.db = db
        self.locations = LocationQueries(LocationStore(db))


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Strawberry resolves this like any FastAPI dependency, so the session
    from get_db is closed when the request ends and tests can replace it
    through app.dependency_overrides.

    Args:
        db: Request-scoped database session

    Returns:
        GraphQLContext with db session and location queries
    """
    return GraphQLContext(db=db)
