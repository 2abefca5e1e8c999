"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Schema:
    type Query {
      locations: [Location!]
      location(code: String!): [Location!]
    }

Transport:
    The router serves queries over HTTP (GET and POST) and over WebSocket
    (graphql-transport-ws subprotocol) on the same path. The legacy
    graphql-ws subprotocol only carries subscriptions, which this schema
    does not have, so it is not offered. An in-browser IDE is served on
    GET when enabled.

Example Query:
    query {
        location(code: "DEN") {
            id
            name
            active
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL

from app.config import get_settings
from app.graphql.context import get_context
from app.graphql.queries import Query

# Create the GraphQL schema (read-only: no mutations)
schema = strawberry.Schema(query=Query)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema, context and WebSocket protocols
    """
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        # Options: "graphiql", "apollo-sandbox", "pathfinder", or None to disable
        graphql_ide=settings.graphql_ide_option,
        subscription_protocols=(GRAPHQL_TRANSPORT_WS_PROTOCOL,),
    )


__all__ = ["schema", "create_graphql_router"]
