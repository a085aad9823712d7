"""GraphQL API: Node interface, User type, queries and mutations."""

from app.api.graphql.schema import create_graphql_router, schema

__all__ = ["schema", "create_graphql_router"]
