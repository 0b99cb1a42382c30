"""GraphQL schema, types and request context."""
from api.graphql.context import GraphQLContext, get_graphql_context
from api.graphql.schema import schema

__all__ = ["GraphQLContext", "get_graphql_context", "schema"]
