"""GraphQL endpoint for link queries and mutations."""
from strawberry.fastapi import GraphQLRouter

from api.graphql import get_graphql_context, schema
from core.config import Settings


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """Create the GraphQL router; mount it with a `/graphql` prefix."""
    return GraphQLRouter(
        schema,
        context_getter=get_graphql_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
