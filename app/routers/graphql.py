"""GraphQL endpoint: POST /graphql (GraphiQL on GET when enabled)."""
from strawberry.fastapi import GraphQLRouter

from app.core.config import Settings
from app.gql.context import get_context
from app.gql.schema import schema


def build_router(settings: Settings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
