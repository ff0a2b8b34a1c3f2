"""
GraphQL Router
FastAPI integration for the GraphQL endpoint.
"""
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from ...core.config import settings
from ...services.restaurant_service import RestaurantService
from ..dependencies import get_restaurant_service
from .resolvers import schema


def get_context(
    restaurant_service: RestaurantService = Depends(get_restaurant_service),
) -> dict:
    """Expose the shared service to resolvers as ``info.context["restaurant_service"]``."""
    return {"restaurant_service": restaurant_service}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
