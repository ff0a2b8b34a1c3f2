"""
GraphQL resolvers and schema.

Queries and mutations mirror the REST endpoints and call the same
``RestaurantService``.  Differences from REST:

- ``createRestaurant``/``updateRestaurant`` take scalar arguments and
  cannot set ``phoneNumber``.
- ``deleteRestaurant`` returns ``true`` instead of an empty body.
- Resolvers hand every service call to the worker thread pool so that
  blocking SQLite queries never run on the event loop.
- Errors come back in the ``errors`` list with ``path`` and
  ``locations``.  Messages of ``RestaurantAPIError`` subclasses are passed
  through; every other failure is replaced with a fixed message.
"""
from __future__ import annotations

import strawberry
from graphql import GraphQLError
from starlette.concurrency import run_in_threadpool
from strawberry.extensions import MaskErrors
from strawberry.types import Info

from ...core.config import settings
from ...core.exceptions import RestaurantAPIError
from ...core.pagination import PageRequest
from ...core.sorting import parse_sort
from ...schemas.restaurant import Restaurant
from ...services.restaurant_service import RestaurantService
from .types import RestaurantPageType, RestaurantType

INTERNAL_ERROR_MESSAGE = "Internal server error"
DEFAULT_SORT = "id,asc"


def get_service_from_info(info: Info) -> RestaurantService:
    """Get the restaurant service from the GraphQL context."""
    return info.context["restaurant_service"]


@strawberry.type
class Query:
    """GraphQL Query root."""

    @strawberry.field
    async def get_restaurants(
        self,
        info: Info,
        page: int = 0,
        size: int = settings.default_page_size,
        sort: str = DEFAULT_SORT,
    ) -> RestaurantPageType:
        """Get one page of all restaurants."""
        page_request = PageRequest(page, size, parse_sort(sort))
        return RestaurantPageType.from_model(
            await run_in_threadpool(get_service_from_info(info).get_all, page_request)
        )

    @strawberry.field
    async def search_restaurants(
        self,
        info: Info,
        name: str,
        page: int = 0,
        size: int = settings.default_page_size,
        sort: str = DEFAULT_SORT,
    ) -> RestaurantPageType:
        """Get one page of restaurants whose name contains ``name``."""
        page_request = PageRequest(page, size, parse_sort(sort))
        return RestaurantPageType.from_model(
            await run_in_threadpool(get_service_from_info(info).search, name, page_request)
        )

    @strawberry.field
    async def get_restaurant(self, info: Info, id: int) -> RestaurantType:
        """Get a single restaurant by id."""
        return RestaurantType.from_model(
            await run_in_threadpool(get_service_from_info(info).get_by_id, id)
        )


@strawberry.type
class Mutation:
    """GraphQL Mutation root."""

    @strawberry.mutation
    async def create_restaurant(self, info: Info, name: str, address: str) -> RestaurantType:
        restaurant = Restaurant(name=name, address=address)
        return RestaurantType.from_model(
            await run_in_threadpool(get_service_from_info(info).create, restaurant)
        )

    @strawberry.mutation
    async def update_restaurant(self, info: Info, id: int, name: str, address: str) -> RestaurantType:
        details = Restaurant(id=id, name=name, address=address)
        return RestaurantType.from_model(
            await run_in_threadpool(get_service_from_info(info).update, id, details)
        )

    @strawberry.mutation
    async def delete_restaurant(self, info: Info, id: int) -> bool:
        await run_in_threadpool(get_service_from_info(info).delete, id)
        return True


def should_mask_error(error: GraphQLError) -> bool:
    """Mask everything except client-facing service errors.

    Errors without an original exception (syntax, unknown fields,
    argument type mismatches) are produced by GraphQL validation and are
    left as they are.
    """
    original = error.original_error
    if original is None:
        return False
    return not isinstance(original, RestaurantAPIError)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        MaskErrors(should_mask_error=should_mask_error, error_message=INTERNAL_ERROR_MESSAGE),
    ],
)
