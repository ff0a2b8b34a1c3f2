"""
FastAPI dependencies shared by the REST and GraphQL routers.

The service instance is created once by ``create_app`` and kept on
``app.state``; handlers receive it through ``Depends`` instead of
importing a module-level global.
"""

from fastapi import Request

from ..services.restaurant_service import RestaurantService


def get_restaurant_service(request: Request) -> RestaurantService:
    return request.app.state.restaurant_service
