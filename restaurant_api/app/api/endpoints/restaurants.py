"""
Restaurant endpoints (REST surface).

Handlers only bind HTTP parameters, build the ``PageRequest`` and
call ``RestaurantService``.  Errors raised by the service propagate to
the handlers registered in ``api.errors``.  Handlers are plain ``def``
functions, so FastAPI runs each request in its worker thread pool.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from ...core.config import settings
from ...core.pagination import PageRequest
from ...core.sorting import parse_sort
from ...schemas.error import ErrorResponse
from ...schemas.restaurant import Restaurant, RestaurantCreate, RestaurantPage
from ...services.restaurant_service import RestaurantService
from ..dependencies import get_restaurant_service

router = APIRouter()

_client_error = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=RestaurantPage, responses=_client_error)
def list_restaurants(
    page: int = Query(0, description="Zero-based page number", examples=[0]),
    size: int = Query(settings.default_page_size, description="Restaurants per page", examples=[10]),
    sort: str = Query("id,asc", description="Sort as `field,direction`", examples=["name,desc"]),
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantPage:
    """Return one page of all restaurants."""
    return service.get_all(PageRequest(page, size, parse_sort(sort)))


# Declared before "/{restaurant_id}" so that "search" is not bound as an id.
@router.get("/search", response_model=RestaurantPage, responses=_client_error)
def search_restaurants(
    name: str = Query(..., description="Substring to look for in the name"),
    page: int = Query(0, description="Zero-based page number", examples=[0]),
    size: int = Query(settings.default_page_size, description="Restaurants per page", examples=[10]),
    sort: str = Query("id,asc", description="Sort as `field,direction`", examples=["name,desc"]),
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantPage:
    """Return one page of restaurants whose name contains ``name``."""
    return service.search(name, PageRequest(page, size, parse_sort(sort)))


@router.get("/{restaurant_id}", response_model=Restaurant, responses=_not_found)
def get_restaurant(
    restaurant_id: int = Path(..., description="Restaurant ID", examples=[1]),
    service: RestaurantService = Depends(get_restaurant_service),
) -> Restaurant:
    """Retrieve a single restaurant.  Returns 404 if it does not exist."""
    return service.get_by_id(restaurant_id)


@router.post(
    "",
    response_model=Restaurant,
    status_code=status.HTTP_201_CREATED,
    responses=_client_error,
)
def create_restaurant(
    restaurant_in: RestaurantCreate,
    service: RestaurantService = Depends(get_restaurant_service),
) -> Restaurant:
    """Create a restaurant.  ``name`` and ``address`` must not be blank."""
    return service.create(Restaurant(**restaurant_in.model_dump()))


@router.put(
    "/{restaurant_id}",
    response_model=Restaurant,
    responses={**_client_error, **_not_found},
)
def update_restaurant(
    restaurant_in: RestaurantCreate,
    restaurant_id: int = Path(..., description="Restaurant ID", examples=[1]),
    service: RestaurantService = Depends(get_restaurant_service),
) -> Restaurant:
    """Replace the name and address of a restaurant.

    ``phoneNumber`` in the body is ignored; the stored value is kept.
    """
    return service.update(restaurant_id, Restaurant(**restaurant_in.model_dump()))


@router.delete(
    "/{restaurant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_not_found,
)
def delete_restaurant(
    restaurant_id: int = Path(..., description="Restaurant ID", examples=[1]),
    service: RestaurantService = Depends(get_restaurant_service),
) -> None:
    """Delete a restaurant.  Returns 404 if it does not exist."""
    service.delete(restaurant_id)
    return None
