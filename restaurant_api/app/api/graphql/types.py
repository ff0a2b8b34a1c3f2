"""
GraphQL types.

Field names are converted to camelCase by strawberry, so the page type
exposes ``totalPages``/``totalElements`` and the restaurant type
``phoneNumber``, the same keys the REST surface uses.
"""
from __future__ import annotations

from typing import List, Optional

import strawberry

from ...schemas.restaurant import Restaurant, RestaurantPage


@strawberry.type(name="Restaurant")
class RestaurantType:
    """Restaurant GraphQL type."""
    id: int
    name: str
    address: str
    phone_number: Optional[str]

    @classmethod
    def from_model(cls, restaurant: Restaurant) -> RestaurantType:
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            address=restaurant.address,
            phone_number=restaurant.phone_number,
        )


@strawberry.type(name="RestaurantPage")
class RestaurantPageType:
    """One page of restaurants."""
    content: List[RestaurantType]
    total_pages: int
    total_elements: int
    size: int
    number: int

    @classmethod
    def from_model(cls, page: RestaurantPage) -> RestaurantPageType:
        return cls(
            content=[RestaurantType.from_model(r) for r in page.content],
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            size=page.size,
            number=page.number,
        )
