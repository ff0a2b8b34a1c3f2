"""
Business logic for restaurants.

``RestaurantService`` is the single source of business rules for both
the REST and the GraphQL surface: not-found handling, the narrow
update contract and the non-blank checks all live here so that the two
protocols cannot drift apart.  The service holds no state besides its
store and is shared across requests.
"""

import logging

from ..core.exceptions import InvalidArgumentError, NotFoundError
from ..core.pagination import PageRequest
from ..repositories.restaurant_repository import RestaurantStore
from ..schemas.restaurant import Restaurant, RestaurantPage

logger = logging.getLogger(__name__)


class RestaurantService:
    """CRUD and search over restaurants."""

    def __init__(self, store: RestaurantStore) -> None:
        self.store = store

    def get_all(self, page_request: PageRequest) -> RestaurantPage:
        return self.store.find_all(page_request)

    def search(self, name: str, page_request: PageRequest) -> RestaurantPage:
        """Return restaurants whose name contains ``name`` (used as given, not trimmed)."""
        return self.store.find_by_name_containing(name, page_request)

    def get_by_id(self, restaurant_id: int) -> Restaurant:
        """Return the restaurant or raise ``NotFoundError``."""
        restaurant = self.store.find_by_id(restaurant_id)
        if restaurant is None:
            raise NotFoundError()
        return restaurant

    def create(self, restaurant: Restaurant) -> Restaurant:
        """Persist a new restaurant.

        The store decides between insert and update from ``id``; callers
        pass a restaurant without one.
        """
        self._require_text("name", restaurant.name)
        self._require_text("address", restaurant.address)
        created = self.store.save(restaurant)
        logger.info("Created restaurant %s", created.id)
        return created

    def update(self, restaurant_id: int, details: Restaurant) -> Restaurant:
        """Overwrite ``name`` and ``address`` of an existing restaurant.

        Only those two fields are copied from ``details``; ``id`` and
        ``phone_number`` of the stored record are kept as they are.
        """
        self._require_text("name", details.name)
        self._require_text("address", details.address)
        restaurant = self.get_by_id(restaurant_id)
        restaurant.name = details.name
        restaurant.address = details.address
        updated = self.store.save(restaurant)
        logger.info("Updated restaurant %s", restaurant_id)
        return updated

    def delete(self, restaurant_id: int) -> None:
        """Delete a restaurant; raises ``NotFoundError`` if it does not exist."""
        self.get_by_id(restaurant_id)
        self.store.delete_by_id(restaurant_id)
        logger.info("Deleted restaurant %s", restaurant_id)

    @staticmethod
    def _require_text(field: str, value: str) -> None:
        if value is None or not value.strip():
            raise InvalidArgumentError(f"{field} must not be blank")
