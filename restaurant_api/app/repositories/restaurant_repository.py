"""
Restaurant storage.

``RestaurantStore`` is the interface the service layer depends on.
``SQLiteRestaurantStore`` implements it on top of the ``restaurants``
table created by ``core.db.init_db``.  Every call opens its own
connection, so a single store instance can be shared by concurrent
requests.

All queries use parameterized statements.  Sort properties arrive
unvalidated from the sort parser and are mapped through
``SORTABLE_COLUMNS`` before they are placed in an ``ORDER BY`` clause.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..core.db import get_connection, get_database_path
from ..core.exceptions import InvalidArgumentError, NotFoundError
from ..core.pagination import PageRequest, total_pages
from ..core.sorting import Sort
from ..schemas.restaurant import Restaurant, RestaurantPage

logger = logging.getLogger(__name__)

# Entity property name -> column.  Both the camelCase wire name and the
# Python attribute name are accepted for the phone number.
SORTABLE_COLUMNS = {
    "id": "id",
    "name": "name",
    "address": "address",
    "phoneNumber": "phone_number",
    "phone_number": "phone_number",
}

_COLUMNS = "id, name, address, phone_number"


class RestaurantStore(ABC):
    """Durable storage for restaurant records."""

    @abstractmethod
    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        """Return the restaurant with ``restaurant_id`` or ``None``."""

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> RestaurantPage:
        """Return one page of all restaurants, ordered per ``page_request.sort``."""

    @abstractmethod
    def find_by_name_containing(self, name: str, page_request: PageRequest) -> RestaurantPage:
        """Return one page of restaurants whose name contains ``name``."""

    @abstractmethod
    def save(self, restaurant: Restaurant) -> Restaurant:
        """Insert ``restaurant`` if it has no id, otherwise overwrite the stored record.

        Returns the persisted value with ``id`` populated.
        """

    @abstractmethod
    def delete_by_id(self, restaurant_id: int) -> None:
        """Remove the restaurant with ``restaurant_id``."""


class SQLiteRestaurantStore(RestaurantStore):
    """``RestaurantStore`` backed by a SQLite file."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM restaurants WHERE id = ?",
                (restaurant_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_restaurant(row)
        finally:
            conn.close()

    def find_all(self, page_request: PageRequest) -> RestaurantPage:
        return self._find_page("", (), page_request)

    def find_by_name_containing(self, name: str, page_request: PageRequest) -> RestaurantPage:
        # instr() is case-sensitive and treats % and _ literally, unlike LIKE.
        return self._find_page("WHERE instr(name, ?) > 0", (name,), page_request)

    def save(self, restaurant: Restaurant) -> Restaurant:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            if restaurant.id is None:
                cursor.execute(
                    "INSERT INTO restaurants (name, address, phone_number) VALUES (?, ?, ?)",
                    (restaurant.name, restaurant.address, restaurant.phone_number),
                )
                restaurant_id = cursor.lastrowid
            else:
                cursor.execute(
                    "UPDATE restaurants SET name = ?, address = ?, phone_number = ? WHERE id = ?",
                    (restaurant.name, restaurant.address, restaurant.phone_number, restaurant.id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError()
                restaurant_id = restaurant.id
            conn.commit()
            logger.debug("Saved restaurant %s", restaurant_id)
            return restaurant.model_copy(update={"id": restaurant_id})
        finally:
            conn.close()

    def delete_by_id(self, restaurant_id: int) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM restaurants WHERE id = ?", (restaurant_id,))
            conn.commit()
            logger.debug("Deleted restaurant %s", restaurant_id)
        finally:
            conn.close()

    def _find_page(self, where: str, params: Sequence, page_request: PageRequest) -> RestaurantPage:
        order_by = self._order_by(page_request.sort)
        conn = get_connection(self.db_path)
        try:
            total = conn.execute(
                f"SELECT COUNT(*) AS total FROM restaurants {where}", tuple(params)
            ).fetchone()["total"]
            query = (
                f"SELECT {_COLUMNS} FROM restaurants {where} "
                f"ORDER BY {order_by} LIMIT ? OFFSET ?"
            )
            logger.debug("Page query: %s", query)
            rows = conn.execute(
                query, (*params, page_request.size, page_request.offset)
            ).fetchall()
            return RestaurantPage(
                content=[self._row_to_restaurant(row) for row in rows],
                total_pages=total_pages(total, page_request.size),
                total_elements=total,
                size=page_request.size,
                number=page_request.page,
            )
        finally:
            conn.close()

    @staticmethod
    def _order_by(sort: Sort) -> str:
        clauses = []
        for order in sort:
            column = SORTABLE_COLUMNS.get(order.property)
            if column is None:
                raise InvalidArgumentError(
                    f"No property '{order.property}' found for type 'Restaurant'"
                )
            clauses.append(f"{column} {'ASC' if order.ascending else 'DESC'}")
        # Tie-break on id so that pages never overlap or skip rows.
        if not any(order.property == "id" for order in sort):
            clauses.append("id ASC")
        return ", ".join(clauses)

    @staticmethod
    def _row_to_restaurant(row: sqlite3.Row) -> Restaurant:
        return Restaurant(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            phone_number=row["phone_number"],
        )
