"""Restaurant API client.

A thin wrapper around the REST surface of the Restaurant API built on
the ``requests`` library.  Every public method returns a tuple
``(data, error)``:

* on success ``data`` holds the decoded JSON body (``None`` for
  ``204 No Content``) and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or ``False`` for deletes) and
  ``error`` is a dictionary with keys ``status_code`` and ``message``.
  ``message`` is taken from the server's error body when available.

Example::

    client = RestaurantAPIClient(base_url="http://localhost:8000/api")
    page, error = client.list_restaurants(page=0, size=20, sort="name,asc")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RestaurantAPIClient:
    """Client for the ``/restaurants`` resource."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: URL the REST surface is mounted under, e.g.
                ``http://localhost:8000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/restaurants``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _page_params(page: int, size: int, sort: str) -> Dict[str, Any]:
        return {"page": page, "size": size, "sort": sort}

    # ------------------------------------------------------------------
    # Restaurant operations
    # ------------------------------------------------------------------
    def list_restaurants(
        self, page: int = 0, size: int = 10, sort: str = "id,asc"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of restaurants.

        Returns:
            A tuple ``(page, error)`` where ``page`` is the pagination
            envelope (``content``, ``totalPages``, ``totalElements``,
            ``size``, ``number``).
        """
        return self._request("GET", "/restaurants", params=self._page_params(page, size, sort))

    def search_restaurants(
        self, name: str, page: int = 0, size: int = 10, sort: str = "id,asc"
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of restaurants whose name contains ``name``."""
        params = {"name": name, **self._page_params(page, size, sort)}
        return self._request("GET", "/restaurants/search", params=params)

    def get_restaurant(self, restaurant_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/restaurants/{restaurant_id}")

    def create_restaurant(
        self, name: str, address: str, phone_number: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"name": name, "address": address, "phoneNumber": phone_number}
        return self._request("POST", "/restaurants", json_body=payload)

    def update_restaurant(
        self, restaurant_id: int, name: str, address: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name and address; the stored phone number is kept."""
        payload = {"name": name, "address": address}
        return self._request("PUT", f"/restaurants/{restaurant_id}", json_body=payload)

    def delete_restaurant(self, restaurant_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a restaurant.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/restaurants/{restaurant_id}")
        if error:
            return False, error
        return True, None
