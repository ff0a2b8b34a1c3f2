"""
Typed error conditions shared by the service layer and both API surfaces.

The store and service raise these; neither surface catches them.  The
REST exception handlers in ``api.errors`` and the GraphQL error masking
in ``api.graphql.resolvers`` translate them into protocol responses.
"""

RECORD_NOT_FOUND = "record not found"


class RestaurantAPIError(Exception):
    """Base class for client-facing errors.

    Messages of these errors are safe to show to any client.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RestaurantAPIError):
    """The requested restaurant does not exist."""

    def __init__(self, message: str = RECORD_NOT_FOUND) -> None:
        super().__init__(message)


class InvalidArgumentError(RestaurantAPIError):
    """A client-supplied value (sort direction, paging, blank field) is invalid."""
