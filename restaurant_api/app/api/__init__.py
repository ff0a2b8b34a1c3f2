"""
API package.

``router`` holds the REST surface, ``graphql`` the GraphQL surface.
Both translate protocol requests into calls on the same
``RestaurantService``.
"""
