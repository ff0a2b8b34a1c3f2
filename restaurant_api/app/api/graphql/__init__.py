"""
GraphQL surface.

``resolvers.schema`` is served by the router built in ``router.py``.
"""
