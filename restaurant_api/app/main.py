"""
Main entrypoint for the Restaurant API.

This module assembles the FastAPI application: logging, the shared
``RestaurantService``, the REST router, the GraphQL router and the
REST exception handlers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so
that it can be served directly, e.g.::

    uvicorn restaurant_api.app.main:app --reload

REST resources are served under ``<api_prefix>/restaurants`` and the
GraphQL endpoint under ``<api_prefix><graphql_path>``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.graphql.router import create_graphql_router
from .api.router import router as rest_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.restaurant_repository import RestaurantStore, SQLiteRestaurantStore
from .services.restaurant_service import RestaurantService


def create_app(store: Optional[RestaurantStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RestaurantStore]
        Storage backend for the service.  Defaults to a SQLite store on
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if store is None:
        store = SQLiteRestaurantStore()
    app.state.restaurant_service = RestaurantService(store)

    register_exception_handlers(app)
    app.include_router(rest_router, prefix=settings.api_prefix)
    app.include_router(create_graphql_router(), prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the database file and apply migrations for SQLite stores.
        if isinstance(store, SQLiteRestaurantStore):
            init_db(store.db_path)

    return app


app = create_app()
