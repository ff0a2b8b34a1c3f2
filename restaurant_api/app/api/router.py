"""
Top-level REST router.

Aggregates the resource routers under one ``APIRouter`` which
``create_app`` mounts under ``settings.api_prefix``.  The GraphQL
router is mounted separately (see ``api.graphql.router``).
"""

from fastapi import APIRouter

from .endpoints import restaurants

router = APIRouter()

router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
