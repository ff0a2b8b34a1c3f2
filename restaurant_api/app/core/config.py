"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and no further setup.  In a
production deployment override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Restaurant API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "restaurants.db")

    # Both surfaces are mounted under ``api_prefix``: REST resources at
    # ``<prefix>/restaurants`` and GraphQL at ``<prefix><graphql_path>``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")
    graphiql: bool = os.getenv("GRAPHIQL", "true").lower() in {"1", "true", "yes"}

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    # Used by ``run.py`` only.
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
