"""
Application package initializer.

The package is split into ``core`` (configuration, logging, database,
sorting and paging primitives, error types), ``schemas`` (pydantic
models), ``repositories`` (storage), ``services`` (business rules) and
``api`` (the REST and GraphQL surfaces).
"""

from .main import app  # noqa: F401
