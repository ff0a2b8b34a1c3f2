"""
REST endpoint modules.

Each module defines an ``APIRouter`` for one resource; they are
aggregated in ``api/router.py``.
"""
