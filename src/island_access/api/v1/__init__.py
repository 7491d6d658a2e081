# src/island_access/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import resources_router

__all__ = ["resources_router"]
