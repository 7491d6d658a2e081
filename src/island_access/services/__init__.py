# src/island_access/services/__init__.py
"""Business logic services for the Island application."""

from .access import can_access, decide, resolve_author_id, resolve_root

__all__ = [
    "can_access",
    "decide",
    "resolve_author_id",
    "resolve_root",
]
