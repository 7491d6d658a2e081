"""Exceptions raised while resolving resource access."""

from __future__ import annotations

from typing import Any


class AccessError(RuntimeError):
    """Base exception for failures to reach an access decision.

    A denied viewer is not an error; resolvers return ``False`` for that.
    """


class AuthorNotFoundError(AccessError):
    """Raised when a resource author is missing or has no stored config."""

    def __init__(self, author_id: Any = None) -> None:
        self.author_id = author_id
        super().__init__("Could not find resource author")


class ParentNotFoundError(AccessError):
    """Raised when a resource names a parent that does not exist."""

    def __init__(self, collection: str, parent_id: Any) -> None:
        self.collection = collection
        self.parent_id = parent_id
        super().__init__(f"Parent {parent_id} not found in {collection}")


class ParentChainTooDeepError(AccessError):
    """Raised when a parent chain is longer than the configured bound."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Parent chain exceeds {max_depth} hops")


class StoreError(RuntimeError):
    """Base exception for document store lookups."""


class UnknownCollectionError(StoreError):
    """Raised for resource types or collection names the store does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown collection: {name!r}")


class InvalidIdError(StoreError, ValueError):
    """Raised when a value cannot be coerced into a document id."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid document id: {value!r}")


class InvalidFilterError(StoreError):
    """Raised when a filter names a field the collection does not have."""
