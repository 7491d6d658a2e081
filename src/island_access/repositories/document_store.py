"""Document-style reads over the SQL schema.

The access resolver sees storage as named collections of documents looked up
by field-match filters. ``SqlDocumentStore`` provides that view on top of the
SQLAlchemy models: a collection is a table, a document is a row's column
values, and a dotted filter key such as ``"meta.style"`` reaches into a JSON
column.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy import JSON, ColumnElement, inspect, select
from sqlalchemy.orm import Session, sessionmaker

from island_access.collections import collection_name
from island_access.core.exceptions import (
    InvalidFilterError,
    InvalidIdError,
    UnknownCollectionError,
)
from island_access.db.session import Base, SessionLocal
from island_access.models import (
    Action,
    Ascent,
    ClimbSession,
    Comment,
    Country,
    Crag,
    Hangten,
    Media,
    Member,
    Post,
    Subscription,
    Tick,
)

__all__ = ["Document", "DocumentStore", "SqlDocumentStore", "model_for"]

logger = logging.getLogger(__name__)

Document = Mapping[str, Any]

_MODELS: dict[str, type[Base]] = {
    collection_name(model.__tablename__): model
    for model in (
        Member,
        Post,
        Media,
        Comment,
        Hangten,
        Country,
        Crag,
        Ascent,
        ClimbSession,
        Action,
        Tick,
        Subscription,
    )
}


class DocumentStore(Protocol):
    """Read interface the access resolver depends on."""

    async def read(self, collection: str, filter: Mapping[str, Any]) -> Document | None:
        """Return the first document in ``collection`` matching ``filter``."""
        ...

    def is_valid_id(self, value: Any) -> bool:
        """Return True if ``value`` is already a native document id."""
        ...

    def to_id(self, value: Any) -> Any:
        """Coerce an externally sourced value into a native document id."""
        ...


def model_for(collection: str) -> type[Base]:
    """Return the ORM model backing a collection name."""
    try:
        return _MODELS[collection]
    except KeyError as err:
        raise UnknownCollectionError(collection) from err


def to_document(row: Base) -> dict[str, Any]:
    """Return a row's column values keyed by attribute name."""
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


def _json_match(column: Any, path: str, value: Any) -> ColumnElement[bool]:
    keys = tuple(path.split("."))
    element = column[keys[0]] if len(keys) == 1 else column[keys]
    if value is None:
        return element.is_(None)
    # bool first: bool is a subclass of int.
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    return element.as_string() == str(value)


def build_clause(model: type[Base], key: str, value: Any) -> ColumnElement[bool]:
    """Translate one filter entry into a SQL criterion on ``model``."""
    name, _, path = key.partition(".")
    column = model.__table__.columns.get(name)
    if column is None:
        raise InvalidFilterError(f"{model.__tablename__} has no field {name!r}")
    if path:
        if not isinstance(column.type, JSON):
            raise InvalidFilterError(f"{model.__tablename__}.{name} is not a JSON field")
        return _json_match(column, path, value)
    if value is None:
        return column.is_(None)
    return column == value


class SqlDocumentStore:
    """Document store backed by the SQLAlchemy models.

    Every read opens its own session and runs in a worker thread, so reads
    issued together proceed concurrently without sharing a session.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        """Initialize the store with a session factory (defaults to ``SessionLocal``)."""
        self.session_factory = session_factory or SessionLocal

    async def read(self, collection: str, filter: Mapping[str, Any]) -> Document | None:
        """Return the first document in ``collection`` matching ``filter``.

        Raises:
            UnknownCollectionError: If no model backs ``collection``.
            InvalidFilterError: If ``filter`` names an unknown or non-JSON field.
        """
        model = model_for(collection)
        clauses = [build_clause(model, key, value) for key, value in filter.items()]
        return await asyncio.to_thread(self._read_one, model, clauses)

    def _read_one(
        self, model: type[Base], clauses: list[ColumnElement[bool]]
    ) -> dict[str, Any] | None:
        with self.session_factory() as session:
            row = session.execute(select(model).where(*clauses).limit(1)).scalars().first()
            if row is None:
                logger.debug("No %s document matched", model.__tablename__)
                return None
            return to_document(row)

    def is_valid_id(self, value: Any) -> bool:
        """Return True if ``value`` is a UUID instance."""
        return isinstance(value, uuid.UUID)

    def to_id(self, value: Any) -> uuid.UUID:
        """Coerce ``value`` into a UUID.

        Raises:
            InvalidIdError: If ``value`` is not a UUID in any accepted spelling.
        """
        if isinstance(value, uuid.UUID):
            return value
        if value is None or isinstance(value, bool):
            raise InvalidIdError(value)
        try:
            return uuid.UUID(str(value))
        except ValueError as err:
            raise InvalidIdError(value) from err


def get_document_store() -> SqlDocumentStore:
    """Return a document store bound to the application database."""
    return SqlDocumentStore()
