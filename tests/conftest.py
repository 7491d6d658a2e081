# tests/conftest.py
from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

os.environ.setdefault("SECRET_KEY", "island-test-secret")

from island_access.api.v1.dependencies import get_store
from island_access.db.session import Base
from island_access.main import app as fastapi_app
from island_access.models import Member, PrivacyMode
from island_access.repositories.document_store import SqlDocumentStore

_MISSING = object()


def _lookup(document: Mapping[str, Any], key: str) -> Any:
    value: Any = document
    for part in key.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return _MISSING
        value = value[part]
    return value


class FakeStore:
    """In-memory document store recording every read."""

    def __init__(self) -> None:
        self.collections: dict[str, list[dict[str, Any]]] = {}
        self.reads: list[tuple[str, dict[str, Any]]] = []

    def add(self, collection: str, **fields: Any) -> dict[str, Any]:
        document = {"id": uuid.uuid4(), **fields}
        self.collections.setdefault(collection, []).append(document)
        return document

    def add_member(self, mode: Any = PrivacyMode.PUBLIC.value, **fields: Any) -> dict[str, Any]:
        fields.setdefault("config", {"privacy": {"mode": mode}})
        return self.add("Members", **fields)

    def follow(self, subscriber: Mapping[str, Any], subscribee: Mapping[str, Any], *,
               mute: bool = False, style: str = "follow") -> dict[str, Any]:
        return self.add(
            "Subscriptions",
            subscriber_id=subscriber["id"],
            subscribee_id=subscribee["id"],
            mute=mute,
            meta={"style": style},
        )

    def reads_of(self, collection: str) -> list[dict[str, Any]]:
        return [flt for name, flt in self.reads if name == collection]

    async def read(self, collection: str, filter: Mapping[str, Any]) -> dict[str, Any] | None:
        self.reads.append((collection, dict(filter)))
        for document in self.collections.get(collection, []):
            if all(_lookup(document, key) == value for key, value in filter.items()):
                return document
        return None

    def is_valid_id(self, value: Any) -> bool:
        return isinstance(value, uuid.UUID)

    def to_id(self, value: Any) -> uuid.UUID:
        return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


@pytest.fixture()
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    # File-backed so reads in worker threads each get their own connection.
    engine = create_engine(
        f"sqlite:///{tmp_path / 'island.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(session_factory: sessionmaker[Session]) -> SqlDocumentStore:
    return SqlDocumentStore(session_factory)


@pytest.fixture()
def persist(db_session: Session) -> Callable[..., Any]:
    """Add and commit ORM rows, returning the first one."""

    def _persist(*rows: Any) -> Any:
        db_session.add_all(rows)
        db_session.commit()
        return rows[0]

    return _persist


@pytest.fixture()
def make_member(persist: Callable[..., Any]) -> Callable[..., Member]:
    """Return a factory creating committed members with a privacy mode."""

    def _make(username: str, mode: str = PrivacyMode.PUBLIC.value) -> Member:
        return persist(Member(username=username, config={"privacy": {"mode": mode}}))

    return _make


@pytest.fixture()
def app(store: SqlDocumentStore) -> Iterator[FastAPI]:
    fastapi_app.dependency_overrides[get_store] = lambda: store
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.pop(get_store, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
