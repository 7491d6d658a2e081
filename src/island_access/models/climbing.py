# src/island_access/models/climbing.py
"""SQLAlchemy models for places, climbs and logged climbing activity."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from island_access.db.session import Base
from island_access.models.base import ResourceMixin


class Country(ResourceMixin, Base):
    """Country grouping crags."""

    __tablename__ = "country"

    key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)


class Crag(ResourceMixin, Base):
    """Climbing area containing ascents."""

    __tablename__ = "crag"

    key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    country_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)


class Ascent(ResourceMixin, Base):
    """A single route or boulder problem at a crag."""

    __tablename__ = "ascent"

    key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    country_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    crag_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)


class ClimbSession(ResourceMixin, Base):
    """A day of climbing logged by a member."""

    __tablename__ = "session"

    key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    env: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    country_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    crag_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)


class Action(ResourceMixin, Base):
    """An activity within a climbing session."""

    __tablename__ = "action"

    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    env: Mapped[str | None] = mapped_column(Text, nullable=True)
    crag_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    session_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)


class Tick(ResourceMixin, Base):
    """A member's record of attempting or sending an ascent."""

    __tablename__ = "tick"

    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    sent: Mapped[bool] = mapped_column(Boolean, index=True, nullable=False, default=False)
    crag_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    ascent_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    grade: Mapped[str | None] = mapped_column(Text, nullable=True)
