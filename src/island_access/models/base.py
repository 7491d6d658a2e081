# src/island_access/models/base.py
"""Columns shared by every authored resource."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column


class ResourceMixin:
    """Identity, ownership and parent link of an authored resource.

    A resource with both ``parent_id`` and ``parent_type`` set is attached
    beneath that parent, whose author and ``public`` flag govern visibility.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    author_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    parent_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True, nullable=True)
    parent_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    # NULL means visible; only an explicit False hides the resource.
    public: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
