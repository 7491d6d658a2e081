# src/island_access/models/subscription.py
"""SQLAlchemy model for member-to-member subscriptions."""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import JSON, Boolean, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from island_access.db.session import Base


class Subscription(Base):
    """A subscriber watching a subscribee.

    ``meta["style"]`` tags the kind of subscription; ``"follow"`` is the one
    that grants access to a private member's resources, unless muted.
    """

    __tablename__ = "subscription"
    __table_args__ = (UniqueConstraint("subscriber_id", "subscribee_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    subscriber_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    subscribee_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    mute: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    meta: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
