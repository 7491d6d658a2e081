# src/island_access/models/member.py
"""SQLAlchemy model for members and their privacy settings."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from island_access.db.session import Base


class PrivacyMode(str, Enum):
    """Account-wide visibility of a member's resources."""

    PUBLIC = "0"
    PRIVATE = "1"

    @classmethod
    def parse(cls, raw: Any) -> PrivacyMode:
        """Map a stored mode to an enum member.

        Stored modes may be strings or numbers; numbers compare by value so
        ``1.0`` is PRIVATE. Anything else is PUBLIC.
        """
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cls.PRIVATE if raw == 1 else cls.PUBLIC
        if raw is not None and str(raw) == cls.PRIVATE.value:
            return cls.PRIVATE
        return cls.PUBLIC


def default_config() -> dict[str, Any]:
    """Return the config given to newly created members."""
    return {"privacy": {"mode": PrivacyMode.PUBLIC.value}}


def privacy_mode_of(member: Mapping[str, Any]) -> PrivacyMode:
    """Return the privacy mode stored in a member document."""
    config = member.get("config") or {}
    privacy = config.get("privacy") or {}
    return PrivacyMode.parse(privacy.get("mode"))


class Member(Base):
    """A registered climber; authors resources and views others'."""

    __tablename__ = "member"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # Sparse unique: many members may have no email.
    primary_email: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    role: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    config: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=default_config,
    )
