# src/island_access/models/content.py
"""SQLAlchemy models for posts and the things attached to them."""

from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from island_access.db.session import Base
from island_access.models.base import ResourceMixin


class Post(ResourceMixin, Base):
    """Blog-style post written by a member."""

    __tablename__ = "post"

    key: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    type: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)


class Media(ResourceMixin, Base):
    """Image or video attached to a parent resource."""

    __tablename__ = "media"

    key: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str | None] = mapped_column(Text, index=True, nullable=True)


class Comment(ResourceMixin, Base):
    """Comment left beneath a parent resource."""

    __tablename__ = "comment"

    body: Mapped[str] = mapped_column(Text, nullable=False, default="")


class Hangten(ResourceMixin, Base):
    """A member's endorsement of a parent resource; one per member and parent."""

    __tablename__ = "hangten"
    __table_args__ = (UniqueConstraint("author_id", "parent_id"),)
