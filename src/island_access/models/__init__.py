# src/island_access/models/__init__.py
"""SQLAlchemy models for the Island application."""

from .climbing import Action, Ascent, ClimbSession, Country, Crag, Tick
from .content import Comment, Hangten, Media, Post
from .member import Member, PrivacyMode, privacy_mode_of
from .subscription import Subscription

__all__ = [
    "Action", "Ascent", "ClimbSession", "Country", "Crag", "Tick",
    "Comment", "Hangten", "Media", "Post",
    "Member", "PrivacyMode", "privacy_mode_of",
    "Subscription",
]
