"""Resource types and the collections that store them.

A resource names its parent by type (``parent_type="crag"``); the store keeps
each type in a collection whose name is the capitalised plural of the type
(``"Crags"``). Only the types listed here are resolvable.
"""

from __future__ import annotations

from island_access.core.exceptions import UnknownCollectionError

# Types that carry an author and can be the target of a visibility check.
RESOURCE_TYPES: frozenset[str] = frozenset(
    {
        "post",
        "media",
        "comment",
        "hangten",
        "country",
        "crag",
        "ascent",
        "session",
        "action",
        "tick",
    }
)

COLLECTION_TYPES: frozenset[str] = RESOURCE_TYPES | {"member", "subscription"}


def collection_name(resource_type: str) -> str:
    """Return the collection name for a resource type.

    Raises:
        UnknownCollectionError: If the type is not a known collection type.
    """
    if resource_type not in COLLECTION_TYPES:
        raise UnknownCollectionError(resource_type)
    return resource_type[:1].upper() + resource_type[1:] + "s"


MEMBERS = collection_name("member")
SUBSCRIPTIONS = collection_name("subscription")
