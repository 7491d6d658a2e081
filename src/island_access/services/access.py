"""Read-visibility decisions for resources and their parent chains.

A resource attached beneath another (a comment on a post, a tick on an
ascent) takes its visibility from the root of its parent chain. The root's
author controls two gates, checked in order:

1. the root's ``public`` flag; an explicit ``False`` hides it from everyone
   but the author;
2. the author's account privacy mode; a PRIVATE author's resources are shown
   only to the author and to members with an active follow subscription.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

from island_access.collections import MEMBERS, SUBSCRIPTIONS, collection_name
from island_access.core.exceptions import (
    AuthorNotFoundError,
    ParentChainTooDeepError,
    ParentNotFoundError,
)
from island_access.core.settings import settings
from island_access.models.member import PrivacyMode, privacy_mode_of
from island_access.repositories.document_store import Document, DocumentStore

__all__ = [
    "FOLLOW_STYLE",
    "can_access",
    "decide",
    "find_follow",
    "resolve_author_id",
    "resolve_root",
]

logger = logging.getLogger(__name__)

FOLLOW_STYLE = "follow"

T = TypeVar("T")


def _coerce_id(store: DocumentStore, value: Any) -> Any:
    return value if store.is_valid_id(value) else store.to_id(value)


def _has_parent(document: Document) -> bool:
    return bool(document.get("parent_id")) and bool(document.get("parent_type"))


async def resolve_root(
    store: DocumentStore,
    resource: Document,
    *,
    max_depth: int | None = None,
) -> Document:
    """Walk up a resource's parents and return the first one without a parent.

    Args:
        store: Document store used to fetch each parent.
        resource: The resource being viewed.
        max_depth: Maximum number of parent hops; defaults to
            ``settings.access_max_parent_depth``.

    Returns:
        The root resource, which is ``resource`` itself when it has no parent.

    Raises:
        ParentNotFoundError: If a declared parent does not exist.
        ParentChainTooDeepError: If more than ``max_depth`` hops are needed.
    """
    limit = settings.access_max_parent_depth if max_depth is None else max_depth
    current = resource
    hops = 0
    while _has_parent(current):
        if hops >= limit:
            logger.warning("Parent chain of %s exceeds %d hops", resource.get("id"), limit)
            raise ParentChainTooDeepError(limit)

        collection = collection_name(current["parent_type"])
        parent_id = _coerce_id(store, current["parent_id"])
        logger.debug("Resolving parent %s in %s", parent_id, collection)
        parent = await store.read(collection, {"id": parent_id})
        if parent is None:
            raise ParentNotFoundError(collection, parent_id)

        current = parent
        hops += 1
    return current


def resolve_author_id(store: DocumentStore, resource: Document) -> Any:
    """Return the store id of a resource's author.

    An embedded ``author`` document takes precedence over ``author_id``.

    Raises:
        AuthorNotFoundError: If the resource references no author.
    """
    author = resource.get("author")
    if isinstance(author, Mapping) and author.get("id") is not None:
        raw = author["id"]
    else:
        raw = resource.get("author_id")
    if raw is None:
        logger.warning("Resource %s has no author reference", resource.get("id"))
        raise AuthorNotFoundError()
    return _coerce_id(store, raw)


async def find_follow(
    store: DocumentStore,
    viewer_id: Any | None,
    author_id: Any,
) -> Document | None:
    """Return the viewer's active follow subscription to the author, if any."""
    if viewer_id is None:
        return None
    return await store.read(
        SUBSCRIPTIONS,
        {
            "subscriber_id": viewer_id,
            "subscribee_id": author_id,
            "mute": False,
            "meta.style": FOLLOW_STYLE,
        },
    )


async def _gather_first_error(*aws: Awaitable[T]) -> list[T]:
    """Await all of ``aws``; on the first failure cancel the rest and re-raise it."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Siblings finish cancelling before the error leaves this call.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def decide(
    viewer_id: Any | None,
    author: Document | None,
    root: Document,
    subscription: Document | None,
) -> bool:
    """Apply the visibility gates to already-fetched records.

    Args:
        viewer_id: Store id of the viewer, or None for anonymous viewers.
        author: Author member document as read from the store.
        root: Root resource whose ``public`` flag applies.
        subscription: Active follow subscription from viewer to author.

    Returns:
        True if the viewer may see the resource.

    Raises:
        AuthorNotFoundError: If the author is missing or has no config.
    """
    if not author or author.get("config") is None:
        logger.warning("Could not find author of resource %s", root.get("id"))
        raise AuthorNotFoundError(author.get("id") if author else None)

    is_author = viewer_id is not None and str(viewer_id) == str(author["id"])
    if is_author:
        return True

    if root.get("public") is False:
        logger.debug("Resource %s is not public; denied", root.get("id"))
        return False

    if subscription is None and privacy_mode_of(author) is PrivacyMode.PRIVATE:
        logger.debug("Author %s is private and not followed; denied", author["id"])
        return False

    return True


async def can_access(
    store: DocumentStore,
    viewer: Document | None,
    resource: Document,
    *,
    max_depth: int | None = None,
    timeout: float | None = None,
) -> bool:
    """Return whether ``viewer`` may view ``resource``.

    Args:
        store: Document store holding resources, members and subscriptions.
        viewer: Viewing member document, or None for anonymous viewers.
        resource: The resource being viewed, already fetched by the caller.
        max_depth: Parent hop bound; defaults to settings.
        timeout: Seconds allowed for the whole resolution; defaults to
            settings. Zero or a negative value disables the timeout.

    Returns:
        True if access is granted, False if it is denied.

    Raises:
        AccessError: If the author cannot be determined or the parent chain
            is broken or too deep.
        TimeoutError: If resolution does not finish within ``timeout``.

    Errors raised by the store propagate unchanged.
    """
    if timeout is None:
        limit = settings.effective_access_timeout
    else:
        limit = timeout if timeout > 0 else None

    async with asyncio.timeout(limit):
        root = await resolve_root(store, resource, max_depth=max_depth)
        author_id = resolve_author_id(store, root)
        viewer_id = _coerce_id(store, viewer["id"]) if viewer else None
        author, subscription = await _gather_first_error(
            store.read(MEMBERS, {"id": author_id}),
            find_follow(store, viewer_id, author_id),
        )

    allowed = decide(viewer_id, author, root, subscription)
    logger.debug(
        "Access to %s for %s: %s",
        resource.get("id"),
        viewer_id or "anonymous",
        "granted" if allowed else "denied",
    )
    return allowed
