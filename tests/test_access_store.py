# tests/test_access_store.py
"""Access decisions resolved against the SQL document store."""

from __future__ import annotations

import pytest

from island_access.core.exceptions import AuthorNotFoundError, ParentNotFoundError
from island_access.models import Ascent, Comment, Crag, Media, Post, Subscription, Tick
from island_access.services.access import can_access


async def _doc(store, collection, row):
    return await store.read(collection, {"id": row.id})


@pytest.mark.asyncio
async def test_hidden_post_denied_to_anonymous(store, make_member, persist):
    author = make_member("author")
    post = persist(Post(key="p1", author_id=author.id, public=False))

    assert await can_access(store, None, await _doc(store, "Posts", post)) is False


@pytest.mark.asyncio
async def test_private_author_scenarios(store, make_member, persist):
    author = make_member("author", mode="1")
    viewer = make_member("viewer")
    post = persist(Post(key="p1", author_id=author.id, public=None))
    document = await _doc(store, "Posts", post)
    viewer_doc = await _doc(store, "Members", viewer)

    assert await can_access(store, viewer_doc, document) is False

    persist(
        Subscription(
            subscriber_id=viewer.id,
            subscribee_id=author.id,
            mute=False,
            meta={"style": "follow"},
        )
    )

    assert await can_access(store, viewer_doc, document) is True


@pytest.mark.asyncio
async def test_tick_inherits_visibility_of_ascent_root(store, make_member, persist):
    setter = make_member("setter", mode="1")
    climber = make_member("climber")
    crag = persist(Crag(key="ceuse", author_id=setter.id))
    ascent = persist(
        Ascent(key="biographie", author_id=setter.id, parent_id=crag.id, parent_type="crag")
    )
    tick = persist(
        Tick(author_id=climber.id, parent_id=ascent.id, parent_type="ascent", sent=True, public=True)
    )
    climber_doc = await _doc(store, "Members", climber)
    setter_doc = await _doc(store, "Members", setter)
    tick_doc = await _doc(store, "Ticks", tick)

    # The crag's private author governs the tick, not the climber who logged it.
    assert await can_access(store, climber_doc, tick_doc) is False
    assert await can_access(store, setter_doc, tick_doc) is True


@pytest.mark.asyncio
async def test_comment_on_media_on_post(store, make_member, persist):
    owner = make_member("owner")
    post = persist(Post(key="trip", author_id=owner.id, public=True))
    media = persist(Media(author_id=owner.id, parent_id=post.id, parent_type="post", type="image"))
    comment = persist(Comment(author_id=owner.id, parent_id=media.id, parent_type="media", body="wow"))

    assert await can_access(store, None, await _doc(store, "Comments", comment)) is True


@pytest.mark.asyncio
async def test_deleted_parent_raises(store, make_member, persist, db_session):
    owner = make_member("owner")
    post = persist(Post(key="gone", author_id=owner.id))
    comment = persist(Comment(author_id=owner.id, parent_id=post.id, parent_type="post"))
    comment_doc = await _doc(store, "Comments", comment)
    db_session.delete(post)
    db_session.commit()

    with pytest.raises(ParentNotFoundError):
        await can_access(store, None, comment_doc)


@pytest.mark.asyncio
async def test_author_without_record_raises(store, persist):
    import uuid

    post = persist(Post(key="orphan", author_id=uuid.uuid4()))

    with pytest.raises(AuthorNotFoundError):
        await can_access(store, None, await _doc(store, "Posts", post))
