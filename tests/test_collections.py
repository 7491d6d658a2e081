# tests/test_collections.py
import pytest

from island_access.collections import (
    COLLECTION_TYPES,
    MEMBERS,
    RESOURCE_TYPES,
    SUBSCRIPTIONS,
    collection_name,
)
from island_access.core.exceptions import UnknownCollectionError


@pytest.mark.parametrize(
    ("resource_type", "expected"),
    [("crag", "Crags"), ("post", "Posts"), ("media", "Medias"), ("session", "Sessions")],
)
def test_collection_name_capitalises_and_pluralises(resource_type, expected):
    assert collection_name(resource_type) == expected


def test_reader_collections():
    assert MEMBERS == "Members"
    assert SUBSCRIPTIONS == "Subscriptions"


def test_members_are_not_viewable_resources():
    assert "member" in COLLECTION_TYPES
    assert "member" not in RESOURCE_TYPES
    assert "subscription" not in RESOURCE_TYPES


@pytest.mark.parametrize("resource_type", ["gym", "", "Crag", "crags"])
def test_unknown_types_raise(resource_type):
    with pytest.raises(UnknownCollectionError) as exc_info:
        collection_name(resource_type)
    assert exc_info.value.name == resource_type
