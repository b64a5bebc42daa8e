"""Tests for content models."""

from __future__ import annotations

import pytest

from routeindex.core.errors import ContentError
from routeindex.index.models import AutoroutePart, ContentItem, ContentNode


class TestContentItem:
    """Parsing top-level items."""

    def test_from_dict_splits_metadata_and_payload(self) -> None:
        item = ContentItem.from_dict(
            {
                "ContentItemId": "x",
                "ContentItemVersionId": "x-2",
                "ContentType": "Article",
                "Published": True,
                "Latest": False,
                "TitlePart": {"Title": "Hello"},
            }
        )

        assert item.content_item_id == "x"
        assert item.content_item_version_id == "x-2"
        assert item.content_type == "Article"
        assert item.published is True
        assert item.latest is False
        assert item.content == {"TitlePart": {"Title": "Hello"}}
        assert item.locator == ""

    def test_version_id_defaults_to_item_id(self) -> None:
        item = ContentItem.from_dict({"ContentItemId": "x"})

        assert item.content_item_version_id == "x"
        assert item.published is False
        assert item.latest is False

    @pytest.mark.parametrize("data", [[], "x", {"ContentType": "Page"}, {"ContentItemId": 5}])
    def test_malformed_items_raise(self, data: object) -> None:
        with pytest.raises(ContentError):
            ContentItem.from_dict(data)

    def test_to_dict_round_trips_payload(self) -> None:
        data = {
            "ContentItemId": "x",
            "ContentItemVersionId": "x-1",
            "ContentType": "Page",
            "Published": True,
            "Latest": True,
            "AutoroutePart": {"Path": "a"},
        }

        assert ContentItem.from_dict(data).to_dict() == data

    def test_to_dict_omits_metadata_absent_from_source(self) -> None:
        data = {"ContentItemId": "x", "Published": True, "AutoroutePart": {"Path": "a"}}

        item = ContentItem.from_dict(data)

        assert item.content_item_version_id == "x"
        assert item.to_dict() == data

    def test_to_dict_of_constructed_item_writes_all_metadata(self) -> None:
        item = ContentItem(content_item_id="x", content_item_version_id="x-1")

        assert item.to_dict() == {
            "ContentItemId": "x",
            "ContentItemVersionId": "x-1",
            "ContentType": "",
            "Published": False,
            "Latest": False,
        }


class TestAutoroutePart:
    """Reading and applying the routing part."""

    def test_missing_part_is_none(self) -> None:
        assert ContentNode(content_item_id="x").autoroute_part() is None

    def test_defaults_for_missing_keys(self) -> None:
        node = ContentNode(content_item_id="x", content={"AutoroutePart": {}})

        assert node.autoroute_part() == AutoroutePart()

    def test_non_object_part_raises(self) -> None:
        node = ContentNode(content_item_id="x", content={"AutoroutePart": "articles"})

        with pytest.raises(ContentError):
            node.autoroute_part()

    def test_apply_writes_back_and_keeps_extra_keys(self) -> None:
        node = ContentNode(
            content_item_id="x",
            content={"AutoroutePart": {"Path": "a", "Removed": True, "SetHomepage": False}},
        )
        part = node.autoroute_part()
        assert part is not None

        part.removed = False
        node.apply_autoroute_part(part)

        assert node.content["AutoroutePart"]["Removed"] is False
        assert node.content["AutoroutePart"]["SetHomepage"] is False
        assert node.autoroute_part() == part
