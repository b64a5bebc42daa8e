"""Shared fixtures for index tests."""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from routeindex.index.db import Database, RouteIndexStore
from routeindex.index.models import ContentItem


def _route(path: str | None, disabled: bool, absolute: bool) -> dict[str, Any]:
    return {"Path": path, "Disabled": disabled, "Absolute": absolute}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory(ignore_cleanup_errors=True) as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_db(temp_dir: Path) -> Generator[Database, None, None]:
    """Create a temporary database with schema."""
    db = Database(temp_dir / "test.db")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def store(temp_db: Database) -> RouteIndexStore:
    return RouteIndexStore(temp_db)


@pytest.fixture
def make_node() -> Callable[..., dict[str, Any]]:
    """Raw contained item: ``make_node("b", path="intro", children=[...])``.

    ``path=None`` leaves the node without an AutoroutePart.
    """

    def factory(
        content_item_id: str,
        path: str | None = None,
        *,
        disabled: bool = False,
        absolute: bool = False,
        children: list[dict[str, Any]] | None = None,
        widgets: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        node: dict[str, Any] = {"ContentItemId": content_item_id, "ContentType": "Widget"}
        if path is not None:
            node["AutoroutePart"] = _route(path, disabled, absolute)
        if children is not None:
            node["BagPart"] = {"ContentItems": children}
        if widgets is not None:
            node["FlowPart"] = {"Widgets": widgets}
        return node

    return factory


@pytest.fixture
def make_item() -> Callable[..., ContentItem]:
    """Top-level item with an AutoroutePart unless ``part=False``."""

    def factory(
        content_item_id: str = "x",
        path: str = "articles",
        *,
        published: bool = True,
        latest: bool = True,
        disabled: bool = False,
        removed: bool = False,
        route_contained_items: bool = True,
        part: bool = True,
        children: list[dict[str, Any]] | None = None,
        widgets: list[dict[str, Any]] | None = None,
        version_id: str | None = None,
    ) -> ContentItem:
        data: dict[str, Any] = {
            "ContentItemId": content_item_id,
            "ContentItemVersionId": version_id or f"{content_item_id}-v1",
            "ContentType": "Page",
            "Published": published,
            "Latest": latest,
        }
        if part:
            data["AutoroutePart"] = {
                "Path": path,
                "Disabled": disabled,
                "Removed": removed,
                "RouteContainedItems": route_contained_items,
            }
        if children is not None:
            data["BagPart"] = {"ContentItems": children}
        if widgets is not None:
            data["FlowPart"] = {"Widgets": widgets}
        return ContentItem.from_dict(data)

    return factory
