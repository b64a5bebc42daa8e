"""Aspect resolution: route metadata and contained items of a content node.

The builder and walker only depend on the ``AspectResolver`` protocol.
``JsonAspectResolver`` is the implementation for JSON-shaped content where
routing lives in an ``AutoroutePart`` object and contained items sit in lists
at configurable dotted paths (``BagPart.ContentItems``, ``FlowPart.Widgets``).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Protocol

from routeindex.config.models import DEFAULT_CONTAINER_PATHS
from routeindex.core.errors import ContentError
from routeindex.index.models import (
    AUTOROUTE_PART,
    ContainedItemsAccessor,
    ContainedItemsAspect,
    ContentNode,
    RouteHandlerAspect,
)


class AspectResolver(Protocol):
    """Capability queries the index builder runs against content nodes.

    Implementations must be safe to share between concurrent builds.
    """

    async def resolve_route_handler(self, node: ContentNode) -> RouteHandlerAspect:
        """Route metadata of ``node``. Never fails; absent metadata is disabled."""
        ...

    async def resolve_contained_items(self, node: ContentNode) -> ContainedItemsAspect | None:
        """Accessors for the immediate children of ``node``, in a stable order."""
        ...


def _lookup(content: Mapping[str, Any], dotted: str) -> Any:
    current: Any = content
    for segment in dotted.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
    return current


def _container_locator(parent: str, container_path: str) -> str:
    return f"{parent}.{container_path}" if parent else container_path


def make_container_accessor(container_path: str) -> ContainedItemsAccessor:
    """Accessor yielding the nodes stored in the list at ``container_path``."""

    def accessor(node: ContentNode) -> Iterator[ContentNode]:
        items = _lookup(node.content, container_path)
        if items is None:
            return
        locator = _container_locator(node.locator, container_path)
        if not isinstance(items, list):
            raise ContentError.malformed_container(
                locator,
                f"expected a list, got {type(items).__name__}",
            )
        for index, raw in enumerate(items):
            yield ContentNode.from_dict(raw, locator=f"{locator}[{index}]")

    return accessor


class JsonAspectResolver:
    """Resolve aspects straight from a node's JSON payload."""

    def __init__(self, container_paths: Sequence[str] | None = None) -> None:
        paths = DEFAULT_CONTAINER_PATHS if container_paths is None else container_paths
        self.container_paths = tuple(paths)
        self._accessors = {path: make_container_accessor(path) for path in self.container_paths}

    async def resolve_route_handler(self, node: ContentNode) -> RouteHandlerAspect:
        raw = node.content.get(AUTOROUTE_PART)
        if not isinstance(raw, Mapping):
            return RouteHandlerAspect()
        return RouteHandlerAspect(
            path=raw.get("Path") or "",
            disabled=bool(raw.get("Disabled", False)),
            absolute=bool(raw.get("Absolute", False)),
        )

    async def resolve_contained_items(self, node: ContentNode) -> ContainedItemsAspect | None:
        present = [
            self._accessors[path]
            for path in self.container_paths
            if _lookup(node.content, path) is not None
        ]
        if not present:
            return None
        return ContainedItemsAspect(accessors=present)
