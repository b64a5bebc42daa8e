"""Depth-first walk over the contained items of a content item."""

from __future__ import annotations

import structlog

from routeindex.index.aspects import AspectResolver
from routeindex.index.models import (
    AutoroutePartIndex,
    ContainedItemsAspect,
    ContentItem,
    ContentNode,
)

logger = structlog.get_logger()

PATH_SEPARATOR = "/"


def join_route_path(base_path: str, segment: str) -> str:
    """Append ``segment`` to ``base_path`` with exactly one separator between them."""
    if not base_path.endswith(PATH_SEPARATOR):
        base_path += PATH_SEPARATOR
    return base_path + segment


class ContainedItemWalker:
    """Emits one index record per enabled contained item, pre-order.

    Every record carries the owner's identifier and publication flags. A
    disabled item emits nothing itself but its children are still walked,
    and an absolute item's children still build on the relative path.
    """

    def __init__(self, resolver: AspectResolver) -> None:
        self._resolver = resolver

    async def walk(
        self,
        owner: ContentItem,
        aspect: ContainedItemsAspect | None,
        node: ContentNode,
        base_path: str,
    ) -> list[AutoroutePartIndex]:
        results: list[AutoroutePartIndex] = []
        await self._populate(results, owner, aspect, node, base_path)
        return results

    async def _populate(
        self,
        results: list[AutoroutePartIndex],
        owner: ContentItem,
        aspect: ContainedItemsAspect | None,
        node: ContentNode,
        base_path: str,
    ) -> None:
        if aspect is None:
            return

        for accessor in aspect.accessors:
            for child in accessor(node):
                handler = await self._resolver.resolve_route_handler(child)
                relative_path = join_route_path(base_path, handler.path)

                if not handler.disabled:
                    results.append(
                        AutoroutePartIndex(
                            content_item_id=owner.content_item_id,
                            path=handler.path if handler.absolute else relative_path,
                            published=owner.published,
                            latest=owner.latest,
                            contained_content_item_id=child.content_item_id,
                            json_path=child.locator,
                        )
                    )
                else:
                    logger.debug(
                        "contained_item_disabled",
                        content_item_id=owner.content_item_id,
                        contained_content_item_id=child.content_item_id,
                    )

                children = await self._resolver.resolve_contained_items(child)
                await self._populate(results, owner, children, child, relative_path)
