"""Route index records for a single content item."""

from __future__ import annotations

import structlog

from routeindex.index.aspects import AspectResolver
from routeindex.index.models import AutoroutePartIndex, ContentItem
from routeindex.index.walker import ContainedItemWalker

logger = structlog.get_logger()


class RouteIndexBuilder:
    """
    Map a content item to its ``AutoroutePartIndex`` records.

    Returns None when the item is not subject to routing: it has no
    ``AutoroutePart``, or it is neither published nor latest and was not
    flagged as removed. Otherwise the first record always describes the item
    itself, followed by its contained items in depth-first pre-order.

    When contained items are not walked, a pending ``removed`` flag is
    cleared on the item's part. The caller persists the item together with
    the records.

    Usage::

        builder = RouteIndexBuilder(JsonAspectResolver())
        records = await builder.build(item)
    """

    def __init__(self, resolver: AspectResolver) -> None:
        self._resolver = resolver
        self._walker = ContainedItemWalker(resolver)

    async def build(self, content_item: ContentItem) -> list[AutoroutePartIndex] | None:
        part = content_item.autoroute_part()
        if part is None:
            logger.debug(
                "route_index_skipped",
                content_item_id=content_item.content_item_id,
                reason="no_autoroute_part",
            )
            return None

        # A removed item still gets one last entry so the old one is replaced.
        if not content_item.published and not content_item.latest and not part.removed:
            logger.debug(
                "route_index_skipped",
                content_item_id=content_item.content_item_id,
                reason="inactive",
            )
            return None

        results = [
            AutoroutePartIndex(
                content_item_id=content_item.content_item_id,
                path=part.path if not part.disabled and part.path else None,
                published=content_item.published,
                latest=content_item.latest,
            )
        ]

        if not part.route_contained_items or not part.path or part.disabled or part.removed:
            # Don't persist the part as removed.
            if part.removed:
                part.removed = False
                content_item.apply_autoroute_part(part)
            logger.debug(
                "route_index_built",
                content_item_id=content_item.content_item_id,
                records=len(results),
            )
            return results

        aspect = await self._resolver.resolve_contained_items(content_item)
        results.extend(await self._walker.walk(content_item, aspect, content_item, part.path))

        logger.debug(
            "route_index_built",
            content_item_id=content_item.content_item_id,
            records=len(results),
        )
        return results
