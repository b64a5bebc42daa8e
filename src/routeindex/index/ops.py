"""High-level orchestration: build route index records and persist them.

The RouteIndexCoordinator is the entry point used by indexing pipelines and
the CLI. Builds for different items run concurrently; persistence is
sequential, one document per transaction.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from routeindex.core.logging import clear_run_id, set_run_id
from routeindex.index.aspects import AspectResolver, JsonAspectResolver
from routeindex.index.builder import RouteIndexBuilder
from routeindex.index.db import Database, RouteIndexStore

if TYPE_CHECKING:
    from routeindex.config.models import RouteIndexConfig
    from routeindex.index.models import AutoroutePartIndex, ContentItem

logger = structlog.get_logger()


@dataclass
class IndexResult:
    """Outcome of indexing one content item version."""

    content_item: ContentItem
    records: list[AutoroutePartIndex] | None

    @property
    def routable(self) -> bool:
        return self.records is not None


@dataclass
class IndexStats:
    """Statistics from an indexing batch."""

    items_processed: int
    items_indexed: int
    items_skipped: int
    records_written: int
    duration_seconds: float


class RouteIndexCoordinator:
    """Build records with a RouteIndexBuilder and store them per document."""

    def __init__(self, store: RouteIndexStore, resolver: AspectResolver) -> None:
        self.store = store
        self.builder = RouteIndexBuilder(resolver)

    @classmethod
    def from_config(
        cls, config: RouteIndexConfig, db_path: Path | None = None
    ) -> RouteIndexCoordinator:
        """Open (and create if needed) the configured store."""
        db = Database(
            db_path or Path(config.index.db_path),
            busy_timeout_ms=config.database.busy_timeout_ms,
        )
        db.create_all()
        return cls(RouteIndexStore(db), JsonAspectResolver(config.index.container_paths))

    async def index(self, content_item: ContentItem) -> IndexResult:
        records = await self.builder.build(content_item)
        self.store.replace(content_item.content_item_version_id, records)
        return IndexResult(content_item=content_item, records=records)

    async def index_many(self, content_items: Iterable[ContentItem]) -> IndexStats:
        items = list(content_items)
        set_run_id()
        start = time.perf_counter()
        try:
            built = await asyncio.gather(*(self.builder.build(item) for item in items))

            indexed = 0
            written = 0
            for item, records in zip(items, built, strict=True):
                written += self.store.replace(item.content_item_version_id, records)
                if records is not None:
                    indexed += 1

            stats = IndexStats(
                items_processed=len(items),
                items_indexed=indexed,
                items_skipped=len(items) - indexed,
                records_written=written,
                duration_seconds=time.perf_counter() - start,
            )
            logger.info(
                "route_index_batch",
                items=stats.items_processed,
                indexed=stats.items_indexed,
                skipped=stats.items_skipped,
                records=stats.records_written,
                duration_sec=round(stats.duration_seconds, 3),
            )
            return stats
        finally:
            clear_run_id()
