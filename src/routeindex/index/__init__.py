"""Index module - route paths for content items and their contained items.

Public API:
- RouteIndexBuilder: records for one content item
- ContainedItemWalker, join_route_path: the contained-item traversal
- AspectResolver, JsonAspectResolver: aspect queries against content nodes
- RouteIndexStore, Database: SQLite persistence
- RouteIndexCoordinator: build and persist batches
"""

from routeindex.index.aspects import AspectResolver, JsonAspectResolver, make_container_accessor
from routeindex.index.builder import RouteIndexBuilder
from routeindex.index.db import Database, RouteIndexStore
from routeindex.index.models import (
    AutoroutePart,
    AutoroutePartIndex,
    ContainedItemsAccessor,
    ContainedItemsAspect,
    ContentItem,
    ContentNode,
    RouteHandlerAspect,
)
from routeindex.index.ops import IndexResult, IndexStats, RouteIndexCoordinator
from routeindex.index.walker import ContainedItemWalker, join_route_path

__all__ = [
    # Entry points
    "RouteIndexBuilder",
    "RouteIndexCoordinator",
    "IndexResult",
    "IndexStats",
    # Traversal
    "ContainedItemWalker",
    "join_route_path",
    # Aspects
    "AspectResolver",
    "JsonAspectResolver",
    "make_container_accessor",
    # Storage
    "Database",
    "RouteIndexStore",
    # Models
    "AutoroutePart",
    "AutoroutePartIndex",
    "ContainedItemsAccessor",
    "ContainedItemsAspect",
    "ContentItem",
    "ContentNode",
    "RouteHandlerAspect",
]
