"""Content node, aspect and index record definitions.

Content items are JSON-like documents. Metadata lives under PascalCase keys
(``ContentItemId``, ``Published``...) and every other key is part of the
item's payload, e.g. ``AutoroutePart`` or ``BagPart``. Nested items use the
same shape, so a contained item can be handed to the aspect resolver exactly
like a top-level one.

``AutoroutePartIndex`` is the only table; one row per routable node.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlmodel import Field, SQLModel

from routeindex.core.errors import ContentError

CONTENT_ITEM_ID = "ContentItemId"
CONTENT_ITEM_VERSION_ID = "ContentItemVersionId"
CONTENT_TYPE = "ContentType"
PUBLISHED = "Published"
LATEST = "Latest"
AUTOROUTE_PART = "AutoroutePart"

_METADATA_KEYS = frozenset(
    {CONTENT_ITEM_ID, CONTENT_ITEM_VERSION_ID, CONTENT_TYPE, PUBLISHED, LATEST}
)


# ============================================================================
# CONTENT
# ============================================================================


@dataclass
class AutoroutePart:
    """Routing configuration attached to a content node."""

    path: str = ""
    disabled: bool = False
    removed: bool = False
    route_contained_items: bool = False
    absolute: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AutoroutePart":
        return cls(
            path=data.get("Path") or "",
            disabled=bool(data.get("Disabled", False)),
            removed=bool(data.get("Removed", False)),
            route_contained_items=bool(data.get("RouteContainedItems", False)),
            absolute=bool(data.get("Absolute", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Path": self.path,
            "Disabled": self.disabled,
            "Removed": self.removed,
            "RouteContainedItems": self.route_contained_items,
            "Absolute": self.absolute,
        }


@dataclass
class ContentNode:
    """A content-like node: a top-level item or one found inside a container.

    ``locator`` is the JSON path of the node within its owning item's payload
    and is empty for the owning item itself.
    """

    content_item_id: str
    content_type: str = ""
    content: dict[str, Any] = field(default_factory=dict)
    locator: str = ""

    @classmethod
    def from_dict(cls, data: Any, locator: str = "") -> "ContentNode":
        """Build a node from a raw mapping found inside a container."""
        if not isinstance(data, Mapping):
            raise ContentError.malformed_item(
                f"expected an object, got {type(data).__name__}", locator=locator
            )
        content_item_id = data.get(CONTENT_ITEM_ID)
        if not content_item_id or not isinstance(content_item_id, str):
            raise ContentError.missing_identifier(locator)
        return cls(
            content_item_id=content_item_id,
            content_type=str(data.get(CONTENT_TYPE) or ""),
            content=_payload(data),
            locator=locator,
        )

    def autoroute_part(self) -> AutoroutePart | None:
        """Return the node's routing configuration, or None if it has none."""
        raw = self.content.get(AUTOROUTE_PART)
        if raw is None:
            return None
        if not isinstance(raw, Mapping):
            raise ContentError.malformed_item(
                f"{AUTOROUTE_PART} must be an object",
                content_item_id=self.content_item_id,
            )
        return AutoroutePart.from_dict(raw)

    def apply_autoroute_part(self, part: AutoroutePart) -> None:
        """Write ``part`` back into the payload, keeping unknown keys."""
        existing = self.content.get(AUTOROUTE_PART)
        merged = dict(existing) if isinstance(existing, Mapping) else {}
        merged.update(part.to_dict())
        self.content[AUTOROUTE_PART] = merged


@dataclass
class ContentItem(ContentNode):
    """A top-level content item version with its publication state.

    ``source_keys`` records which metadata keys the parsed document carried so
    ``to_dict`` writes back only those. None writes every key.
    """

    content_item_version_id: str = ""
    published: bool = False
    latest: bool = False
    source_keys: frozenset[str] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any, locator: str = "") -> "ContentItem":
        if not isinstance(data, Mapping):
            raise ContentError.malformed_item(
                f"expected an object, got {type(data).__name__}"
            )
        content_item_id = data.get(CONTENT_ITEM_ID)
        if not content_item_id or not isinstance(content_item_id, str):
            raise ContentError.malformed_item(f"missing {CONTENT_ITEM_ID}")
        return cls(
            content_item_id=content_item_id,
            content_type=str(data.get(CONTENT_TYPE) or ""),
            content=_payload(data),
            locator=locator,
            content_item_version_id=str(data.get(CONTENT_ITEM_VERSION_ID) or content_item_id),
            published=bool(data.get(PUBLISHED, False)),
            latest=bool(data.get(LATEST, False)),
            source_keys=_METADATA_KEYS.intersection(data),
        )

    def to_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {
            CONTENT_ITEM_ID: self.content_item_id,
            CONTENT_ITEM_VERSION_ID: self.content_item_version_id,
            CONTENT_TYPE: self.content_type,
            PUBLISHED: self.published,
            LATEST: self.latest,
        }
        if self.source_keys is not None:
            # The id is always written; the version id fallback is not.
            keep = self.source_keys | {CONTENT_ITEM_ID}
            metadata = {key: value for key, value in metadata.items() if key in keep}
        return {**metadata, **self.content}


def _payload(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in _METADATA_KEYS}


# ============================================================================
# ASPECTS
# ============================================================================


@dataclass(frozen=True)
class RouteHandlerAspect:
    """Route metadata of a single node. Absent metadata means disabled."""

    path: str = ""
    disabled: bool = True
    absolute: bool = False


ContainedItemsAccessor = Callable[[ContentNode], Iterable[ContentNode]]


@dataclass
class ContainedItemsAspect:
    """Ordered accessors yielding the immediate children of a node."""

    accessors: list[ContainedItemsAccessor] = field(default_factory=list)


# ============================================================================
# INDEX RECORDS
# ============================================================================


class AutoroutePartIndex(SQLModel, table=True):
    """Route path of a content item or of one of its contained items.

    ``document_id`` is assigned by the store (the owning item's version id);
    ``contained_content_item_id`` and ``json_path`` are only set for
    contained items.
    """

    __tablename__ = "autoroute_part_index"

    id: int | None = Field(default=None, primary_key=True)
    document_id: str | None = Field(default=None, index=True)
    content_item_id: str = Field(index=True)
    path: str | None = Field(default=None, index=True)
    published: bool = False
    latest: bool = False
    contained_content_item_id: str | None = None
    json_path: str | None = None
