"""Global object identification: type registry and node router.

Every entity exposed as a GraphQL ``Node`` carries a global id of the form
``<token><type tag>``. The registry maps each type tag to the entity's type
name and its fetch/delete capabilities; the router classifies an id by tag
suffix and delegates to the matching capability.

The registry is populated once at startup and read-only afterwards, so lookups
need no locking. Registration rejects any tag that equals, or is a suffix of,
or has as suffix, an already-registered tag, which makes lookup independent of
registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from app.domain.exceptions import (
    DuplicateOrAmbiguousTagException,
    UnroutableIdException,
)

logger = logging.getLogger(__name__)

# Capabilities receive the request-scoped DB session first, then the global id.
type FetchById = Callable[[Any, str], Awaitable[Any | None]]
type DeleteById = Callable[[Any, str], Awaitable[Any]]


@dataclass(frozen=True)
class NodeType:
    """One registered entity type: tag, GraphQL type name, and capabilities."""

    tag: str
    type_name: str
    fetch_by_id: FetchById
    delete_by_id: DeleteById

    def matches(self, global_id: str) -> bool:
        """Return True if global_id ends with this tag."""
        return global_id.endswith(self.tag)


def _id_of(obj: Any) -> Any:
    """Return the id of a mapping or attribute-bearing object (None if missing)."""
    if isinstance(obj, Mapping):
        return obj.get("id")
    return getattr(obj, "id", None)


class NodeRegistry:
    """Startup-populated table mapping type tags to NodeType entries.

    Iteration follows registration order; lookup does not depend on it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, NodeType] = {}

    def register(
        self,
        tag: str,
        type_name: str,
        fetch_by_id: FetchById,
        delete_by_id: DeleteById,
    ) -> NodeType:
        """Add an entity type.

        Raises:
            DuplicateOrAmbiguousTagException: tag is empty, already registered,
                or a suffix of (or suffixed by) a registered tag.
            ValueError: type_name is empty.
        """
        if not tag:
            raise DuplicateOrAmbiguousTagException(tag)
        if not type_name:
            raise ValueError(f"Type name is required for tag {tag!r}")
        for existing in self._entries:
            if existing.endswith(tag) or tag.endswith(existing):
                raise DuplicateOrAmbiguousTagException(tag, existing)
        entry = NodeType(
            tag=tag,
            type_name=type_name,
            fetch_by_id=fetch_by_id,
            delete_by_id=delete_by_id,
        )
        self._entries[tag] = entry
        logger.debug("Registered node type %s with tag %r", type_name, tag)
        return entry

    def lookup(self, global_id: str) -> NodeType | None:
        """Return the entry whose tag is a suffix of global_id, or None."""
        if not isinstance(global_id, str):
            return None
        for entry in self._entries.values():
            if entry.matches(global_id):
                return entry
        return None

    def require(self, global_id: str) -> NodeType:
        """Return the entry for global_id; raise UnroutableIdException if none matches."""
        entry = self.lookup(global_id)
        if entry is None:
            logger.warning(
                "No node type registered for id %r (registered tags: %s)",
                global_id,
                ", ".join(self._entries) or "<none>",
            )
            raise UnroutableIdException(str(global_id))
        return entry

    def resolve_interface_type(self, obj: Any) -> str:
        """Return the type name for an object carrying a global id."""
        return self.require(_id_of(obj)).type_name

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[NodeType]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class NodeRouter:
    """Dispatch node operations by global id to the registered capabilities.

    Bound to one DB session (request scope). Holds no state of its own beyond
    the session; persistence errors from the capabilities propagate unchanged.
    """

    def __init__(self, registry: NodeRegistry, db: Any) -> None:
        self._registry = registry
        self._db = db

    async def resolve_by_id(self, global_id: str) -> Any | None:
        """Fetch the entity for global_id; None when the store has no such record.

        Raises:
            UnroutableIdException: no registered tag matches global_id.
        """
        entry = self._registry.require(global_id)
        return await entry.fetch_by_id(self._db, global_id)

    async def delete_by_id(self, global_id: str) -> Any:
        """Delete the entity for global_id and return the deleted record.

        Raises:
            UnroutableIdException: no registered tag matches global_id.
        """
        entry = self._registry.require(global_id)
        return await entry.delete_by_id(self._db, global_id)

    def resolve_interface_type(self, obj: Any) -> str:
        """Return the concrete type name of a polymorphic node value."""
        return self._registry.resolve_interface_type(obj)
