"""Node type registrations: binds each global id tag to its repository capabilities.

Adding an entity type means adding one entry to _NODE_TYPES. The registry is
built once per process (get_node_registry) and validated as it is built, so a
tag collision fails at startup rather than on the first request.
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.application.services.object_identification import (
    DeleteById,
    FetchById,
    NodeRegistry,
)
from app.domain.node_ids import USER_TAG, USER_TYPE_NAME
from app.infrastructure.persistence.repositories.user_repo import UserRepository


async def _fetch_user(db: AsyncSession, global_id: str) -> UserResult | None:
    return await UserRepository(db).get_by_id(global_id)


async def _delete_user(db: AsyncSession, global_id: str) -> UserResult:
    return await UserRepository(db).delete_user(global_id)


_NODE_TYPES: tuple[tuple[str, str, FetchById, DeleteById], ...] = (
    (USER_TAG, USER_TYPE_NAME, _fetch_user, _delete_user),
)


def build_node_registry() -> NodeRegistry:
    """Return a new registry with every known node type registered."""
    registry = NodeRegistry()
    for tag, type_name, fetch_by_id, delete_by_id in _NODE_TYPES:
        registry.register(tag, type_name, fetch_by_id, delete_by_id)
    return registry


@lru_cache
def get_node_registry() -> NodeRegistry:
    """Return the process-wide registry (built on first call, read-only afterwards)."""
    return build_node_registry()
