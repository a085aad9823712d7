"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
Services and routers are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.object_identification import NodeRegistry, NodeRouter
from app.application.services.user_service import UserService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.node_types import get_node_registry
from app.infrastructure.persistence.repositories import UserRepository


def get_registry() -> NodeRegistry:
    """Process-wide node registry (override in tests to register fake types)."""
    return get_node_registry()


async def get_node_router(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[NodeRegistry, Depends(get_registry)],
) -> NodeRouter:
    """Node router for read operations."""
    return NodeRouter(registry, db)


async def get_node_router_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    registry: Annotated[NodeRegistry, Depends(get_registry)],
) -> NodeRouter:
    """Node router whose session commits on success (deletes)."""
    return NodeRouter(registry, db)


async def get_user_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserService:
    """User service sharing the request's transactional session."""
    return UserService(UserRepository(db))
