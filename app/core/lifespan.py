"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of logging, the node registry, and the DB engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.infrastructure.persistence.database import dispose_engine
from app.infrastructure.persistence.node_types import get_node_registry
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup builds the node registry eagerly: a duplicate or ambiguous type
    tag raises here and the app never starts serving. Shutdown disposes the
    SQL engine.
    """
    setup_logging()

    # ---- Startup ----
    registry = get_node_registry()
    logger.info(
        "Node registry ready: %s",
        ", ".join(f"{entry.type_name} ({entry.tag})" for entry in registry),
    )

    yield

    # ---- Shutdown ----
    await dispose_engine()
