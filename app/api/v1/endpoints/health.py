"""Health check endpoint. No DB access; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_registry
from app.application.services.object_identification import NodeRegistry
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(
    registry: Annotated[NodeRegistry, Depends(get_registry)],
) -> HealthResponse:
    """Return ok status and the registered node types."""
    return HealthResponse(node_types=[entry.type_name for entry in registry])
