"""Node API: fetch or delete any registered entity by its global id."""

import dataclasses
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.v1.dependencies import get_node_router, get_node_router_for_write
from app.application.services.object_identification import NodeRouter
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.node import NodeResponse

router = APIRouter()


def _entity_data(entity: Any) -> dict[str, Any]:
    """Plain dict of an entity DTO (dataclass, pydantic model, or mapping)."""
    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        return dataclasses.asdict(entity)
    if isinstance(entity, BaseModel):
        return entity.model_dump()
    return dict(entity)


def _to_response(node_router: NodeRouter, node_id: str, entity: Any) -> NodeResponse:
    return NodeResponse(
        id=node_id,
        typename=node_router.resolve_interface_type(entity),
        data=_entity_data(entity),
    )


@router.get("/{node_id}", response_model=NodeResponse)
async def get_node(
    node_id: str,
    node_router: Annotated[NodeRouter, Depends(get_node_router)],
) -> NodeResponse:
    """Resolve a node by global id. 404 when the id is unroutable or the record is absent."""
    entity = await node_router.resolve_by_id(node_id)
    if entity is None:
        raise ResourceNotFoundException("node", node_id)
    return _to_response(node_router, node_id, entity)


@router.delete("/{node_id}", response_model=NodeResponse)
async def delete_node(
    node_id: str,
    node_router: Annotated[NodeRouter, Depends(get_node_router_for_write)],
) -> NodeResponse:
    """Delete a node by global id and return the deleted record."""
    entity = await node_router.delete_by_id(node_id)
    return _to_response(node_router, node_id, entity)
