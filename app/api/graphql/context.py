"""GraphQL request context: node router and user service on one transactional session."""

from typing import Annotated

from fastapi import Depends
from strawberry.fastapi import BaseContext

from app.api.v1.dependencies import get_node_router_for_write, get_user_service
from app.application.services.object_identification import NodeRouter
from app.application.services.user_service import UserService


class GraphQLContext(BaseContext):
    """Per-request context available to resolvers as info.context."""

    def __init__(self, nodes: NodeRouter, users: UserService) -> None:
        super().__init__()
        self.nodes = nodes
        self.users = users


async def get_context(
    nodes: Annotated[NodeRouter, Depends(get_node_router_for_write)],
    users: Annotated[UserService, Depends(get_user_service)],
) -> GraphQLContext:
    """Build the context; both dependencies resolve to the same request session."""
    return GraphQLContext(nodes=nodes, users=users)
