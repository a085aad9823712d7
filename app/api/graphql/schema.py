"""GraphQL schema: node lookup/deletion by global id and user CRUD.

Mounted by app.main via create_graphql_router(). Domain exceptions raised by
resolvers surface as GraphQL errors carrying their error_code in
extensions.code; they are logged at WARNING since they are usually caused by
client input (e.g. a malformed id). Anything else is logged with traceback.
"""

import logging
from typing import Any

import strawberry
from graphql import GraphQLError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info

from app.api.graphql.context import GraphQLContext, get_context
from app.api.graphql.types import CreateUserInput, Node, UpdateUserInput, UserType
from app.core.config import get_settings
from app.domain.exceptions import AppException, ValidationException
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def _validate[M: BaseModel](model: type[M], data: dict[str, Any]) -> M:
    """Validate resolver input with a pydantic schema; raise ValidationException on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationException(first["msg"], field=field) from e


@strawberry.type
class Query:
    @strawberry.field(description="Fetch any node by global id; null if absent.")
    async def node(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> Node | None:
        return await info.context.nodes.resolve_by_id(id)

    @strawberry.field
    async def users(self, info: Info[GraphQLContext, None]) -> list[UserType]:
        return await info.context.users.list_users()

    @strawberry.field(description="Fetch a user by global id or slug.")
    async def user(
        self, info: Info[GraphQLContext, None], id: str
    ) -> UserType | None:
        return await info.context.users.get_user(id)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_user(
        self, info: Info[GraphQLContext, None], input: CreateUserInput
    ) -> UserType:
        data = _validate(UserCreate, {"email": input.email, "name": input.name})
        return await info.context.users.create_user(str(data.email), data.name)

    @strawberry.mutation
    async def update_user(
        self, info: Info[GraphQLContext, None], id: strawberry.ID, input: UpdateUserInput
    ) -> UserType:
        data = _validate(UserUpdate, {"email": input.email, "name": input.name})
        return await info.context.users.update_user(
            id,
            email=str(data.email) if data.email is not None else None,
            name=data.name,
        )

    @strawberry.mutation
    async def delete_user(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> UserType:
        return await info.context.users.delete_user(id)

    @strawberry.mutation(description="Delete any node by global id; returns the deleted node.")
    async def delete_node(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> Node:
        return await info.context.nodes.delete_by_id(id)


class NodeSchema(strawberry.Schema):
    """Schema that tags domain errors with their error_code."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, AppException):
                error.extensions = {**(error.extensions or {}), "code": original.error_code}
                logger.warning(
                    "GraphQL %s at %s: %s", original.error_code, error.path, original.message
                )
            elif original is None:
                logger.warning("GraphQL request error: %s", error.message)
            else:
                logger.error(
                    "GraphQL error at %s: %s", error.path, error.message, exc_info=original
                )


schema = NodeSchema(query=Query, mutation=Mutation, types=[UserType])


def create_graphql_router() -> GraphQLRouter:
    """Return the GraphQL router (mount with prefix settings.graphql_path)."""
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
