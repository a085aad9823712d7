"""GraphQL object, interface and input types.

Resolvers return application DTOs (e.g. UserResult). The Node interface
resolves the concrete type from the global id tag, and each object type
accepts its DTO in is_type_of.
"""

from datetime import datetime
from typing import Any

import strawberry
from graphql import GraphQLResolveInfo

from app.application.dtos.user import UserResult


@strawberry.interface(
    name="Node",
    description="An object with a global id. The id suffix identifies its type.",
)
class Node:
    id: strawberry.ID

    @classmethod
    def resolve_type(cls, obj: Any, info: GraphQLResolveInfo, type_: Any) -> str:
        return info.context.nodes.resolve_interface_type(obj)


@strawberry.type(name="User")
class UserType(Node):
    slug: str
    email: str
    name: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def is_type_of(cls, obj: Any, info: GraphQLResolveInfo) -> bool:
        return isinstance(obj, (cls, UserResult))


@strawberry.input(name="CreateUserInput")
class CreateUserInput:
    email: str
    name: str | None = None


@strawberry.input(name="UpdateUserInput")
class UpdateUserInput:
    email: str | None = None
    name: str | None = None
