"""GraphQL schema tests: queries and mutations executed against the SQLite test session."""

import pytest

from app.api.graphql import schema
from app.api.graphql.context import GraphQLContext

CREATE_USER = """
mutation CreateUser($input: CreateUserInput!) {
  createUser(input: $input) { id slug email name }
}
"""

NODE = """
query Node($id: ID!) {
  node(id: $id) {
    __typename
    id
    ... on User { email name }
  }
}
"""

DELETE_NODE = """
mutation DeleteNode($id: ID!) {
  deleteNode(id: $id) { __typename id }
}
"""


async def _create_user(
    ctx: GraphQLContext, email: str, name: str | None = None
) -> dict:
    result = await schema.execute(
        CREATE_USER,
        variable_values={"input": {"email": email, "name": name}},
        context_value=ctx,
    )
    assert result.errors is None
    return result.data["createUser"]


@pytest.mark.requires_db
async def test_create_user_returns_tagged_id(graphql_context: GraphQLContext) -> None:
    user = await _create_user(graphql_context, "alice@example.com", "alice")
    assert user["id"].endswith(":user")
    assert user["email"] == "alice@example.com"
    assert user["name"] == "alice"
    assert user["slug"]


@pytest.mark.requires_db
async def test_node_resolves_user_type(graphql_context: GraphQLContext) -> None:
    user = await _create_user(graphql_context, "bob@example.com", "bob")
    result = await schema.execute(
        NODE, variable_values={"id": user["id"]}, context_value=graphql_context
    )
    assert result.errors is None
    assert result.data["node"] == {
        "__typename": "User",
        "id": user["id"],
        "email": "bob@example.com",
        "name": "bob",
    }


@pytest.mark.requires_db
async def test_node_absent_returns_null(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        NODE, variable_values={"id": "ck1missing:user"}, context_value=graphql_context
    )
    assert result.errors is None
    assert result.data["node"] is None


@pytest.mark.requires_db
async def test_node_unroutable_id_is_an_error(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        NODE, variable_values={"id": "abc123:widget"}, context_value=graphql_context
    )
    assert result.errors is not None
    assert "Invalid node id" in result.errors[0].message
    assert result.errors[0].extensions["code"] == "UNROUTABLE_ID"
    assert result.data == {"node": None}


@pytest.mark.requires_db
async def test_delete_node_then_node_is_null(graphql_context: GraphQLContext) -> None:
    user = await _create_user(graphql_context, "carol@example.com")
    deleted = await schema.execute(
        DELETE_NODE, variable_values={"id": user["id"]}, context_value=graphql_context
    )
    assert deleted.errors is None
    assert deleted.data["deleteNode"] == {"__typename": "User", "id": user["id"]}

    result = await schema.execute(
        NODE, variable_values={"id": user["id"]}, context_value=graphql_context
    )
    assert result.errors is None
    assert result.data["node"] is None


@pytest.mark.requires_db
async def test_delete_node_missing_record_is_not_found(
    graphql_context: GraphQLContext,
) -> None:
    result = await schema.execute(
        DELETE_NODE,
        variable_values={"id": "ck1missing:user"},
        context_value=graphql_context,
    )
    assert result.errors is not None
    assert result.errors[0].extensions["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.requires_db
async def test_users_and_user_by_slug(graphql_context: GraphQLContext) -> None:
    first = await _create_user(graphql_context, "dani@example.com", "danielle")
    await _create_user(graphql_context, "eli@example.com", "eli")

    result = await schema.execute(
        "{ users { id email } }", context_value=graphql_context
    )
    assert result.errors is None
    assert {u["email"] for u in result.data["users"]} == {
        "dani@example.com",
        "eli@example.com",
    }

    result = await schema.execute(
        "query User($id: String!) { user(id: $id) { id name } }",
        variable_values={"id": first["slug"]},
        context_value=graphql_context,
    )
    assert result.errors is None
    assert result.data["user"] == {"id": first["id"], "name": "danielle"}


@pytest.mark.requires_db
async def test_update_user(graphql_context: GraphQLContext) -> None:
    user = await _create_user(graphql_context, "frank@example.com", "frank")
    result = await schema.execute(
        """
        mutation Update($id: ID!, $input: UpdateUserInput!) {
          updateUser(id: $id, input: $input) { id email name }
        }
        """,
        variable_values={"id": user["id"], "input": {"email": "FRANK2@example.com"}},
        context_value=graphql_context,
    )
    assert result.errors is None
    assert result.data["updateUser"] == {
        "id": user["id"],
        "email": "frank2@example.com",
        "name": "frank",
    }


@pytest.mark.requires_db
async def test_delete_user(graphql_context: GraphQLContext) -> None:
    user = await _create_user(graphql_context, "gina@example.com")
    result = await schema.execute(
        "mutation Del($id: ID!) { deleteUser(id: $id) { id email } }",
        variable_values={"id": user["id"]},
        context_value=graphql_context,
    )
    assert result.errors is None
    assert result.data["deleteUser"]["id"] == user["id"]


@pytest.mark.requires_db
async def test_create_user_invalid_email(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        CREATE_USER,
        variable_values={"input": {"email": "not-an-email"}},
        context_value=graphql_context,
    )
    assert result.errors is not None
    assert result.errors[0].extensions["code"] == "VALIDATION_ERROR"


def test_schema_exposes_node_interface() -> None:
    sdl = schema.as_str()
    assert "interface Node" in sdl
    assert "type User implements Node" in sdl
    assert "deleteNode(id: ID!): Node!" in sdl
