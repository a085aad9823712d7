"""Node API schemas: a typed envelope around any registered entity."""

from typing import Any

from pydantic import BaseModel, Field


class NodeResponse(BaseModel):
    """Response for GET/DELETE /nodes/{id}."""

    id: str = Field(..., description="Global id (token + type tag)")
    typename: str = Field(..., description="Concrete type resolved from the id tag")
    data: dict[str, Any] = Field(default_factory=dict, description="Entity fields")
