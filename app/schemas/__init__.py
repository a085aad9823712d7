"""Pydantic API schemas (request validation and response bodies)."""

from app.schemas.health import HealthResponse
from app.schemas.node import NodeResponse
from app.schemas.user import UserCreate, UserUpdate

__all__ = [
    "HealthResponse",
    "NodeResponse",
    "UserCreate",
    "UserUpdate",
]
