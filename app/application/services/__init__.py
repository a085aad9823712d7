"""Application services: node routing and user use cases."""

from app.application.services.object_identification import (
    NodeRegistry,
    NodeRouter,
    NodeType,
)
from app.application.services.user_service import UserService

__all__ = [
    "NodeRegistry",
    "NodeRouter",
    "NodeType",
    "UserService",
]
