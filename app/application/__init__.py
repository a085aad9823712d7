"""Application layer: interfaces, DTOs, and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories) and registers the
node capabilities.
"""

from app.application.dtos import UserResult
from app.application.interfaces import IUserRepository
from app.application.services import NodeRegistry, NodeRouter, NodeType, UserService

__all__ = [
    "IUserRepository",
    "NodeRegistry",
    "NodeRouter",
    "NodeType",
    "UserResult",
    "UserService",
]
