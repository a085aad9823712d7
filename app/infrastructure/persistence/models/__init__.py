"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    GlobalIdMixin,
    NodeModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "GlobalIdMixin",
    "NodeModel",
    "TimestampMixin",
]
