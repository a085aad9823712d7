"""SQLAlchemy mixins for common model patterns (DRY).

Provides: GlobalIdMixin (tagged global id primary key), TimestampMixin,
and the combined NodeModel base for entities exposed as GraphQL nodes.
"""

from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.generators import generate_global_id


class GlobalIdMixin:
    """Mixin for models keyed by a global id: CUID followed by the class's node tag.

    Subclasses set __node_tag__ (e.g. ':user'); the id default appends it.
    """

    __node_tag__: ClassVar[str]

    @declared_attr
    def id(cls) -> Mapped[str]:
        tag = cls.__node_tag__
        return mapped_column(
            String, primary_key=True, default=lambda: generate_global_id(tag)
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class NodeModel(GlobalIdMixin, TimestampMixin):
    """Combined mixin: global id + created_at/updated_at. Base for node entities."""

    __abstract__ = True
