"""User ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.node_ids import USER_TAG
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import NodeModel
from app.shared.utils.generators import generate_slug


class User(NodeModel, Base):
    """User model. Table: app_user. Unique email and slug; id ends with ':user'."""

    __tablename__ = "app_user"
    __node_tag__ = USER_TAG

    slug: Mapped[str] = mapped_column(
        String, nullable=False, unique=True, default=generate_slug
    )
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String, nullable=True)
