"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, delete_user, etc.)."""

    id: str
    slug: str
    email: str
    name: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None
