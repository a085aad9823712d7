"""User application service: list, get, create, update, delete users."""

from __future__ import annotations

from app.application.dtos.user import UserResult
from app.application.interfaces.repositories import IUserRepository
from app.domain import ValidationException


def _clean_name(name: str | None) -> str | None:
    """Strip surrounding whitespace; blank names are stored as None."""
    if name is None:
        return None
    return name.strip() or None


class UserService:
    """User CRUD on top of IUserRepository. Inputs are already schema-validated."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    async def list_users(self) -> list[UserResult]:
        return await self._user_repo.list_users()

    async def get_user(self, id_or_slug: str) -> UserResult | None:
        """Return the user by global id or slug; None when absent."""
        return await self._user_repo.get_by_id_or_slug(id_or_slug)

    async def create_user(self, email: str, name: str | None = None) -> UserResult:
        return await self._user_repo.create_user(email.lower(), _clean_name(name))

    async def update_user(
        self,
        user_id: str,
        email: str | None = None,
        name: str | None = None,
    ) -> UserResult:
        """Update email and/or name. Raises ResourceNotFoundException if user not found."""
        if email is None and name is None:
            raise ValidationException("At least one of email or name is required")
        return await self._user_repo.update_user(
            user_id,
            email=email.lower() if email is not None else None,
            name=name.strip() if name is not None else None,
        )

    async def delete_user(self, user_id: str) -> UserResult:
        """Delete and return the user. Raises ResourceNotFoundException if user not found."""
        return await self._user_repo.delete_user(user_id)
