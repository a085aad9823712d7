"""User repository. Interface methods return application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from app.domain.node_ids import USER_TYPE_NAME
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        slug=u.slug,
        email=u.email,
        name=u.name,
        created_at=u.created_at,
        updated_at=u.updated_at,
    )


class UserRepository(BaseRepository[User]):
    """User repository: CRUD plus lookup by slug."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_model(self, user_id: str) -> User:
        user = await super().get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        return user

    async def list_users(self) -> list[UserResult]:
        users = await self.get_all(User.created_at.desc(), User.id)
        return [_user_to_result(u) for u in users]

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await super().get_by_id(user_id)
        return _user_to_result(user) if user else None

    async def get_by_slug(self, slug: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.slug == slug))
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def get_by_email(self, email: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def get_by_id_or_slug(self, value: str) -> UserResult | None:
        """Values the node registry routes to User are ids; anything else is a slug."""
        # node_types imports this module.
        from app.infrastructure.persistence.node_types import get_node_registry

        entry = get_node_registry().lookup(value)
        if entry is not None and entry.type_name == USER_TYPE_NAME:
            return await self.get_by_id(value)
        return await self.get_by_slug(value)

    async def create_user(self, email: str, name: str | None = None) -> UserResult:
        """Create user; raise UserAlreadyExistsException if the email is taken.

        The insert runs in a savepoint so a constraint violation leaves the
        caller's transaction usable.
        """
        if await self.get_by_email(email) is not None:
            raise UserAlreadyExistsException()
        user = User(email=email, name=name)
        try:
            async with self.db.begin_nested():
                created = await self.create(user)
        except IntegrityError as e:
            if await self.get_by_email(email) is not None:
                raise UserAlreadyExistsException() from e
            raise
        logger.info("Created user %s", created.id)
        return _user_to_result(created)

    async def update_user(
        self,
        user_id: str,
        *,
        email: str | None = None,
        name: str | None = None,
    ) -> UserResult:
        """Update fields that are not None (a blank name clears it).

        Raises ResourceNotFoundException if the user does not exist and
        DuplicateEmailException on unique constraint violation.
        """
        user = await self._get_model(user_id)
        if email is not None and email != user.email:
            if await self.get_by_email(email) is not None:
                raise DuplicateEmailException()
            user.email = email
        if name is not None:
            user.name = name or None
        try:
            async with self.db.begin_nested():
                updated = await self.update(user)
        except IntegrityError as e:
            if email is not None and await self.get_by_email(email) is not None:
                raise DuplicateEmailException() from e
            raise
        return _user_to_result(updated)

    async def delete_user(self, user_id: str) -> UserResult:
        """Delete the user and return its last state.

        Raises ResourceNotFoundException if the user does not exist.
        """
        user = await self._get_model(user_id)
        result = _user_to_result(user)
        await self.delete(user)
        logger.info("Deleted user %s", user_id)
        return result
