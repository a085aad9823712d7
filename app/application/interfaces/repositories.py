"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.user import UserResult


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def list_users(self) -> list[UserResult]:
        """Return all users, newest first."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by global id."""

    async def get_by_id_or_slug(self, value: str) -> UserResult | None:
        """Return user by global id or by slug."""

    async def create_user(self, email: str, name: str | None = None) -> UserResult:
        """Create user with a fresh global id and slug."""

    async def update_user(
        self,
        user_id: str,
        *,
        email: str | None = None,
        name: str | None = None,
    ) -> UserResult:
        """Update fields that are not None; raise if the user does not exist."""

    async def delete_user(self, user_id: str) -> UserResult:
        """Delete user and return it; raise if the user does not exist."""
