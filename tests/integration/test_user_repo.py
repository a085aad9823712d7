"""User repository integration tests against in-memory SQLite; session rolled back after each test."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.domain.exceptions import (
    DuplicateEmailException,
    ResourceNotFoundException,
    UserAlreadyExistsException,
)
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.user_repo import UserRepository


@pytest.mark.requires_db
async def test_create_user_assigns_global_id_and_slug(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="alice@example.com", name="alice")
    assert created.id.endswith(":user")
    assert len(created.id) > len(":user")
    assert created.slug
    assert created.email == "alice@example.com"
    assert created.name == "alice"
    assert created.created_at is not None


@pytest.mark.requires_db
async def test_get_by_id_and_slug(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="bob@example.com")
    by_id = await repo.get_by_id(created.id)
    by_slug = await repo.get_by_slug(created.slug)
    assert by_id == by_slug
    assert by_id is not None and by_id.id == created.id


@pytest.mark.requires_db
async def test_get_by_id_or_slug(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="carol@example.com")
    assert (await repo.get_by_id_or_slug(created.id)).id == created.id
    assert (await repo.get_by_id_or_slug(created.slug)).id == created.id
    assert await repo.get_by_id_or_slug("nope") is None
    assert await repo.get_by_id_or_slug("nope:user") is None


@pytest.mark.requires_db
async def test_get_by_id_or_slug_uses_registered_tags(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="cora@example.com")
    user = await db_session.get(User, created.id)
    user.slug = "legacy:widget"
    await db_session.flush()
    assert (await repo.get_by_id_or_slug("legacy:widget")).id == created.id
    assert await repo.get_by_id_or_slug(":user") is None


@pytest.mark.requires_db
async def test_list_users(db_session) -> None:
    repo = UserRepository(db_session)
    one = await repo.create_user(email="one@example.com")
    two = await repo.create_user(email="two@example.com")
    users = await repo.list_users()
    assert {u.id for u in users} == {one.id, two.id}


@pytest.mark.requires_db
async def test_update_user(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="dan@example.com", name="dan")
    updated = await repo.update_user(created.id, email="daniel@example.com")
    assert updated.email == "daniel@example.com"
    assert updated.name == "dan"
    assert updated.id == created.id
    cleared = await repo.update_user(created.id, name="")
    assert cleared.name is None


@pytest.mark.requires_db
async def test_update_missing_user_raises(db_session) -> None:
    repo = UserRepository(db_session)
    with pytest.raises(ResourceNotFoundException):
        await repo.update_user("missing:user", name="x")


@pytest.mark.requires_db
async def test_duplicate_email_on_create(db_session) -> None:
    repo = UserRepository(db_session)
    await repo.create_user(email="eli@example.com")
    with pytest.raises(UserAlreadyExistsException):
        await repo.create_user(email="eli@example.com")


@pytest.mark.requires_db
async def test_duplicate_email_on_update(db_session) -> None:
    repo = UserRepository(db_session)
    await repo.create_user(email="taken@example.com")
    other = await repo.create_user(email="free@example.com")
    with pytest.raises(DuplicateEmailException):
        await repo.update_user(other.id, email="taken@example.com")


@pytest.mark.requires_db
async def test_delete_user_then_get_returns_none(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user(email="gone@example.com")
    deleted = await repo.delete_user(created.id)
    assert deleted.id == created.id
    assert deleted.email == "gone@example.com"
    assert await repo.get_by_id(created.id) is None


@pytest.mark.requires_db
async def test_delete_missing_user_raises(db_session) -> None:
    repo = UserRepository(db_session)
    with pytest.raises(ResourceNotFoundException):
        await repo.delete_user("missing:user")


def _miss_first_email_check(repo: UserRepository, monkeypatch) -> None:
    """Make the pre-write email check miss once, as when a concurrent insert wins."""
    real = repo.get_by_email
    calls: list[str] = []

    async def get_by_email(email: str):
        calls.append(email)
        if len(calls) == 1:
            return None
        return await real(email)

    monkeypatch.setattr(repo, "get_by_email", get_by_email)


@pytest.mark.requires_db
async def test_create_constraint_violation_keeps_session_usable(
    db_session, monkeypatch
) -> None:
    repo = UserRepository(db_session)
    existing = await repo.create_user(email="race@example.com")
    _miss_first_email_check(repo, monkeypatch)
    with pytest.raises(UserAlreadyExistsException) as exc_info:
        await repo.create_user(email="race@example.com")
    assert isinstance(exc_info.value.__cause__, IntegrityError)
    users = await repo.list_users()
    assert [u.id for u in users] == [existing.id]
    other = await repo.create_user(email="after@example.com")
    assert await repo.get_by_id(other.id) is not None


@pytest.mark.requires_db
async def test_update_constraint_violation_keeps_session_usable(
    db_session, monkeypatch
) -> None:
    repo = UserRepository(db_session)
    await repo.create_user(email="held@example.com")
    other = await repo.create_user(email="mine@example.com")
    _miss_first_email_check(repo, monkeypatch)
    with pytest.raises(DuplicateEmailException) as exc_info:
        await repo.update_user(other.id, email="held@example.com")
    assert isinstance(exc_info.value.__cause__, IntegrityError)
    stored = await db_session.scalar(select(User.email).where(User.id == other.id))
    assert stored == "mine@example.com"
