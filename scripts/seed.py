"""Seed sample users into the database.

Each user gets a fresh global id (CUID + ':user') and slug. Users whose email
already exists are skipped, so the script can be re-run safely.

Usage:
    uv run python -m scripts.seed [--create-tables]

--create-tables creates the schema from the models first (local SQLite);
against Postgres run `uv run alembic upgrade head` instead.
Requires: DATABASE_URL (defaults to sqlite+aiosqlite:///./app.db).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.infrastructure.persistence import database as db_mod
from app.infrastructure.persistence.repositories.user_repo import UserRepository

SEED_USERS: list[dict[str, str]] = [
    {"name": "alice", "email": "alice@example.com"},
    {"name": "bob", "email": "bob@example.com"},
    {"name": "charlie", "email": "charlie@example.com"},
    {"name": "danielle", "email": "dani@example.com"},
    {"name": "eli", "email": "eli@example.com"},
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(create_tables: bool = False) -> list[str]:
    """Insert SEED_USERS; return the ids of users created by this run."""
    session_factory = db_mod._ensure_engine()
    if create_tables:
        await db_mod.create_tables()
        print("Tables created")

    created_ids: list[str] = []
    try:
        async with session_factory() as session:
            async with session.begin():
                user_repo = UserRepository(session)
                for u in SEED_USERS:
                    if await user_repo.get_by_email(u["email"]) is not None:
                        print(f"  User {u['email']} already exists, skip")
                        continue
                    user = await user_repo.create_user(email=u["email"], name=u["name"])
                    created_ids.append(user.id)
                    print(f"  User {u['name']} -> {user.id} (slug {user.slug})")
    finally:
        await db_mod.dispose_engine()
    return created_ids


def main() -> None:
    _load_env()
    create_tables = "--create-tables" in sys.argv[1:]
    created = asyncio.run(run(create_tables=create_tables))
    print(f"Seeded {len(created)} user(s)")


if __name__ == "__main__":
    main()
