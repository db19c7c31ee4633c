"""
basic_gate.db.init_db

DB initialization helpers (dev/test convenience).

Creates the `users` and `user_groups` tables so dev users can be registered
through `POST /v1/dev/users` without running migrations.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from basic_gate.db import models  # noqa: F401  # register tables on Base.metadata
from basic_gate.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production should rely on Alembic migrations.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
