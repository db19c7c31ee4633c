"""
basic_gate.db.repositories.users

Repository for `User` entities and their group memberships.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from basic_gate.db.models import User, UserGroup


class UserRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def create(
        self,
        *,
        username: str,
        password_hash: str,
        groups: Iterable[str],
    ) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            groups=[UserGroup(groupname=g) for g in sorted(set(groups))],
        )
        self._session.add(user)
        await self._session.flush()
        return user
