"""
basic_gate.services.directory

SQL-backed user directory.

Responsibilities:
- `authenticate`: verify a username/password pair against the stored hash.
- `lookup_user`: return the user's group snapshot, or `None` if unknown.
- `register`: create a user with groups (dev tooling).
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from argon2 import PasswordHasher
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from basic_gate.auth.errors import AuthenticationFailed
from basic_gate.auth.models import Principal
from basic_gate.auth.passwords import dummy_hash, hash_password, verify_password
from basic_gate.db.models import User
from basic_gate.db.repositories.users import UserRepo


def _to_principal(user: User) -> Principal:
    return Principal(username=user.username, groups=user.group_names)


class SqlUserDirectory:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        hasher: PasswordHasher,
    ) -> None:
        self._session_factory = session_factory
        self._hasher = hasher

    async def authenticate(self, username: str, password: str) -> Principal:
        async with self._session_factory() as session:
            user = await UserRepo(session).find_by_username(username)

        # Unknown users are checked against a throwaway hash so both paths pay for Argon2.
        stored = dummy_hash(self._hasher) if user is None else user.password_hash
        # Argon2 is CPU-bound; keep it off the event loop.
        valid = await asyncio.to_thread(verify_password, password, stored, hasher=self._hasher)
        if user is None or not valid:
            raise AuthenticationFailed()
        return _to_principal(user)

    async def lookup_user(self, username: str) -> Principal | None:
        async with self._session_factory() as session:
            user = await UserRepo(session).find_by_username(username)
            return None if user is None else _to_principal(user)

    async def register(
        self,
        *,
        username: str,
        password: str,
        groups: Iterable[str],
    ) -> Principal:
        password_hash = await asyncio.to_thread(hash_password, password, hasher=self._hasher)
        async with self._session_factory() as session:
            user = await UserRepo(session).create(
                username=username,
                password_hash=password_hash,
                groups=groups,
            )
            principal = _to_principal(user)
            await session.commit()
            return principal


# --- Module Notes -----------------------------------------------------------
# Each call opens its own short-lived session; the gate never shares one across requests.
