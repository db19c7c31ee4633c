"""
tests.test_directory

`SqlUserDirectory` over a throwaway SQLite file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from basic_gate.auth.errors import AuthenticationFailed
from basic_gate.auth.passwords import build_hasher, dummy_hash
from basic_gate.db.init_db import init_db
from basic_gate.db.session import create_engine, create_sessionmaker
from basic_gate.services import directory as directory_module
from basic_gate.services.directory import SqlUserDirectory
from basic_gate.settings import Settings


async def _directory(tmp_path: Path):
    engine = create_engine(
        Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'dir.db'}")
    )
    await init_db(engine)
    hasher = build_hasher(time_cost=1, memory_cost=8, parallelism=1)
    return engine, SqlUserDirectory(create_sessionmaker(engine), hasher=hasher), hasher


@pytest.mark.asyncio
async def test_register_authenticate_lookup(tmp_path: Path) -> None:
    engine, directory, _ = await _directory(tmp_path)
    try:
        await directory.register(username="alice", password="secret", groups=["app-user", "admin"])

        principal = await directory.authenticate("alice", "secret")
        assert principal.username == "alice"
        assert principal.groups == frozenset({"app-user", "admin"})

        assert await directory.lookup_user("alice") == principal
        assert await directory.lookup_user("nobody") is None

        with pytest.raises(AuthenticationFailed):
            await directory.authenticate("alice", "wrong")
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_unknown_user_still_runs_a_hash_check(tmp_path: Path, monkeypatch) -> None:
    engine, directory, hasher = await _directory(tmp_path)
    checked: list[str] = []
    original = directory_module.verify_password

    def recording_verify(password: str, stored: str, *, hasher) -> bool:
        checked.append(stored)
        return original(password, stored, hasher=hasher)

    monkeypatch.setattr(directory_module, "verify_password", recording_verify)
    try:
        with pytest.raises(AuthenticationFailed):
            await directory.authenticate("nobody", "secret")
        assert checked == [dummy_hash(hasher)]
    finally:
        await engine.dispose()
