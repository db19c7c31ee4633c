"""
tests.test_api_basic_auth

End-to-end behavior of the gate mounted on the `/api` prefix.

Responsibilities:
- Register users through the dev endpoint and call `/api/me` with Basic-Auth.
- Check the status mapping (401 vs 403) and that 403 bodies do not leak the cause.
"""

from __future__ import annotations

import base64
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
import pytest

from basic_gate.api.app import create_app
from basic_gate.settings import Settings


def _basic(raw: str) -> dict[str, str]:
    return {"Authorization": "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")}


@asynccontextmanager
async def _client(tmp_path: Path, **overrides) -> AsyncIterator[httpx.AsyncClient]:
    settings = Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'gate.db'}",
        role_names_comma_sep="app-user,admin",
        password_hash_time_cost=1,
        password_hash_memory_kib=8,
        password_hash_parallelism=1,
        **overrides,
    )
    app = create_app(settings=settings)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            for username, password, groups in [
                ("alice", "secret", ["app-user"]),
                ("bob", "pw", ["guest"]),
                ("carol", "se:cret", ["admin"]),
            ]:
                r = await client.post(
                    "/v1/dev/users",
                    json={"username": username, "password": password, "groups": groups},
                )
                assert r.status_code == 201
            yield client


@pytest.mark.asyncio
async def test_authorized_user_reaches_endpoint(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/api/me", headers=_basic("alice:secret"))
        assert r.status_code == 200
        assert r.json() == {"username": "alice", "groups": ["app-user"]}


@pytest.mark.asyncio
async def test_missing_header_gets_basic_challenge(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/api/me")
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == 'Basic realm="api"'
        assert r.json()["detail"] == "Authorization header missing"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("headers", "detail"),
    [
        ({"Authorization": "Bearer token"}, "Authorization header missing"),
        ({"Authorization": "Basic !!!"}, "Login only possible via Basic auth"),
        (_basic("alicesecret"), "Username or password missing"),
        (_basic("alice:wrong"), "Invalid username or password"),
        (_basic("nobody:secret"), "Invalid username or password"),
    ],
)
async def test_credential_failures_are_401(
    tmp_path: Path, headers: dict[str, str], detail: str
) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/api/me", headers=headers)
        assert r.status_code == 401
        assert r.json()["detail"] == detail


@pytest.mark.asyncio
async def test_wrong_role_is_403_without_cause(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/api/me", headers=_basic("bob:pw"))
        assert r.status_code == 403
        assert r.json() == {"detail": "Forbidden"}
        assert "www-authenticate" not in r.headers


@pytest.mark.asyncio
async def test_password_with_separator(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/api/me", headers=_basic("carol:se:cret"))
        assert r.status_code == 401
        assert r.json()["detail"] == "Username or password missing"

    split_dir = tmp_path / "split"
    split_dir.mkdir()
    async with _client(split_dir, split_on_first_separator=True) as client:
        r = await client.get("/api/me", headers=_basic("carol:se:cret"))
        assert r.status_code == 200
        assert r.json()["username"] == "carol"


@pytest.mark.asyncio
async def test_unprotected_paths_skip_the_gate(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        # Prefix match is per path segment.
        r = await client.get("/apiary")
        assert r.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_dev_user_conflicts(tmp_path: Path) -> None:
    async with _client(tmp_path) as client:
        r = await client.post(
            "/v1/dev/users", json={"username": "alice", "password": "x", "groups": []}
        )
        assert r.status_code == 409


@pytest.mark.asyncio
async def test_dev_users_hidden_in_prod(tmp_path: Path) -> None:
    app = create_app(
        settings=Settings(
            env="prod",
            role_names_comma_sep="app-user",
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'prod.db'}",
        )
    )
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post(
                "/v1/dev/users", json={"username": "eve", "password": "x", "groups": ["admin"]}
            )
            assert r.status_code == 404


@pytest.mark.asyncio
async def test_unpadded_credentials_are_accepted(tmp_path: Path) -> None:
    blob = base64.b64encode(b"alice:secret1").decode("ascii").rstrip("=")
    async with _client(tmp_path) as client:
        r = await client.get("/api/me", headers={"Authorization": "Basic " + blob})
        # Decodes fine; the password is simply wrong.
        assert r.status_code == 401
        assert r.json()["detail"] == "Invalid username or password"
