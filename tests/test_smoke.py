"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from basic_gate.api.app import create_app
from basic_gate.auth.errors import ConfigError
from basic_gate.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(tmp_path) -> None:
    app = create_app(
        settings=Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'smoke.db'}")
    )

    # httpx ASGITransport does not manage lifespan automatically; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert "x-request-id" in r.headers

            r = await client.get("/readyz")
            assert r.status_code == 200
            assert r.json()["status"] == "ready"


@pytest.mark.parametrize("roles", [None, "", ","])
def test_app_refuses_to_start_without_roles(roles: str | None) -> None:
    with pytest.raises(ConfigError):
        create_app(settings=Settings(env="test", role_names_comma_sep=roles))


@pytest.mark.parametrize("prefix", ["/", "", "api"])
def test_protected_prefix_must_be_below_root(prefix: str) -> None:
    with pytest.raises(ValidationError):
        Settings(env="test", protected_path_prefix=prefix)


def test_protected_prefix_drops_trailing_slash() -> None:
    assert Settings(env="test", protected_path_prefix="/api/").protected_path_prefix == "/api"
