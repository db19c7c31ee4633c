"""
basic_gate.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the user directory.
- Expose the request's authenticated `Principal` to protected endpoints.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.status import HTTP_401_UNAUTHORIZED

from basic_gate.auth.models import AuthContext, Principal
from basic_gate.services.directory import SqlUserDirectory
from basic_gate.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app is built from an explicit Settings instance; prefer it over the env cache.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `basic_gate.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def user_directory(
    request: Request,
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> SqlUserDirectory:
    # The hasher is built once in `create_app` from the Argon2 settings.
    return SqlUserDirectory(session_factory, hasher=request.app.state.password_hasher)


def current_principal(request: Request) -> Principal:
    # Populated by `BasicAuthMiddleware`; absent means the route is outside the gate.
    context: AuthContext | None = getattr(request.state, "auth", None)
    if context is None or context.principal is None:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return context.principal


# --- Module Notes -----------------------------------------------------------
# `current_principal` only reads the context; the gate is the sole writer.
