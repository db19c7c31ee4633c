"""
basic_gate.auth.middleware

Starlette middleware that mounts `BasicAuthGate` on a path prefix.

Responsibilities:
- Pass unprotected paths through untouched.
- Attach a fresh `AuthContext` to `request.state.auth` for protected paths.
- Translate gate rejections into HTTP responses.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from basic_gate.api.errors import gate_error_response
from basic_gate.auth.errors import GateError
from basic_gate.auth.gate import BasicAuthGate
from basic_gate.auth.models import AuthContext
from basic_gate.services.directory import SqlUserDirectory


class BasicAuthMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        *,
        gate: BasicAuthGate,
        path_prefix: str,
        realm: str,
    ) -> None:
        super().__init__(app)
        self._gate = gate
        self._path_prefix = path_prefix.rstrip("/")
        if not self._path_prefix:
            raise ValueError("BasicAuthMiddleware needs a prefix below /")
        self._realm = realm

    def _is_protected(self, path: str) -> bool:
        return path == self._path_prefix or path.startswith(self._path_prefix + "/")

    async def dispatch(self, request: Request, call_next) -> Response:
        if not self._is_protected(request.url.path):
            return await call_next(request)

        context = AuthContext()
        request.state.auth = context
        # The sessionmaker is created on app startup in `basic_gate.api.app.create_app`.
        directory = SqlUserDirectory(
            request.app.state.sessionmaker,  # type: ignore[attr-defined]
            hasher=request.app.state.password_hasher,  # type: ignore[attr-defined]
        )

        async def forward() -> Response:
            return await call_next(request)

        try:
            return await self._gate.intercept(
                request,
                context,
                authenticate=directory.authenticate,
                lookup_user=directory.lookup_user,
                forward=forward,
            )
        except GateError as e:
            return gate_error_response(e, realm=self._realm)


# --- Module Notes -----------------------------------------------------------
# Exceptions raised inside BaseHTTPMiddleware bypass FastAPI exception handlers,
# so rejections are rendered here rather than via `app.exception_handler`.
