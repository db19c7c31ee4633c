"""
basic_gate.api.errors

HTTP rendering for gate rejections.

Responsibilities:
- Map each `GateError` kind to a status code (401 for credential problems,
  403 for authorization problems).
- Keep 403 bodies identical so clients cannot probe which users exist.
"""

from __future__ import annotations

from starlette.responses import JSONResponse
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from basic_gate.auth.errors import (
    AuthenticationFailed,
    GateError,
    InsufficientPermissions,
    MalformedCredentials,
    MissingAuthHeader,
    MissingSeparator,
    UserNotFound,
)

_STATUS_BY_ERROR: dict[type[GateError], int] = {
    MissingAuthHeader: HTTP_401_UNAUTHORIZED,
    MalformedCredentials: HTTP_401_UNAUTHORIZED,
    MissingSeparator: HTTP_401_UNAUTHORIZED,
    AuthenticationFailed: HTTP_401_UNAUTHORIZED,
    UserNotFound: HTTP_403_FORBIDDEN,
    InsufficientPermissions: HTTP_403_FORBIDDEN,
}

FORBIDDEN_DETAIL = "Forbidden"


def status_for(error: GateError) -> int:
    for cls in type(error).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return HTTP_401_UNAUTHORIZED


def gate_error_response(error: GateError, *, realm: str) -> JSONResponse:
    status_code = status_for(error)
    if status_code == HTTP_403_FORBIDDEN:
        return JSONResponse({"detail": FORBIDDEN_DETAIL}, status_code=status_code)
    return JSONResponse(
        {"detail": error.message},
        status_code=status_code,
        headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
    )
