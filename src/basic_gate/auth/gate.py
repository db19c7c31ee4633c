"""
basic_gate.auth.gate

The Basic-Auth gate pipeline.

Responsibilities:
- Decode credentials from the `Authorization` header.
- Delegate login and user lookup to external collaborators.
- Authorize the user against the configured role allow-list, then forward.

Every failure raises a `GateError` subclass and aborts before `forward` runs.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from basic_gate.auth.credentials import parse_basic_authorization
from basic_gate.auth.errors import GateError, InsufficientPermissions, UserNotFound
from basic_gate.auth.models import AuthContext, Principal
from basic_gate.auth.roles import RoleAllowList
from basic_gate.observability.logging import get_logger

log = get_logger(__name__)

Authenticate = Callable[[str, str], Awaitable[Principal]]
LookupUser = Callable[[str], Awaitable[Principal | None]]
Forward = Callable[[], Awaitable[Any]]


class HeaderSource(Protocol):
    # Starlette's `Request` satisfies this; header lookup must be case-insensitive.
    @property
    def headers(self) -> Any: ...


class BasicAuthGate:
    def __init__(self, allow_list: RoleAllowList, *, split_on_first_separator: bool = False) -> None:
        self._allow_list = allow_list
        self._split_on_first_separator = split_on_first_separator

    async def intercept(
        self,
        request: HeaderSource,
        context: AuthContext,
        *,
        authenticate: Authenticate,
        lookup_user: LookupUser,
        forward: Forward,
    ) -> Any:
        username: str | None = None
        try:
            credential = parse_basic_authorization(
                request.headers.get("authorization"),
                split_on_first_separator=self._split_on_first_separator,
            )
            username = credential.username

            # Drop any identity left on the context before logging in again.
            context.logout()
            context.login(await authenticate(credential.username, credential.password))

            user = await lookup_user(credential.username)
            if user is None:
                raise UserNotFound()
            if not self._allow_list.permits(user.groups):
                raise InsufficientPermissions()
        except GateError as e:
            log.warning("basic_auth.rejected", reason=e.kind, detail=e.message, username=username)
            raise

        log.info("basic_auth.accepted", username=username)
        # The context stays populated for downstream handlers.
        return await forward()


# --- Module Notes -----------------------------------------------------------
# The gate holds no per-request state; one instance serves all concurrent requests.
