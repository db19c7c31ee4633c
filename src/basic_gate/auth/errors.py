"""
basic_gate.auth.errors

Error taxonomy for the Basic-Auth gate.

Responsibilities:
- One exception type per rejection point, each with a distinct diagnostic message.
- `ConfigError` for a gate that cannot be initialized.
"""

from __future__ import annotations


class ConfigError(Exception):
    pass


class GateError(Exception):
    """
    Base for every per-request rejection raised by the gate.

    `kind` is a stable identifier used in logs; `message` is the diagnostic text.
    """

    kind = "gate_error"
    default_message = "Request rejected"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingAuthHeader(GateError):
    kind = "missing_auth_header"
    default_message = "Authorization header missing"


class MalformedCredentials(GateError):
    kind = "malformed_credentials"
    default_message = "Login only possible via Basic auth"


class MissingSeparator(GateError):
    kind = "missing_separator"
    default_message = "Username or password missing"


class AuthenticationFailed(GateError):
    kind = "authentication_failed"
    default_message = "Invalid username or password"


class UserNotFound(GateError):
    kind = "user_not_found"
    default_message = "User profile not found"


class InsufficientPermissions(GateError):
    kind = "insufficient_permissions"
    default_message = "Insufficient permissions"


# --- Module Notes -----------------------------------------------------------
# HTTP status codes are not chosen here; see `basic_gate.api.errors`.
