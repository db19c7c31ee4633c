"""
basic_gate.auth.models

Auth domain models.

Responsibilities:
- Define the credential pair decoded from a Basic-Auth header.
- Define the user record type (`Principal`) read from the directory.
- Define the per-request `AuthContext` carried through the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credential:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Read-only snapshot of a directory user and its groups.
    """

    username: str
    groups: frozenset[str]


@dataclass(slots=True)
class AuthContext:
    """
    Authenticated identity scoped to a single request.
    """

    principal: Principal | None = None

    def login(self, principal: Principal) -> None:
        self.principal = principal

    def logout(self) -> None:
        self.principal = None


# --- Module Notes -----------------------------------------------------------
# `AuthContext` lives on `request.state.auth`; nothing here is shared between requests.
