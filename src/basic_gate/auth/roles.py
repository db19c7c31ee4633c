"""
basic_gate.auth.roles

Role allow-list parsing and membership check.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from basic_gate.auth.errors import ConfigError

ROLE_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class RoleAllowList:
    roles: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.roles:
            raise ConfigError("No roles defined!")

    def __iter__(self) -> Iterator[str]:
        return iter(self.roles)

    def __len__(self) -> int:
        return len(self.roles)

    def permits(self, groups: Iterable[str]) -> bool:
        # Any single shared role is enough; order among roles carries no precedence.
        return not frozenset(self.roles).isdisjoint(groups)


def configure(role_names_comma_separated: str | None) -> RoleAllowList:
    if not role_names_comma_separated:
        raise ConfigError("No roles defined!")
    roles = tuple(
        name.strip()
        for name in role_names_comma_separated.split(ROLE_SEPARATOR)
        if name.strip()
    )
    return RoleAllowList(roles=roles)
