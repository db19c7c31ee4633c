"""
basic_gate.db.models

User directory schema.

Responsibilities:
- `User`: login name and password hash.
- `UserGroup`: one row per (user, group) membership.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from basic_gate.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps for simplicity.
    return datetime.utcnow()


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(64), primary_key=True)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    groups: Mapped[list[UserGroup]] = relationship(
        back_populates="user", cascade="all, delete-orphan", lazy="selectin"
    )

    @property
    def group_names(self) -> frozenset[str]:
        return frozenset(g.groupname for g in self.groups)


class UserGroup(Base):
    __tablename__ = "user_groups"

    username: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.username"), primary_key=True
    )
    groupname: Mapped[str] = mapped_column(String(64), primary_key=True)

    user: Mapped[User] = relationship(back_populates="groups")


# --- Module Notes -----------------------------------------------------------
# Group names are matched verbatim against the gate's role allow-list.
