"""
basic_gate.db.base

SQLAlchemy declarative base for the user directory tables.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# `users` and `user_groups` hang off this base; `alembic/env.py` and `init_db` read its metadata.
