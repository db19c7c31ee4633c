"""
basic_gate.db

Persistence package (SQLAlchemy async) backing the bundled user directory.

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.
