"""
basic_gate.auth.passwords

Argon2id password hashing for the bundled user directory.

Responsibilities:
- Build a `PasswordHasher` from the configured cost parameters.
- Verify a password against a stored hash without raising on mismatch.
- Provide a throwaway hash so unknown users cost the same as wrong passwords.
"""

from __future__ import annotations

import secrets
from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError
from argon2.low_level import Type


def build_hasher(*, time_cost: int, memory_cost: int, parallelism: int) -> PasswordHasher:
    return PasswordHasher(
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        type=Type.ID,
    )


def hash_password(password: str, *, hasher: PasswordHasher) -> str:
    return hasher.hash(password)


def verify_password(password: str, stored: str, *, hasher: PasswordHasher) -> bool:
    try:
        return hasher.verify(stored, password)
    except (VerificationError, InvalidHash):
        # VerifyMismatchError is a VerificationError.
        return False


@lru_cache(maxsize=8)
def dummy_hash(hasher: PasswordHasher) -> str:
    # Same parameters as real hashes; the password is never known to anyone.
    return hasher.hash(secrets.token_urlsafe(16))


# --- Module Notes -----------------------------------------------------------
# Verification reads cost parameters from the stored hash, so hashes made under an
# older policy keep verifying after the settings change.
