"""
basic_gate.auth.credentials

Basic-Auth header decoding.

Responsibilities:
- Validate the `Basic ` scheme prefix.
- Strictly decode the Base64 payload into a `Credential`.
"""

from __future__ import annotations

import base64
import binascii

from basic_gate.auth.errors import MalformedCredentials, MissingAuthHeader, MissingSeparator
from basic_gate.auth.models import Credential

BASIC_PREFIX = "Basic "
BASIC_AUTH_SEPARATOR = ":"


def _b64decode(blob: str) -> bytes:
    # Padding is optional, but when present it must be exactly what the length needs.
    data = blob.rstrip("=")
    padding = len(blob) - len(data)
    if "=" in data or len(data) % 4 == 1:
        raise binascii.Error("Incorrect padding")
    missing = -len(data) % 4
    if padding and padding != missing:
        raise binascii.Error("Excess padding")
    return base64.b64decode(data + "=" * missing, validate=True)


def parse_basic_authorization(
    header: str | None,
    *,
    split_on_first_separator: bool = False,
) -> Credential:
    # Exact, case-sensitive prefix match including the single trailing space.
    if header is None or not header.startswith(BASIC_PREFIX):
        raise MissingAuthHeader()

    blob = header[len(BASIC_PREFIX) :]
    try:
        decoded = _b64decode(blob).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        # UnicodeDecodeError is a ValueError.
        raise MalformedCredentials() from e

    if BASIC_AUTH_SEPARATOR not in decoded:
        raise MissingSeparator()

    if split_on_first_separator:
        parts = decoded.split(BASIC_AUTH_SEPARATOR, 1)
    else:
        parts = decoded.split(BASIC_AUTH_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedCredentials("Username or password missing")

    username, password = parts
    return Credential(username=username, password=password)


# --- Module Notes -----------------------------------------------------------
# Strict mode rejects "alice:se:cret" even though the first-separator reading is
# unambiguous; `split_on_first_separator` opts into RFC 7617 behavior.
