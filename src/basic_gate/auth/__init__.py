"""
basic_gate.auth

Authentication/authorization package.

Responsibilities:
- Basic-Auth header parsing and the role allow-list.
- The `BasicAuthGate` pipeline and its Starlette middleware adapter.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The gate depends only on collaborator contracts; the SQL directory lives in `services`.
