"""
basic_gate.api

API package for the Basic-Auth gate service.

Responsibilities:
- FastAPI app factory and router modules.
- Translation of gate rejections into HTTP responses.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + auth + delegation to services.
