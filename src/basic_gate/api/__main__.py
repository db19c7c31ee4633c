"""
basic_gate.api.__main__

Entrypoint for running the FastAPI application via `python -m basic_gate.api`.

A missing role allow-list (`BASIC_GATE_ROLE_NAMES_COMMA_SEP`) fails in
`create_app` with `ConfigError`, before uvicorn binds the port.
"""

from __future__ import annotations

import uvicorn

from basic_gate.api.app import create_app
from basic_gate.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
