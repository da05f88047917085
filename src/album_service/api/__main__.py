"""
album_service.api.__main__

Entrypoint for running the service via `python -m album_service.api`.
"""

from __future__ import annotations

import uvicorn

from album_service.api.app import create_app
from album_service.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    # A failed startup (store unreachable) makes uvicorn exit non-zero; no retry.
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
