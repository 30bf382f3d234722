"""
token_gateway.api.__main__

Entrypoint for running the gateway via `python -m token_gateway.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn (TLS-terminating when cert/key files are configured).
"""

from __future__ import annotations

import uvicorn

from token_gateway.api.app import create_app
from token_gateway.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        ssl_certfile=settings.ssl_certfile,
        ssl_keyfile=settings.ssl_keyfile,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
