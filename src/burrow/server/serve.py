"""Server startup — hands the live burrow app to a pounce ASGI server.

Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``), but
burrow has a live ``App`` object with a context already injected, so we
use ``pounce.Server`` directly with the ASGI callable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow._internal.asgi import ASGIApp

logger = logging.getLogger("burrow.server")


def run_server(
    app: ASGIApp,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the given ASGI callable.

    Args:
        app: ASGI callable (a burrow App wrapped by ``inject_context``).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count (1 for development).
        reload: Enable auto-reload on file changes.
        log_level: Server log level (``"debug"``, ``"info"``, ...).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
    )
    logger.info("Serving on http://%s:%d", host, port)
    server = Server(config, app)
    server.run()
