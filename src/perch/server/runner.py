"""Server runner.

Starts a pounce ASGI server with the live perch app object.
"""

from __future__ import annotations


def run_server(app: object, host: str, port: int, *, log_level: str = "info") -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but perch has a live app object. We use ``pounce.Server`` directly
    with the ASGI callable.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
