"""Entry point for the Space Ships API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment through ``Settings`` (``API_HOST``,
``API_PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
from uvicorn import Config, Server

from space_ships_api.app.core.config import settings
from space_ships_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    main()
