"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Space Ships API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # All ship routes live under this prefix, e.g. ``/rest/ships``.
    api_prefix: str = os.getenv("API_PREFIX", "/rest")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "space_ships.db")

    # Number of ships returned when the caller does not give a page size.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "3"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
