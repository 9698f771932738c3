"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a deployment, or pass an explicit
``Settings`` instance to ``create_app`` (as the tests do).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Social Media API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Level of the per-request access log written by ``core.middleware``.
    # Set to WARNING to keep only requests that failed with an exception.
    access_log_level: str = os.getenv("ACCESS_LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  A relative path is resolved
    # against the package root by ``core.db.get_database_path``.  Every
    # store operation opens its own connection, so ``:memory:`` cannot
    # be used here.
    database_url: str = os.getenv("DATABASE_URL", "social_media.db")

    # Prefix under which the routes are mounted.  Empty serves
    # ``/register``, ``/messages`` etc. at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
