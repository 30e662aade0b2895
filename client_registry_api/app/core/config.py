"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with an empty collection on ``0.0.0.0:8000`` when
nothing is set.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Client Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Optional prefix placed in front of the ``/clients`` base path, for
    # example ``/api/v1``.  Empty by default.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path to a JSON array of ``{"id": ..., "name": ...}`` objects loaded
    # into the collection at startup.  Relative paths are resolved
    # against the current working directory.
    seed_file: Optional[str] = os.getenv("CLIENTS_SEED_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
