"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so that the screen works
out of the box against the public mock API.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Management")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Remote users resource.  The default is a mock API that echoes
    # writes without persisting them.
    users_api_base_url: str = os.getenv("USERS_API_BASE_URL", "https://jsonplaceholder.typicode.com")
    users_api_token: Optional[str] = os.getenv("USERS_API_TOKEN") or None
    users_api_timeout: float = float(os.getenv("USERS_API_TIMEOUT", "15"))

    # Bind address used by ``run.py``.
    app_host: str = os.getenv("APP_HOST", "0.0.0.0")
    app_port: int = int(os.getenv("APP_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must be
# set before importing this module.
settings = Settings()
