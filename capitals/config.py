"""Service settings read from environment variables.

Every field falls back to a default, so the service starts with no
configuration at all and listens on 127.0.0.1:8191.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "State Capitals API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8191")))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)


settings = Settings()
