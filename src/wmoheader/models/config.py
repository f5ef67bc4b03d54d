"""Application configuration for the header scanner CLI."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Configuration class for the header scanner CLI."""

    log_level: str = "WARNING"
    log_file: str | None = None
    json_aliases: bool = True  # Emit camelCase keys (wmoHeader, ttaaii, ...)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_file=os.getenv("LOG_FILE"),
            json_aliases=os.getenv("JSON_ALIASES", "true").lower() in ("true", "1", "yes"),
        )
