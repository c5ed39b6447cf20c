"""Configuration module for the greeting service backend.

Loads and validates environment variables used by the application and the
server runner.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""
    pass


def _get_bool(key: str, default: bool) -> bool:
    """Read a ``true``/``false`` environment flag."""
    return os.getenv(key, str(default)).strip().lower() == "true"


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        # Application settings
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.debug = _get_bool("DEBUG", False)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        # Server binding
        self.host = os.getenv("HOST", DEFAULT_HOST)
        self.port = self._get_port("PORT", DEFAULT_PORT)

        # CORS extra origins (comma-separated)
        self.cors_allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")

        # Helmet-style response headers
        self.security_headers_enabled = _get_bool("SECURITY_HEADERS_ENABLED", True)

    @property
    def json_logs(self) -> bool:
        """Structured JSON logs are used in production only."""
        return self.environment == "production"

    @property
    def extra_cors_origins(self) -> list[str]:
        """Parsed list of ``CORS_ALLOWED_ORIGINS``."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    def _get_port(self, key: str, default: int) -> int:
        """Get a TCP port from the environment.

        Args:
            key: The environment variable name.
            default: Port used when the variable is unset or empty.

        Returns:
            The port number.

        Raises:
            ConfigError: If the value is not an integer between 1 and 65535.
        """
        raw = os.getenv(key, "").strip()
        if not raw:
            return default
        try:
            port = int(raw)
        except ValueError:
            raise ConfigError(
                f"Environment variable '{key}' must be an integer, got {raw!r}."
            ) from None
        if not 1 <= port <= 65535:
            raise ConfigError(
                f"Environment variable '{key}' must be between 1 and 65535, got {port}."
            )
        return port


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the process-wide configuration, built on first use.

    Raises:
        ConfigError: If an environment value is invalid.
    """
    return Config()
