"""
Settings for the wasend WhatsApp Cloud API client.

Environment variable configuration for the factory and CLI. The messaging
classes themselves take every value as a constructor argument.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


class Settings:
    """Application settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version
        # ================================================================
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Environment & General Configuration
        # ================================================================
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # Graph API Configuration
        # ================================================================
        self.api_version: str = os.getenv("API_VERSION", "v21.0")
        self.base_url: str = os.getenv("BASE_URL", "https://graph.facebook.com/")
        self.request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

        # ================================================================
        # WhatsApp Credentials
        # ================================================================
        self.wp_access_token: str | None = os.getenv("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = os.getenv("WP_PHONE_ID")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"
        self.environment = self.environment.upper()

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

    def require_credentials(
        self, access_token: str | None = None, phone_id: str | None = None
    ) -> tuple[str, str]:
        """Return (access_token, phone_id), failing when either is missing.

        Each explicit argument wins over its environment value on its own.

        Credentials are checked lazily so that importing the package (or
        running ``wasend --help``) works without a configured environment.

        Raises:
            ValueError: If WP_ACCESS_TOKEN or WP_PHONE_ID is not set
        """
        access_token = access_token or self.wp_access_token
        phone_id = phone_id or self.wp_phone_id
        if not access_token:
            raise ValueError("WP_ACCESS_TOKEN is required")
        if not phone_id:
            raise ValueError("WP_PHONE_ID is required")
        return access_token, phone_id

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
