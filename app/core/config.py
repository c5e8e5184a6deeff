# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, read from environment variables.
Every key is read as FACELIST_<KEY> first, then plain <KEY>.
"""

import os

from app.core.exceptions import ConfigurationError

ENV_PREFIX = "FACELIST_"


def _env(key: str, default: str = "") -> str:
    return os.getenv(ENV_PREFIX + key, os.getenv(key, default))


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = _env("SERVICE_NAME", "facelist")
    SERVICE_VERSION: str = _env("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(_env("SERVICE_PORT", "8080"))

    SLACK_TEAM: str = _env("SLACK_TEAM")
    SLACK_API_TOKEN: str = _env("SLACK_API_TOKEN")
    SLACK_API_URL: str = _env("SLACK_API_URL", "https://slack.com/api")
    EMAIL_FILTER: str = _env("EMAIL_FILTER")

    LOG_LEVEL: str = _env("LOG_LEVEL", "INFO").upper()

    REQUIRED: tuple[str, ...] = ("SLACK_TEAM", "SLACK_API_TOKEN")

    def validate(self) -> None:
        """Raise ConfigurationError for the first required key left empty."""
        for key in self.REQUIRED:
            if not getattr(self, key):
                raise ConfigurationError(f"{key} is not set!")


settings = Settings()
