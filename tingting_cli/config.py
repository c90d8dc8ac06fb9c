"""
Configuration for TingTing CLI.

Settings are read from environment variables and never written to disk:

    TINGTING_BASE_URL    - API base URL
    TINGTING_API_TOKEN   - Static API token
    TINGTING_EMAIL       - Account email (used by ``tingting login``)
    TINGTING_PASSWORD    - Account password (used by ``tingting login``)
    TINGTING_TIMEOUT     - Request timeout in seconds (unset: no timeout)
    TINGTING_VERIFY_SSL  - Set to 0/false/no/off to skip certificate checks
"""

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://app.tingting.io/api/v1/"

ENV_BASE_URL = "TINGTING_BASE_URL"
ENV_API_TOKEN = "TINGTING_API_TOKEN"
ENV_EMAIL = "TINGTING_EMAIL"
ENV_PASSWORD = "TINGTING_PASSWORD"
ENV_TIMEOUT = "TINGTING_TIMEOUT"
ENV_VERIFY_SSL = "TINGTING_VERIFY_SSL"

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration."""

    base_url: str = DEFAULT_BASE_URL
    api_token: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[float] = None
    verify_ssl: bool = True

    def __post_init__(self):
        if not self.base_url:
            raise ConfigurationError("Base URL must not be empty")

    def replace(self, **changes: Any) -> "ClientConfig":
        """Return a copy with the given fields replaced. None values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary with secrets masked."""
        data = dataclasses.asdict(self)
        for key in ("api_token", "password"):
            if data[key]:
                data[key] = "***"
        return data

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            ClientConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        if environ is None:
            environ = os.environ

        timeout: Optional[float] = None
        raw_timeout = environ.get(ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                )

        verify_ssl = environ.get(ENV_VERIFY_SSL, "").strip().lower() not in _FALSE_VALUES

        config = cls(
            base_url=environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            api_token=environ.get(ENV_API_TOKEN) or None,
            email=environ.get(ENV_EMAIL) or None,
            password=environ.get(ENV_PASSWORD) or None,
            timeout=timeout,
            verify_ssl=verify_ssl,
        )
        logger.debug(f"Loaded configuration: {config.to_dict()}")
        return config


def get_config() -> ClientConfig:
    """Get configuration from the process environment."""
    return ClientConfig.from_env()
