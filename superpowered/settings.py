"""
Client Settings

Centralized configuration for the Superpowered API client.
Values are read from the environment when the settings object is created;
explicit arguments passed to the client take precedence.
"""

import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.superpowered.ai/v1"


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable or return default."""
    return os.getenv(key, default)


def _get_env_float(key: str, default: float) -> float:
    """Get float from environment variable or return default."""
    value = os.getenv(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


@dataclass
class CredentialSettings:
    """API key pair used for HTTP basic auth."""

    api_key_id: str = field(
        default_factory=lambda: _get_env_str("SUPERPOWERED_API_KEY_ID", "")
    )

    api_key_secret: str = field(
        default_factory=lambda: _get_env_str("SUPERPOWERED_API_KEY_SECRET", "")
    )


@dataclass
class TransportSettings:
    """Settings for the HTTP transport."""

    base_url: str = field(
        default_factory=lambda: _get_env_str("SUPERPOWERED_BASE_URL", DEFAULT_BASE_URL)
    )

    # Timeout for API calls in seconds
    timeout: float = field(
        default_factory=lambda: _get_env_float("SUPERPOWERED_TIMEOUT", 120.0)
    )

    # Timeout for direct transfers to signed URLs (large files)
    upload_timeout: float = field(
        default_factory=lambda: _get_env_float("SUPERPOWERED_UPLOAD_TIMEOUT", 300.0)
    )


@dataclass
class Settings:
    """Main client settings container."""

    credentials: CredentialSettings = field(default_factory=CredentialSettings)
    transport: TransportSettings = field(default_factory=TransportSettings)


# Singleton instance
settings = Settings()
