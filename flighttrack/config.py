"""
Configuration management for flighttrack.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class DataStoreConfig:
    """Remote data store configuration."""
    url: Optional[str] = os.getenv('DB_URL') or None
    timeout_seconds: float = float(os.getenv('DB_TIMEOUT_SECONDS', '10'))

    @property
    def is_configured(self) -> bool:
        return bool(self.url)


@dataclass(frozen=True)
class ServerConfig:
    """Development server settings."""
    port: int = int(os.getenv('APP_PORT', '3000'))
    host: str = os.getenv('APP_HOST', '0.0.0.0')


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    datastore: DataStoreConfig
    server: ServerConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        datastore=DataStoreConfig(),
        server=ServerConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
