"""Configuration loader for the Podio bridge

Loads configuration from multiple sources with the following priority:
1. Environment variables (highest priority)
2. .env file
3. Hardcoded defaults (lowest priority)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OAuth2Config:
    """Process-wide OAuth2 client settings

    Attributes:
        client_id: Podio API client identifier
        client_secret: Podio API client secret
        redirect_url: Callback URL registered with Podio
    """
    client_id: str
    client_secret: str
    redirect_url: str


class ConfigLoader:
    """Handles loading configuration from various sources"""

    def __init__(self, env_path: Optional[str] = None):
        """Initialize the config loader

        Args:
            env_path: Optional path to .env file.
                     Defaults to '.env' in the current directory.
        """
        self.env_path = Path(env_path) if env_path else Path(".env")
        self._load_env_file()

    def _load_env_file(self):
        """Load environment variables from .env file if it exists"""
        if self.env_path.exists():
            load_dotenv(dotenv_path=self.env_path)
            logger.debug(f"Loaded environment variables from {self.env_path}")
        else:
            logger.debug(f".env file not found at {self.env_path}, using environment variables and defaults only")

    def get(self, env_var: str, default: Any) -> Any:
        """Get a configuration value with priority: env > default

        Args:
            env_var: Environment variable name to check
            default: Default value if not found in environment

        Returns:
            The configuration value from environment or default
        """
        env_value = os.getenv(env_var)
        if env_value is None:
            return default

        # bool before int: bool is an int subclass
        if isinstance(default, bool):
            return env_value.lower() in ('true', '1', 'yes')
        elif isinstance(default, int):
            try:
                return int(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as int, using default: {default}")
                return default
        elif isinstance(default, float):
            try:
                return float(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as float, using default: {default}")
                return default
        return env_value

    def require(self, env_var: str, description: str) -> str:
        """Get a mandatory configuration value

        Args:
            env_var: Environment variable name to read
            description: Human readable name used in the error message

        Returns:
            The non-blank value

        Raises:
            ConfigurationError: If the variable is unset or blank
        """
        value = os.getenv(env_var)
        if value is None or not value.strip():
            raise ConfigurationError(f"Missing {description} in environment ({env_var}).")
        return value


# Create a global instance
_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Get or create the global ConfigLoader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_oauth2_config(prefix: str = "", loader: Optional[ConfigLoader] = None) -> OAuth2Config:
    """Read the OAuth2 client settings, failing fast on the first missing one

    Args:
        prefix: Variable name prefix, "" for CLIENT_ID etc. or "PODIO_" for PODIO_CLIENT_ID etc.
        loader: Loader to read from, defaults to the global instance

    Returns:
        Immutable OAuth2Config

    Raises:
        ConfigurationError: Naming the first missing variable
    """
    loader = loader or get_config_loader()
    config = OAuth2Config(
        client_id=loader.require(f"{prefix}CLIENT_ID", "client ID"),
        client_secret=loader.require(f"{prefix}CLIENT_SECRET", "client secret"),
        redirect_url=loader.require(f"{prefix}REDIRECT_URL", "redirect URI"),
    )
    logger.debug(f"OAuth2 configuration loaded for client {config.client_id}")
    return config
