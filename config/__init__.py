"""Configuration management package for the Podio bridge"""

from .loader import ConfigLoader, OAuth2Config, get_config_loader, load_oauth2_config

__all__ = [
    "ConfigLoader",
    "OAuth2Config",
    "get_config_loader",
    "load_oauth2_config",
]
