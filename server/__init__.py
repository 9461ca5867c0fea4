"""
Podio bridge HTTP server package.

Serves the bridge contract (contacts, OAuth2 redirect and callback) over HTTP.
"""
from .server import BridgeServer, setup_logging
from .app import create_app

__version__ = "1.0.0"

__all__ = [
    'BridgeServer',
    'create_app',
    'setup_logging',
]
