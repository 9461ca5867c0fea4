"""
Endpoint handlers for the bridge server.
"""
from .health import router as health_router
from .contacts import router as contacts_router
from .oauth2 import router as oauth2_router

__all__ = [
    'health_router',
    'contacts_router',
    'oauth2_router',
]
