"""Outbound HTTP transport for Podio API calls"""

from .base import HttpTransport
from .httpx_transport import HttpxTransport

__all__ = [
    "HttpTransport",
    "HttpxTransport",
]
