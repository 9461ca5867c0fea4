"""Bridge contract implementation for Podio"""

from .adapter import PodioAdapter
from .models import BridgeConfig, OAuth2CallbackResult, OAuth2RedirectResult

__all__ = [
    "PodioAdapter",
    "BridgeConfig",
    "OAuth2CallbackResult",
    "OAuth2RedirectResult",
]
