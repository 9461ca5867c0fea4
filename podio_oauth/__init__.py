"""Podio OAuth2 token management"""

from typing import Optional

from config.loader import OAuth2Config
from transport.base import HttpTransport
from .authorization import AuthorizationURLBuilder
from .credentials import CredentialPair, mask_api_key
from .token_exchange import exchange_code
from .token_refresh import refresh_access_token


class PodioOAuthManager:
    """Podio OAuth2 flow implementation

    This class bundles the three token operations:
    - Authorization URL construction
    - Authorization code exchange
    - Access token refresh
    """

    def __init__(self, config: OAuth2Config, transport: HttpTransport, scope: Optional[str] = None):
        self.config = config
        self.transport = transport
        self.auth_builder = AuthorizationURLBuilder(config, scope)

    def get_authorize_url(self) -> str:
        """Construct the Podio authorize URL

        Returns:
            Full authorization URL
        """
        return self.auth_builder.get_authorize_url()

    async def exchange_code(self, code: str) -> CredentialPair:
        """Exchange authorization code for a credential pair

        Args:
            code: Authorization code from the OAuth2 callback

        Returns:
            New credential pair
        """
        return await exchange_code(code, self.config, self.transport)

    async def refresh_access_token(self, refresh_token: str) -> str:
        """Derive a fresh access token

        Args:
            refresh_token: Refresh token from the credential pair

        Returns:
            New access token
        """
        return await refresh_access_token(refresh_token, self.config, self.transport)


__all__ = [
    "PodioOAuthManager",
    "AuthorizationURLBuilder",
    "CredentialPair",
    "exchange_code",
    "refresh_access_token",
    "mask_api_key",
]
