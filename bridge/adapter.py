"""Podio implementation of the bridge contract"""

import logging
from functools import partial
from typing import List, Mapping, Optional

import settings
from config.loader import OAuth2Config
from contacts.client import list_contacts
from contacts.models import Contact, ContactMappingOptions
from contacts.retry import get_contacts_with_retry
from errors import MissingAuthorizationCodeError
from podio_oauth import PodioOAuthManager
from podio_oauth.credentials import CredentialPair, mask_api_key
from transport.base import HttpTransport
from transport.httpx_transport import HttpxTransport
from .models import BridgeConfig, OAuth2CallbackResult

logger = logging.getLogger(__name__)


class PodioAdapter:
    """Exposes Podio contacts and OAuth2 through the bridge contract

    Holds no per-call state; the OAuth2 configuration is read-only, so one
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        config: OAuth2Config,
        transport: HttpTransport,
        scope: Optional[str] = None,
        mapping: ContactMappingOptions = ContactMappingOptions(),
    ):
        self.transport = transport
        self.mapping = mapping
        self.oauth = PodioOAuthManager(config, transport, scope)

    @classmethod
    def from_settings(cls, config: OAuth2Config, transport: Optional[HttpTransport] = None) -> "PodioAdapter":
        """Build an adapter using the process settings"""
        transport = transport or HttpxTransport(
            connect_timeout=settings.CONNECT_TIMEOUT,
            request_timeout=settings.REQUEST_TIMEOUT,
        )
        return cls(
            config,
            transport,
            scope=settings.PODIO_OAUTH_SCOPE or None,
            mapping=ContactMappingOptions(
                drop_without_phone=settings.DROP_CONTACTS_WITHOUT_PHONE,
                label_phone_numbers=settings.LABEL_PHONE_NUMBERS,
            ),
        )

    async def get_contacts(self, config: BridgeConfig) -> List[Contact]:
        """Fetch normalized contacts for the credential pair in config.api_key

        Raises:
            InvalidCredentialError: If the API key is not an access:refresh pair
            UpstreamContactFetchError: If the retried fetch fails
            UpstreamAuthError: If the token refresh fails
        """
        credentials = CredentialPair.decode(config.api_key)
        logger.debug(f"Fetching contacts for API key {mask_api_key(config.api_key)}")
        return await get_contacts_with_retry(
            credentials,
            partial(list_contacts, transport=self.transport, options=self.mapping),
            self.oauth.refresh_access_token,
        )

    async def get_oauth2_redirect_url(self) -> str:
        """Authorization URL for the OAuth2 consent screen"""
        return self.oauth.get_authorize_url()

    async def handle_oauth2_callback(self, query: Mapping[str, str]) -> OAuth2CallbackResult:
        """Exchange the callback's authorization code for an API key

        Args:
            query: Callback query parameters

        Raises:
            MissingAuthorizationCodeError: If no code parameter is present
            UpstreamAuthError: If the token exchange fails
        """
        code = query.get("code")
        if not code:
            raise MissingAuthorizationCodeError("OAuth2 callback is missing the 'code' parameter")

        credentials = await self.oauth.exchange_code(code)
        return OAuth2CallbackResult(api_key=credentials.encode(), api_url="")
