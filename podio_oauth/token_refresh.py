"""OAuth2 access token refresh"""

import logging

from pydantic import ValidationError

from config.loader import OAuth2Config
from errors import TransportError, UpstreamAuthError
from transport.base import HttpTransport
from .constants import TOKEN_URL
from .models import TokenResponse

logger = logging.getLogger(__name__)


async def refresh_access_token(
    refresh_token: str,
    config: OAuth2Config,
    transport: HttpTransport
) -> str:
    """Derive a fresh access token from a refresh token

    Only the access token is returned; Podio keeps the refresh token valid.

    Args:
        refresh_token: Refresh token from the credential pair
        config: OAuth2 client settings
        transport: HTTP transport used for the token request

    Returns:
        New access token

    Raises:
        UpstreamAuthError: If Podio rejects the refresh token or the body lacks an access token
    """
    form = {
        "grant_type": "refresh_token",
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "refresh_token": refresh_token,
    }

    logger.info("Attempting to refresh Podio access token...")
    try:
        payload = await transport.post_form(TOKEN_URL, form)
    except TransportError as e:
        logger.error(f"Token refresh failed: {e}")
        raise UpstreamAuthError(f"Token refresh failed: {e}") from e

    try:
        token = TokenResponse.model_validate(payload)
    except ValidationError as e:
        logger.error("Token refresh response missing access token")
        raise UpstreamAuthError("Token refresh response missing access token") from e

    logger.info("Successfully refreshed Podio access token")
    return token.access_token
