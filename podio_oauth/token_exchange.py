"""OAuth2 authorization code exchange"""

import logging

from pydantic import ValidationError

from config.loader import OAuth2Config
from errors import TransportError, UpstreamAuthError
from transport.base import HttpTransport
from .constants import TOKEN_URL
from .credentials import CredentialPair
from .models import TokenResponse

logger = logging.getLogger(__name__)


async def exchange_code(
    code: str,
    config: OAuth2Config,
    transport: HttpTransport
) -> CredentialPair:
    """Exchange an authorization code for an access/refresh token pair

    Args:
        code: Authorization code from the OAuth2 callback
        config: OAuth2 client settings
        transport: HTTP transport used for the token request

    Returns:
        The new credential pair

    Raises:
        UpstreamAuthError: If Podio rejects the code or the body lacks either token
    """
    form = {
        "grant_type": "authorization_code",
        "client_id": config.client_id,
        "redirect_uri": config.redirect_url,
        "client_secret": config.client_secret,
        "code": code,
    }

    try:
        payload = await transport.post_form(TOKEN_URL, form)
    except TransportError as e:
        logger.error(f"Token exchange failed: {e}")
        raise UpstreamAuthError(f"Token exchange failed: {e}") from e

    try:
        token = TokenResponse.model_validate(payload)
    except ValidationError as e:
        logger.error("Token exchange response missing access token")
        raise UpstreamAuthError("Token exchange response missing access token") from e

    if not token.refresh_token:
        logger.error("Token exchange response missing refresh token")
        raise UpstreamAuthError("Token exchange response missing refresh token")

    logger.info("Podio OAuth2 tokens obtained from authorization code")
    return CredentialPair(access_token=token.access_token, refresh_token=token.refresh_token)
