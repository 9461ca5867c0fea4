"""OAuth2 authorization URL construction"""

from typing import Optional
from urllib.parse import urlencode

from config.loader import OAuth2Config
from .constants import AUTHORIZE_URL


class AuthorizationURLBuilder:
    """Builds the Podio authorization redirect URL"""

    def __init__(self, config: OAuth2Config, scope: Optional[str] = None):
        self.config = config
        self.scope = scope

    def get_authorize_url(self) -> str:
        """Construct the Podio authorize URL

        Deterministic and side-effect free; every value is URL-encoded.

        Returns:
            Full authorization URL
        """
        params = {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_url,
        }
        if self.scope:
            params["scope"] = self.scope

        return f"{AUTHORIZE_URL}?{urlencode(params)}"
