"""Credential pair codec for the bridge API key"""

from dataclasses import dataclass

from errors import InvalidCredentialError
from .constants import CREDENTIAL_SEPARATOR


@dataclass(frozen=True)
class CredentialPair:
    """Podio access/refresh token pair

    The bridge stores credentials as a single string, so the pair is
    serialized as ``access_token:refresh_token`` only at the outer boundary.

    Attributes:
        access_token: Short-lived bearer token, possibly already expired
        refresh_token: Long-lived token used to derive new access tokens
    """
    access_token: str
    refresh_token: str

    def encode(self) -> str:
        """Serialize to the colon-joined API key form"""
        return f"{self.access_token}{CREDENTIAL_SEPARATOR}{self.refresh_token}"

    @classmethod
    def decode(cls, api_key: str) -> "CredentialPair":
        """Parse an API key, splitting on the first separator only

        Raises:
            InvalidCredentialError: If either half is missing or empty
        """
        access_token, separator, refresh_token = (api_key or "").partition(CREDENTIAL_SEPARATOR)
        if not separator or not access_token or not refresh_token:
            raise InvalidCredentialError("API key must have the form '<access_token>:<refresh_token>'")
        return cls(access_token=access_token, refresh_token=refresh_token)

    def with_access_token(self, access_token: str) -> "CredentialPair":
        """Return a copy carrying a refreshed access token"""
        return CredentialPair(access_token=access_token, refresh_token=self.refresh_token)


def mask_api_key(api_key: str) -> str:
    """Mask an API key for logging"""
    if not api_key:
        return "<empty>"
    return f"{api_key[:4]}..."
