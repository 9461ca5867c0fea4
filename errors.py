"""Error hierarchy for the Podio bridge"""

from typing import Optional


class PodioBridgeError(Exception):
    """Base class for every error raised by the bridge"""


class ConfigurationError(PodioBridgeError):
    """A required OAuth2 setting is missing"""


class InvalidCredentialError(PodioBridgeError):
    """API key is not a valid ``access:refresh`` pair"""


class MissingAuthorizationCodeError(PodioBridgeError):
    """OAuth2 callback request carried no ``code`` parameter"""


class TransportError(PodioBridgeError):
    """Outbound HTTP call failed

    Attributes:
        status_code: HTTP status of the response, None for network failures
        detail: Short description of the failure
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail if status_code is None else f"{status_code} - {detail}")
        self.status_code = status_code
        self.detail = detail


class UpstreamAuthError(PodioBridgeError):
    """Token endpoint rejected the request or returned an unusable body"""


class UpstreamContactFetchError(PodioBridgeError):
    """Contact endpoint call failed"""


class MalformedResponseError(PodioBridgeError):
    """Contact endpoint returned something other than a JSON array"""
