"""
Base transport interface for outbound Podio calls.
Token and contact code depend only on this contract, so tests can swap in fakes.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class HttpTransport(ABC):
    """Abstract base class for HTTP transports"""

    @abstractmethod
    async def post_form(self, url: str, form: Dict[str, str]) -> Any:
        """POST an application/x-www-form-urlencoded body

        Args:
            url: Target URL
            form: Flat key/value map serialized as the request body

        Returns:
            The decoded JSON response body

        Raises:
            TransportError: On network failure, timeout, non-2xx status or non-JSON body
        """
        pass

    @abstractmethod
    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """GET a URL and decode its JSON body

        Args:
            url: Target URL
            headers: Extra request headers

        Returns:
            The decoded JSON response body, or the raw text of a 2xx body that is not JSON

        Raises:
            TransportError: On network failure, timeout or non-2xx status
        """
        pass
