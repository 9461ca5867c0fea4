"""httpx implementation of the HTTP transport"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from errors import TransportError
from .base import HttpTransport

logger = logging.getLogger(__name__)

# Keep upstream error bodies short in logs and exception messages
MAX_ERROR_DETAIL = 200


class HttpxTransport(HttpTransport):
    """Sends requests with httpx.AsyncClient

    A shared client may be injected (tests use httpx.MockTransport); otherwise a
    short-lived client is opened for each call.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        connect_timeout: float = 10.0,
        request_timeout: float = 30.0,
    ):
        self.client = client
        self.timeout = httpx.Timeout(request_timeout, connect=connect_timeout)

    async def post_form(self, url: str, form: Dict[str, str]) -> Any:
        return await self._request(
            "POST",
            url,
            content=urlencode(form),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        # An undecodable 2xx body comes back as raw text; callers validate its shape
        return await self._request("GET", url, strict_json=False, headers=headers or {})

    async def _request(self, method: str, url: str, strict_json: bool = True, **kwargs) -> Any:
        try:
            if self.client is not None:
                response = await self.client.request(method, url, timeout=self.timeout, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out: {e!r}")
            raise TransportError(f"Request timed out: {method} {url}") from e
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed: {e!r}")
            raise TransportError(f"Request failed: {method} {url}") from e

        logger.debug(f"{method} {url} - {response.status_code}")

        if not response.is_success:
            raise TransportError(response.text[:MAX_ERROR_DETAIL], status_code=response.status_code)

        try:
            return response.json()
        except json.JSONDecodeError as e:
            if not strict_json:
                logger.warning(f"{method} {url} returned a non-JSON body")
                return response.text
            raise TransportError("Response body is not valid JSON", status_code=response.status_code) from e
