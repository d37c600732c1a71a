"""
Catalog query executor.

Issues the single outbound request for an operation and normalizes
failures into ``UpstreamError``.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from university_data.core.errors import UpstreamError
from university_data.core.models import CatalogConfig

logger = logging.getLogger(__name__)


class CatalogExecutor:
    """
    Executes queries against the catalog's records endpoint.

    Implements the ICatalogExecutor interface over httpx. No retries: any
    failure is raised immediately.
    """

    def __init__(
        self,
        config: Optional[CatalogConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize catalog executor.

        Args:
            config: Catalog location
            client: Shared HTTP client; one is created on first use if omitted
        """
        self.config = config or CatalogConfig()
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: Dict[str, Any] = {}
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def fetch_records(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Query the records endpoint.

        Args:
            params: Upstream query parameters

        Returns:
            Decoded payload ({"total_count": int, "results": [...]})
        """
        url = self.config.records_url
        logger.debug("Requesting %s with params %s", url, params)

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _extract_message(e.response)
            logger.warning(
                "Catalog returned %s for %s: %s",
                e.response.status_code,
                url,
                message,
            )
            raise UpstreamError(message, e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error("Catalog request to %s failed: %s", url, e)
            raise UpstreamError() from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Catalog returned a non-JSON body for %s", url)
            raise UpstreamError() from e

        if not isinstance(payload, dict):
            logger.error("Unexpected catalog payload shape: %s", type(payload).__name__)
            raise UpstreamError()
        return payload

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()


def _extract_message(response: httpx.Response) -> Optional[str]:
    """Pull the ``message`` field out of an upstream error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None
