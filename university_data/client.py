"""
Async client for the University Data API.

Mirrors the server's endpoints one to one.
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


class UniversityDataClientError(Exception):
    """Raised when the server replies with a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class UniversityDataClient:
    """
    Thin wrapper around the server's REST endpoints.

    Usage:
        async with UniversityDataClient() as client:
            results = await client.search_universities(state="CA", limit=5)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the University Data server
            http_client: Optional httpx client to reuse
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client or httpx.AsyncClient(
            headers={"Content-Type": "application/json", "Accept": "application/json"}
        )

    async def __aenter__(self) -> "UniversityDataClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def _request(
        self,
        endpoint: str,
        method: str = "GET",
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send a request and return the decoded envelope.

        Args:
            endpoint: Path such as ``/search``
            method: HTTP method
            data: JSON body for POST requests
            params: Query-string parameters

        Returns:
            The server's JSON envelope
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = await self._http_client.request(
                method,
                url,
                json=data if method == "POST" else None,
                params=params,
            )
            result = response.json()

            if not response.is_success:
                error = result.get("error") if isinstance(result, dict) else None
                message = (error or {}).get("message") or "Request failed"
                raise UniversityDataClientError(message, response.status_code)

            return result
        except Exception as e:
            logger.error("Error in %s request to %s: %s", method, endpoint, e)
            raise

    async def get_schema(self) -> Dict[str, Any]:
        """Get the capability document describing endpoints and parameters."""
        return await self._request("/schema")

    async def search_universities(self, **params: Any) -> Dict[str, Any]:
        """
        Search for universities.

        Args:
            **params: query, state, city, limit (default 10), offset (default 0)

        Returns:
            Search envelope
        """
        return await self._request("/search", "POST", params)

    async def get_university(self, university_id: str) -> Dict[str, Any]:
        """Get detailed information for a university by record ID."""
        return await self._request("/getUniversity", params={"id": university_id})

    async def get_university_by_name(self, name: str) -> Dict[str, Any]:
        """Get detailed information for a university by name."""
        return await self._request("/getUniversityByName", params={"name": name})

    async def get_fields(self) -> Dict[str, Any]:
        """Get the fields available in the dataset."""
        return await self._request("/getFields")

    async def get_statistics(self, **params: Any) -> Dict[str, Any]:
        """
        Get aggregated statistics.

        Args:
            **params: field, aggregation (count, sum, avg, min, max),
                optional groupBy and filter

        Returns:
            Statistics envelope
        """
        return await self._request("/statistics", "POST", params)
