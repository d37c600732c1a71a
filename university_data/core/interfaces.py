"""
Abstract interfaces for the upstream catalog.

The service only depends on this protocol, so tests and alternative
transports can stand in for the real HTTP executor.
"""

from typing import Any, Dict, Protocol


class ICatalogExecutor(Protocol):
    """
    Fetch records from the upstream catalog.

    Implementations issue exactly one outbound request per call and never
    retry. Failures are raised as ``UpstreamError``.
    """

    async def fetch_records(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Query the dataset records endpoint.

        Args:
            params: Query parameters (limit, offset, where, q, select, group_by)

        Returns:
            Upstream payload with format:
            {
                "total_count": int,
                "results": [...],  # Record mappings
            }
        """
        ...

    async def aclose(self) -> None:
        """Release any underlying connections."""
        ...
