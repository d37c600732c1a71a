"""
Error taxonomy for the university data service.

Every error carries the message and HTTP status that end up in the
``{"success": false, "error": {...}}`` envelope.
"""

from typing import Optional


class CatalogError(Exception):
    """Base error. Terminal for the request that raised it."""

    status: int = 500

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class CatalogValidationError(CatalogError):
    """Required input missing or outside its allowed range/enum."""

    status = 400


class RecordNotFoundError(CatalogError):
    """A singular lookup matched zero records."""

    status = 404


class UpstreamError(CatalogError):
    """
    Transport failure or non-2xx reply from the catalog API.

    ``upstream_message`` and ``upstream_status`` are only set when the
    upstream reply provided them.
    """

    def __init__(
        self,
        upstream_message: Optional[str] = None,
        upstream_status: Optional[int] = None,
    ):
        self.upstream_message = upstream_message
        self.upstream_status = upstream_status
        super().__init__(
            upstream_message or "Upstream catalog request failed",
            upstream_status or 500,
        )

    def with_fallback(self, message: str) -> CatalogError:
        """Return the error to report, using ``message`` when upstream gave none."""
        return CatalogError(
            self.upstream_message or message,
            self.upstream_status or 500,
        )
