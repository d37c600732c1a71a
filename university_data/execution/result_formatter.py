"""
Result formatting utilities.

Every outcome of an operation is shaped into one of two envelopes:

    {"success": True, "data": ..., "metadata": {...}}
    {"success": False, "error": {"message": ..., "status": ...}}
"""

from typing import Any, Dict, Optional

from university_data.core.errors import CatalogError


class ResultFormatter:
    """
    Builds the uniform response envelope.

    ``metadata`` is omitted from success envelopes when not supplied.
    """

    @staticmethod
    def success(data: Any, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Wrap a successful result.

        Args:
            data: Upstream payload or extracted record
            metadata: Operation-specific echo of inputs and counts

        Returns:
            Success envelope
        """
        envelope: Dict[str, Any] = {"success": True, "data": data}
        if metadata is not None:
            envelope["metadata"] = metadata
        return envelope

    @staticmethod
    def failure(message: str, status: int = 400) -> Dict[str, Any]:
        """
        Wrap a failure.

        Args:
            message: Human-readable reason
            status: HTTP status the reply is sent with

        Returns:
            Error envelope
        """
        return {
            "success": False,
            "error": {
                "message": message,
                "status": status,
            },
        }

    @classmethod
    def from_error(cls, error: CatalogError) -> Dict[str, Any]:
        """Error envelope for a raised ``CatalogError``."""
        return cls.failure(error.message, error.status)
