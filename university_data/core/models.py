"""
Shared data models for the university data service.
"""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_BASE_URL = "https://public.opendatasoft.com/api/explore/v2.1"
DEFAULT_DATASET_ID = "us-colleges-and-universities"


class CatalogConfig(BaseModel):
    """Immutable location of the upstream dataset."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    dataset_id: str = DEFAULT_DATASET_ID
    id_field: str = "objectid"
    name_field: str = "name"
    timeout: Optional[float] = None  # None keeps the httpx default

    @property
    def records_url(self) -> str:
        """URL of the dataset's records endpoint."""
        return f"{self.base_url.rstrip('/')}/catalog/datasets/{self.dataset_id}/records"

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """
        Build configuration from environment variables.

        Reads CATALOG_BASE_URL, CATALOG_DATASET_ID and CATALOG_TIMEOUT_SECONDS,
        falling back to the public OpenDataSoft dataset.
        """
        timeout = os.getenv("CATALOG_TIMEOUT_SECONDS")
        return cls(
            base_url=os.getenv("CATALOG_BASE_URL", DEFAULT_BASE_URL),
            dataset_id=os.getenv("CATALOG_DATASET_ID", DEFAULT_DATASET_ID),
            timeout=float(timeout) if timeout else None,
        )


class SearchRequest(BaseModel):
    """Request model for the search endpoint."""

    query: Optional[str] = Field("", description="Full-text search query")
    state: Optional[str] = Field("", description="Filter by state (e.g., 'CA', 'NY')")
    city: Optional[str] = Field("", description="Filter by city name")
    limit: int = Field(10, description="Maximum number of results to return (max: 100)")
    offset: int = Field(0, description="Number of results to skip (for pagination)")


class StatisticsRequest(BaseModel):
    """Request model for the statistics endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    field: Optional[str] = Field(None, description="Field to analyze")
    aggregation: Optional[str] = Field(
        None, description="Type of aggregation (count, sum, avg, min, max)"
    )
    group_by: Optional[str] = Field(
        None, alias="groupBy", description="Field to group by (e.g., 'state')"
    )
    filter: Optional[Dict[str, Any]] = Field(
        None, description="Filter conditions to apply"
    )


class FieldDescriptor(BaseModel):
    """Best-effort description of one dataset field."""

    name: str
    type: str  # date, number, string, boolean, object, array, null
    description: str
