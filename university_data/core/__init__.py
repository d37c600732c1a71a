"""Core interfaces, models and errors for the university data service."""

from university_data.core.errors import (
    CatalogError,
    CatalogValidationError,
    RecordNotFoundError,
    UpstreamError,
)
from university_data.core.interfaces import ICatalogExecutor
from university_data.core.models import (
    CatalogConfig,
    FieldDescriptor,
    SearchRequest,
    StatisticsRequest,
)

__all__ = [
    "CatalogError",
    "CatalogValidationError",
    "RecordNotFoundError",
    "UpstreamError",
    "ICatalogExecutor",
    "CatalogConfig",
    "FieldDescriptor",
    "SearchRequest",
    "StatisticsRequest",
]
