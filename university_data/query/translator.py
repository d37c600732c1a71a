"""
Query translation.

Converts validated request inputs into query parameters for the catalog's
records endpoint.
"""

import logging
from typing import Any, Dict, Optional

from university_data.core.errors import CatalogValidationError
from university_data.core.models import CatalogConfig, SearchRequest, StatisticsRequest
from university_data.query.filter_builder import (
    FilterBuilder,
    quote_literal,
    validate_identifier,
)

logger = logging.getLogger(__name__)

MAX_SEARCH_LIMIT = 100
VALID_AGGREGATIONS = ("count", "sum", "avg", "min", "max")
AGGREGATION_ALIASES = {"avg": "average"}


class QueryTranslator:
    """
    Builds upstream query parameters for each operation.

    Holds only immutable configuration; every method is a pure function of
    its inputs.
    """

    def __init__(self, config: Optional[CatalogConfig] = None):
        """
        Initialize query translator.

        Args:
            config: Catalog location the generated queries are meant for
        """
        self.config = config or CatalogConfig()

    def build_search_query(self, request: SearchRequest) -> Dict[str, Any]:
        """
        Build parameters for a filtered, paginated search.

        Args:
            request: Search inputs; empty strings count as absent

        Returns:
            Dictionary with ``limit`` and ``offset``, plus ``where`` when a
            state or city filter is given and ``q`` when a query is given
        """
        if request.limit > MAX_SEARCH_LIMIT:
            raise CatalogValidationError(f"Limit cannot exceed {MAX_SEARCH_LIMIT}")
        if request.offset < 0:
            raise CatalogValidationError("Offset cannot be negative")

        filters = FilterBuilder()
        if request.state:
            filters.equals("state", request.state)
        if request.city:
            filters.equals("city", request.city)

        params: Dict[str, Any] = {"limit": request.limit, "offset": request.offset}
        where = filters.build()
        if where is not None:
            params["where"] = where
        if request.query:
            params["q"] = request.query
        return params

    def build_lookup_query(self, field: str, value: str) -> Dict[str, Any]:
        """
        Build parameters that fetch the first record where ``field`` equals ``value``.

        Args:
            field: Field to match on (``objectid`` for ids, ``name`` for names)
            value: Literal to match; always compared as a string

        Returns:
            Dictionary with ``where`` and ``limit`` of 1
        """
        return {
            "where": f"{validate_identifier(field)} = {quote_literal(str(value))}",
            "limit": 1,
        }

    def build_id_lookup(self, university_id: str) -> Dict[str, Any]:
        """Build parameters for a lookup by record identifier."""
        return self.build_lookup_query(self.config.id_field, university_id)

    def build_name_lookup(self, name: str) -> Dict[str, Any]:
        """Build parameters for a lookup by university name."""
        return self.build_lookup_query(self.config.name_field, name)

    def build_aggregation_query(self, request: StatisticsRequest) -> Dict[str, Any]:
        """
        Build parameters for an aggregate over the dataset.

        Args:
            request: Field, aggregation kind, optional grouping and filter

        Returns:
            Dictionary with ``select`` and optionally ``group_by`` and ``where``
        """
        if not request.field or not request.aggregation:
            raise CatalogValidationError("Field and aggregation are required")
        if request.aggregation not in VALID_AGGREGATIONS:
            raise CatalogValidationError(
                f"Invalid aggregation. Must be one of: {', '.join(VALID_AGGREGATIONS)}"
            )

        params: Dict[str, Any] = {"select": self._build_select(request.field, request.aggregation)}

        if request.group_by:
            params["group_by"] = self._build_group_by(request.group_by)

        if request.filter:
            where = FilterBuilder().extend(request.filter).build()
            if where is not None:
                params["where"] = where

        logger.debug("Aggregation params: %s", params)
        return params

    def _build_select(self, field: str, aggregation: str) -> str:
        """Render the select expression. Text-typed numeric fields are cast with int()."""
        if aggregation == "count":
            return "count(*) as count"
        alias = AGGREGATION_ALIASES.get(aggregation, aggregation)
        return f"{aggregation}(int({validate_identifier(field)})) as {alias}"

    def _build_group_by(self, group_by: str) -> str:
        """Validate each comma-separated grouping field."""
        fields = [part.strip() for part in group_by.split(",")]
        return ", ".join(validate_identifier(field) for field in fields)
