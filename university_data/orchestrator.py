"""
Service orchestrator - main entry point.

Coordinates translation, execution and envelope shaping for every operation.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from university_data.core.errors import (
    CatalogError,
    CatalogValidationError,
    RecordNotFoundError,
    UpstreamError,
)
from university_data.core.interfaces import ICatalogExecutor
from university_data.core.models import CatalogConfig, SearchRequest, StatisticsRequest
from university_data.execution.executor import CatalogExecutor
from university_data.execution.result_formatter import ResultFormatter
from university_data.query.translator import QueryTranslator
from university_data.schema.extractor import SchemaExtractor

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "University not found"


class UniversityDataService:
    """
    Runs each operation as one linear pass:
    validate -> translate -> call upstream -> shape result.

    Holds no per-request state, so one instance serves concurrent requests.
    Every failure is raised as a ``CatalogError`` carrying the message and
    status for the error envelope.
    """

    def __init__(
        self,
        query_executor: ICatalogExecutor,
        query_translator: Optional[QueryTranslator] = None,
        schema_extractor: Optional[SchemaExtractor] = None,
    ):
        """
        Initialize the service.

        Args:
            query_executor: Upstream catalog executor
            query_translator: Builds upstream query parameters
            schema_extractor: Infers field descriptors from a sample record
        """
        self.query_executor = query_executor
        self.query_translator = query_translator or QueryTranslator()
        self.schema_extractor = schema_extractor or SchemaExtractor()

    @classmethod
    def from_config(
        cls,
        config: CatalogConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "UniversityDataService":
        """
        Create a service talking to the catalog described by ``config``.

        Args:
            config: Catalog location
            http_client: Optional shared httpx client

        Returns:
            Configured UniversityDataService
        """
        return cls(
            query_executor=CatalogExecutor(config=config, client=http_client),
            query_translator=QueryTranslator(config),
        )

    async def search(self, request: SearchRequest) -> Dict[str, Any]:
        """
        Search universities by free text, state and city.

        Args:
            request: Search inputs

        Returns:
            Success envelope with the upstream payload and a metadata echo
        """
        params = self.query_translator.build_search_query(request)
        payload = await self._fetch(params, "Failed to search universities")

        return ResultFormatter.success(
            payload,
            metadata={
                "total": payload.get("total_count"),
                "offset": request.offset,
                "limit": request.limit,
                "query_parameters": {
                    "query": request.query,
                    "state": request.state,
                    "city": request.city,
                },
            },
        )

    async def get_university(self, university_id: Optional[str]) -> Dict[str, Any]:
        """
        Fetch one university by record identifier.

        An upstream 404 is reported the same way as an empty result.
        """
        if not university_id:
            raise CatalogValidationError("University ID is required")

        logger.info("Getting university with ID: %s", university_id)
        params = self.query_translator.build_id_lookup(university_id)
        try:
            payload = await self._fetch(params, "Failed to fetch university details")
        except CatalogError as e:
            if e.status == 404:
                raise RecordNotFoundError(NOT_FOUND_MESSAGE) from e
            raise

        return ResultFormatter.success(self._first_record(payload, university_id))

    async def get_university_by_name(self, name: Optional[str]) -> Dict[str, Any]:
        """Fetch one university by exact name."""
        if not name:
            raise CatalogValidationError("University name is required")

        logger.info("Getting university with name: %s", name)
        params = self.query_translator.build_name_lookup(name)
        payload = await self._fetch(params, "Failed to fetch university details")
        return ResultFormatter.success(self._first_record(payload, name))

    async def get_fields(self) -> Dict[str, Any]:
        """
        Discover dataset fields from one sample record.

        Returns:
            Success envelope whose data is a list of
            {"name", "type", "description"} descriptors
        """
        payload = await self._fetch({"limit": 1}, "Failed to fetch dataset fields")
        results = payload.get("results") or []
        if not results:
            logger.error("No sample records found to determine fields")
            raise CatalogError("Failed to fetch dataset fields", 500)

        fields = self.schema_extractor.infer_fields(results[0])
        return ResultFormatter.success([field.model_dump() for field in fields])

    async def get_statistics(self, request: StatisticsRequest) -> Dict[str, Any]:
        """
        Aggregate a field over the dataset, optionally grouped and filtered.

        Args:
            request: Field, aggregation kind, optional groupBy and filter

        Returns:
            Success envelope with the upstream aggregate payload
        """
        params = self.query_translator.build_aggregation_query(request)
        payload = await self._fetch(params, "Failed to calculate statistics")

        return ResultFormatter.success(
            payload,
            metadata={
                "field": request.field,
                "aggregation": request.aggregation,
                "groupBy": request.group_by,
                "filter": request.filter,
            },
        )

    async def aclose(self) -> None:
        await self.query_executor.aclose()

    async def _fetch(self, params: Dict[str, Any], failure_message: str) -> Dict[str, Any]:
        """Run the single upstream call, substituting ``failure_message`` when upstream gave none."""
        try:
            return await self.query_executor.fetch_records(params)
        except UpstreamError as e:
            logger.error("%s: %s", failure_message, e.message)
            raise e.with_fallback(failure_message) from e

    @staticmethod
    def _first_record(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
        results: List[Dict[str, Any]] = payload.get("results") or []
        if not results:
            logger.info("No university found for: %s", key)
            raise RecordNotFoundError(NOT_FOUND_MESSAGE)
        return results[0]
