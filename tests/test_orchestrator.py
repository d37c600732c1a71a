import httpx
import pytest

from tests.conftest import make_records
from university_data.core import (
    CatalogError,
    CatalogValidationError,
    RecordNotFoundError,
    SearchRequest,
    StatisticsRequest,
)


async def test_search_wraps_payload_with_metadata(service, catalog) -> None:
    records = make_records(5)
    catalog.respond(payload={"total_count": 712, "results": records})

    result = await service.search(SearchRequest(state="CA", limit=5))

    assert result == {
        "success": True,
        "data": {"total_count": 712, "results": records},
        "metadata": {
            "total": 712,
            "offset": 0,
            "limit": 5,
            "query_parameters": {"query": "", "state": "CA", "city": ""},
        },
    }
    assert catalog.last_params == {"limit": "5", "offset": "0", "where": "state = 'CA'"}


async def test_search_over_limit_never_calls_upstream(service, catalog) -> None:
    with pytest.raises(CatalogValidationError):
        await service.search(SearchRequest(limit=250))

    assert catalog.requests == []


async def test_search_upstream_failure_uses_generic_message(service, catalog) -> None:
    catalog.error = httpx.ReadTimeout("timed out")

    with pytest.raises(CatalogError) as exc_info:
        await service.search(SearchRequest())

    assert exc_info.value.message == "Failed to search universities"
    assert exc_info.value.status == 500


async def test_get_university_returns_first_record(service, catalog) -> None:
    records = make_records(1)
    catalog.respond(payload={"total_count": 1, "results": records})

    result = await service.get_university("1")

    assert result == {"success": True, "data": records[0]}
    assert catalog.last_params == {"where": "objectid = '1'", "limit": "1"}


async def test_get_university_requires_id(service, catalog) -> None:
    with pytest.raises(CatalogValidationError) as exc_info:
        await service.get_university("")

    assert exc_info.value.message == "University ID is required"
    assert catalog.requests == []


async def test_get_university_not_found(service, catalog) -> None:
    catalog.respond(payload={"total_count": 0, "results": []})

    with pytest.raises(RecordNotFoundError) as exc_info:
        await service.get_university("999999")

    assert exc_info.value.message == "University not found"
    assert exc_info.value.status == 404


async def test_get_university_upstream_404_is_not_found(service, catalog) -> None:
    catalog.respond(404, payload={"message": "Dataset not found"})

    with pytest.raises(RecordNotFoundError) as exc_info:
        await service.get_university("1")

    assert exc_info.value.message == "University not found"


async def test_get_university_by_name_not_found(service, catalog) -> None:
    catalog.respond(payload={"total_count": 0, "results": []})

    with pytest.raises(RecordNotFoundError) as exc_info:
        await service.get_university_by_name("Nowhere College")

    assert exc_info.value.message == "University not found"
    assert catalog.last_params["where"] == "name = 'Nowhere College'"


async def test_get_university_by_name_surfaces_upstream_error(service, catalog) -> None:
    catalog.respond(503, payload={"message": "Service unavailable"})

    with pytest.raises(CatalogError) as exc_info:
        await service.get_university_by_name("Foo U")

    assert (exc_info.value.message, exc_info.value.status) == ("Service unavailable", 503)


async def test_get_university_by_name_requires_name(service) -> None:
    with pytest.raises(CatalogValidationError) as exc_info:
        await service.get_university_by_name(None)

    assert exc_info.value.message == "University name is required"


async def test_get_fields_infers_from_sample(service, catalog) -> None:
    catalog.respond(
        payload={
            "total_count": 7000,
            "results": [{"name": "Foo U", "enrollment_date": "2020-01-01", "objectid": "5"}],
        }
    )

    result = await service.get_fields()

    assert result["success"] is True
    assert [(f["name"], f["type"]) for f in result["data"]] == [
        ("name", "string"),
        ("enrollment_date", "date"),
        ("objectid", "number"),
    ]
    assert catalog.last_params == {"limit": "1"}


async def test_get_fields_without_sample_fails(service, catalog) -> None:
    catalog.respond(payload={"total_count": 0, "results": []})

    with pytest.raises(CatalogError) as exc_info:
        await service.get_fields()

    assert (exc_info.value.message, exc_info.value.status) == ("Failed to fetch dataset fields", 500)


async def test_get_statistics_echoes_inputs(service, catalog) -> None:
    payload = {"results": [{"state": "CA", "count": 712}, {"state": "NY", "count": 450}]}
    catalog.respond(payload=payload)

    result = await service.get_statistics(
        StatisticsRequest(field="objectid", aggregation="count", groupBy="state")
    )

    assert result == {
        "success": True,
        "data": payload,
        "metadata": {"field": "objectid", "aggregation": "count", "groupBy": "state", "filter": None},
    }
    assert catalog.last_params == {"select": "count(*) as count", "group_by": "state"}


async def test_get_statistics_invalid_aggregation_never_calls_upstream(service, catalog) -> None:
    with pytest.raises(CatalogValidationError):
        await service.get_statistics(StatisticsRequest(field="population", aggregation="mode"))

    assert catalog.requests == []
