from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from university_data import UniversityDataService
from university_data.core import CatalogConfig


class FakeCatalog:
    """Stands in for the upstream catalog: records requests, replies with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"total_count": 0, "results": []}
        self.content: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def respond(self, status_code: int = 200, payload: Any = None, content: Optional[bytes] = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_params(self) -> Dict[str, str]:
        return dict(self.requests[-1].url.params)


def make_records(count: int, state: str = "CA") -> List[Dict[str, Any]]:
    return [
        {
            "objectid": str(index),
            "name": f"University {index}",
            "city": "Fresno",
            "state": state,
            "population": str(1000 * index),
        }
        for index in range(1, count + 1)
    ]


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def config() -> CatalogConfig:
    return CatalogConfig(base_url="https://catalog.test/api/explore/v2.1", dataset_id="colleges")


@pytest.fixture
def http_client(catalog: FakeCatalog) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(catalog.handler))


@pytest.fixture
def service(config: CatalogConfig, http_client: httpx.AsyncClient) -> UniversityDataService:
    return UniversityDataService.from_config(config, http_client=http_client)


@pytest.fixture
def api_client(service: UniversityDataService):
    from api import create_app

    with TestClient(create_app(service)) as client:
        yield client
