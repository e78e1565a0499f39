import httpx
import pytest
from fastapi.testclient import TestClient

from pharmasearch.main import app
from pharmasearch.search import service
from pharmasearch.search.dependencies import get_http_client


class ProviderSpy:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json = {"total": 0, "offset": 0, "data": []}
        self.text = None
        self.exc = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture(autouse=True)
def empty_cache():
    service.clear_cache()
    yield
    service.clear_cache()


@pytest.fixture
def provider():
    return ProviderSpy()


@pytest.fixture
def client(provider):
    async def override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(provider.handler)) as c:
            yield c

    app.dependency_overrides[get_http_client] = override
    yield TestClient(app)
    app.dependency_overrides.clear()
