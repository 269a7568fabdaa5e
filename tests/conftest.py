"""Test configuration and fixtures for gcs-tools."""

import httpx
import pytest

from gcs_tools.auth import StaticTokenSource
from gcs_tools.storage import Client, ClientConfig

API = "https://storage.test/storage/v1"
UPLOAD = "https://storage.test/upload/storage/v1"


class FakeStorageAPI:
    """Records requests and answers them from a queue of canned responses."""

    def __init__(self, responses=None):
        self.requests: list[httpx.Request] = []
        self.responses = list(responses or [])

    def queue_json(self, payload, status_code=200):
        self.responses.append(httpx.Response(status_code, json=payload))

    def queue(self, response: httpx.Response):
        self.responses.append(response)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)


def page(items=None, prefixes=None, next_page_token=None) -> dict:
    """Build a listing page body."""
    body: dict = {}
    if items is not None:
        body["items"] = [{"name": name} for name in items]
    if prefixes is not None:
        body["prefixes"] = prefixes
    body["nextPageToken"] = next_page_token
    return body


def raw_path(request: httpx.Request) -> str:
    """The request path exactly as sent, without the query string."""
    return request.url.raw_path.decode("ascii").split("?", 1)[0]


def make_client(handler, token="test-token") -> Client:
    return Client(
        StaticTokenSource(token),
        config=ClientConfig(api_endpoint=API, upload_endpoint=UPLOAD, timeout=5.0),
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def fake_api():
    """A fake storage API with no queued responses."""
    return FakeStorageAPI()


@pytest.fixture
def client(fake_api):
    """Storage client wired to the fake API."""
    with make_client(fake_api) as c:
        yield c


@pytest.fixture
def object_resource() -> dict:
    return {
        "name": "data/file.txt",
        "bucket": "test-bucket",
        "size": "12",
        "contentType": "text/plain",
        "generation": "1700000000000000",
        "updated": "2024-01-01T00:00:00.000Z",
    }
