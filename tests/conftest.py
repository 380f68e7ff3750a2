"""
Global pytest configuration and fixtures for the confluence client tests.

The Confluence server is replaced by an httpx.MockTransport, no test talks
to the network.
"""

import os
import sys
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Generator, List, Optional, Tuple

import httpx  # type: ignore
import pytest  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from confluence_client.sources.client.confluence.confluence import (  # noqa: E402
    ConfluenceClient,
    ConfluenceTokenConfig,
)
from confluence_client.sources.external.confluence.confluence import (  # noqa: E402
    ConfluenceDataSource,
)

BASE_URL = "https://confluence.example.com/wiki"
API_PATH = "/wiki/rest/api"
TEST_TOKEN = "test-token"

# Initialize Faker for generating test data
fake: Faker = Faker()


class FakeConfluence:
    """
    Canned responses keyed by method and path, plus a log of received requests.

    Example:
        confluence_server.add("GET", "/user/current", json={"accountId": "abc"})
    """

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Tuple[int, Any, Optional[bytes]]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, json: Any = None, content: Optional[bytes] = None) -> None:
        """Register a response, paths below the REST API are given without the API prefix."""
        full_path = path if path.startswith("/wiki/") else API_PATH + path
        self.routes[(method, full_path)] = (status, json, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"statusCode": 404, "message": f"No route for {key}"})
        status, json_body, content = self.routes[key]
        if content is not None:
            return httpx.Response(status, content=content)
        if json_body is not None:
            return httpx.Response(status, json=json_body)
        return httpx.Response(status)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state before each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def confluence_server() -> FakeConfluence:
    return FakeConfluence()


@pytest.fixture
def mock_transport(confluence_server: FakeConfluence) -> httpx.MockTransport:
    return httpx.MockTransport(confluence_server.handler)


@pytest.fixture
async def data_source(mock_transport: httpx.MockTransport) -> AsyncGenerator[ConfluenceDataSource, None]:
    """
    Provide a data source wired to the fake Confluence server.

    The underlying HTTP client is closed after the test.
    """
    client = ConfluenceClient.build_with_config(ConfluenceTokenConfig(BASE_URL, TEST_TOKEN), transport=mock_transport)
    source = ConfluenceDataSource(client)

    yield source

    await source.close()


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Mark tests based on their location.
    """
    for item in items:
        item.add_marker(pytest.mark.unit)
        if f"{os.sep}query{os.sep}" in str(item.fspath):
            item.add_marker(pytest.mark.query)
