"""
Tests for the httpx based HTTP client collaborator.
"""
import json

import httpx  # type: ignore
import pytest  # type: ignore

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.sources.client.http.http_client import HTTPClient
from confluence_client.sources.client.http.http_request import HTTPRequest

from conftest import BASE_URL


@pytest.fixture
def captured():
    return []


@pytest.fixture
def echo_client(captured):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={"path": request.url.path})

    return HTTPClient("secret", transport=httpx.MockTransport(handler))


class TestHTTPClient:
    async def test_authorization_header(self, echo_client, captured):
        await echo_client.execute(HTTPRequest(url=f"{BASE_URL}/rest/api/space"))

        assert captured[0].headers["Authorization"] == "Bearer secret"
        assert captured[0].headers["Accept"] == "application/json"
        await echo_client.close()

    async def test_request_headers_take_precedence(self, echo_client, captured):
        await echo_client.execute(HTTPRequest(url=f"{BASE_URL}/x", headers={"Accept": "*/*"}))

        assert captured[0].headers["Accept"] == "*/*"
        await echo_client.close()

    async def test_path_and_query_params(self, echo_client, captured):
        request = HTTPRequest(
            url=BASE_URL + "/rest/api/content/{id}",
            path={"id": "42"},
            query={"expand": "version,space"},
        )

        response = await echo_client.execute(request)

        assert captured[0].url.path == "/wiki/rest/api/content/42"
        assert captured[0].url.params["expand"] == "version,space"
        assert response.json() == {"path": "/wiki/rest/api/content/42"}
        await echo_client.close()

    async def test_json_body(self, echo_client, captured):
        await echo_client.execute(HTTPRequest(url=f"{BASE_URL}/x", method="POST", body={"key": "TEST"}))

        assert json.loads(captured[0].content) == {"key": "TEST"}
        await echo_client.close()

    async def test_multipart_files(self, echo_client, captured):
        request = HTTPRequest(
            url=f"{BASE_URL}/x",
            method="POST",
            body={"comment": "hello"},
            files=[("file", ("a.txt", b"content", "text/plain"))],
        )

        await echo_client.execute(request)

        assert captured[0].headers["Content-Type"].startswith("multipart/form-data")
        assert b"content" in captured[0].content
        assert b"hello" in captured[0].content
        await echo_client.close()

    async def test_response_wrapper(self, echo_client):
        response = await echo_client.execute(HTTPRequest(url=f"{BASE_URL}/x"))

        assert response.status == 200
        assert response.is_success()
        assert response.is_status(HttpStatusCode.OK)
        assert not response.is_status(HttpStatusCode.NO_CONTENT)
        assert response.url == f"{BASE_URL}/x"
        await echo_client.close()

    async def test_context_manager_closes_client(self, echo_client):
        async with echo_client as client:
            assert client.client is not None

        assert echo_client.client is None


class TestHTTPRequest:
    def test_to_json(self):
        request = HTTPRequest(
            url=f"{BASE_URL}/x",
            method="POST",
            body=b"raw",
            files=[("file", ("a.txt", b"content", "text/plain"))],
        )

        data = json.loads(request.to_json())

        assert data["body"] == "raw"
        assert data["files"] == ["a.txt"]
