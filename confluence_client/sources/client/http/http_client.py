import logging
from typing import Optional

import httpx  # type: ignore

from confluence_client.sources.client.http.http_request import HTTPRequest
from confluence_client.sources.client.http.http_response import HTTPResponse
from confluence_client.sources.client.iclient import IClient


class HTTPClient(IClient):
    """
    HTTP client with authentication.

    Features:
    - Automatic Authorization header injection
    - Lazily created, reusable httpx.AsyncClient
    - Optional custom transport (e.g. httpx.MockTransport in tests)

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport to send the requests through
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str,
        token_type: str = "Bearer",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers = {
            "Authorization": f"{token_type} {token}",
            "Accept": "application/json",
        }
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is created and available."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        """
        url = f"{request.url.format(**request.path_params)}"
        client = await self._ensure_client()

        # Merge client headers with request headers (request headers take precedence)
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {
            "params": request.query_params,
            "headers": merged_headers,
            **kwargs
        }

        if request.files:
            request_kwargs["files"] = request.files
            if isinstance(request.body, dict):
                request_kwargs["data"] = request.body
        elif isinstance(request.body, (dict, list)):
            request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body

        self.logger.debug("%s %s params=%s", request.method, url, request.query_params)
        response = await client.request(request.method, url, **request_kwargs)
        self.logger.debug("%s %s -> %s", request.method, url, response.status_code)
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
