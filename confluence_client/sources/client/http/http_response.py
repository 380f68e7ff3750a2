from typing import Any, Dict

import httpx  # type: ignore

from confluence_client.config.constants.http_status_code import HttpStatusCode


class HTTPResponse:
    """Thin wrapper around an httpx response
    Args:
        response: The httpx response
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.response.headers)

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def text(self) -> str:
        return self.response.text

    def is_success(self) -> bool:
        return self.response.is_success

    def is_status(self, *expected: HttpStatusCode) -> bool:
        return any(self.status == code.value for code in expected)

    def json(self) -> Any:
        return self.response.json()

    def bytes(self) -> bytes:
        return self.response.content

    def __repr__(self) -> str:
        return f"HTTPResponse(status={self.status}, url={self.url!r})"
