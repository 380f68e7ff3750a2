import logging
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.config.settings import ExpandConfig
from confluence_client.exceptions.confluence_exceptions import (
    ConfluenceApiError,
    InvalidArgumentError,
)
from confluence_client.models.entities import ApiError, Content, PagingInformation
from confluence_client.sources.client.confluence.confluence import ConfluenceRESTClient
from confluence_client.sources.client.http.http_request import HTTPRequest, MultipartFile
from confluence_client.sources.client.http.http_response import HTTPResponse

ModelType = TypeVar("ModelType", bound=BaseModel)

ContentId = Union[int, str, Content]


class ConfluenceDomain:
    """Shared plumbing of the domain groups (content, space, user, ...)

    Builds requests against the REST API below the base URL, executes them
    through the HTTP client and turns unexpected statuses into
    ConfluenceApiError.
    """

    def __init__(
        self,
        client: ConfluenceRESTClient,
        expand: ExpandConfig,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._client = client
        self.expand = expand
        self.logger = logger or logging.getLogger(__name__)
        self.base_url = client.get_base_url().rstrip('/')
        self.api_url = f"{self.base_url}/rest/api"

    async def _request(
        self,
        method: str,
        rel_path: str,
        path: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        body: Union[Dict[str, Any], List[Any], None] = None,
        files: Optional[List[MultipartFile]] = None,
        headers: Optional[Dict[str, Any]] = None,
        absolute_url: Optional[str] = None,
    ) -> HTTPResponse:
        _path = {key: quote(str(value), safe="") for key, value in (path or {}).items()}
        url = absolute_url or self.api_url + _safe_format_url(rel_path, _path)
        req = HTTPRequest(
            method=method,
            url=url,
            headers=_as_str_dict(headers or {}),
            query=_as_str_dict(query or {}),
            body=body,
            files=files or [],
        )
        return await self._client.execute(req)

    def _ensure_status(self, response: HTTPResponse, *expected: HttpStatusCode) -> None:
        """Raise ConfluenceApiError unless the response has one of the expected statuses"""
        if response.is_status(*(expected or (HttpStatusCode.OK,))):
            return
        error = _parse_error(response)
        self.logger.error(f"Confluence request {response.url} failed with status {response.status}: {error.message}")
        raise ConfluenceApiError(
            message=f"Confluence request {response.url} failed",
            status_code=response.status,
            reason=error.message or error.reason,
            details=error.data or {},
        )

    def _parse(self, model: Type[ModelType], response: HTTPResponse, *expected: HttpStatusCode) -> ModelType:
        self._ensure_status(response, *expected)
        return model.model_validate(response.json())

    @staticmethod
    def _expand_query(expand: Optional[Iterable[str]], query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        _query: Dict[str, Any] = dict(query or {})
        if expand:
            _query["expand"] = ",".join(expand)
        return _query

    @staticmethod
    def _paging_query(paging: Optional[PagingInformation], default: Optional[PagingInformation] = None) -> Dict[str, Any]:
        paging = paging or default
        return paging.to_query() if paging else {}


def content_id_of(content: ContentId) -> str:
    """Accept a content id as int, digit string or Content entity"""
    if isinstance(content, Content):
        content = content.id
    text = "" if isinstance(content, bool) or content is None else str(content).strip()
    if not (text.isascii() and text.isdecimal()) or int(text) <= 0:
        raise InvalidArgumentError(f"A positive content id is required, got {content!r}")
    return text


def require(value: Optional[str], name: str) -> str:
    if not value:
        raise InvalidArgumentError(f"{name} is required")
    return value


def _parse_error(response: HTTPResponse) -> ApiError:
    try:
        return ApiError.model_validate(response.json())
    except ValueError:
        return ApiError(message=response.text or None)


def _safe_format_url(template: str, params: Dict[str, object]) -> str:
    class _SafeDict(dict):
        def __missing__(self, key: str) -> str:
            return '{' + key + '}'
    try:
        return template.format_map(_SafeDict(params))
    except ValueError:
        return template


def _to_bool_str(v: Union[bool, str, int, float]) -> str:
    if isinstance(v, bool):
        return 'true' if v else 'false'
    return str(v)


def _serialize_value(v: Union[bool, str, int, float, list, tuple, set, None]) -> str:
    if v is None:
        return ''
    if isinstance(v, (list, tuple, set)):
        return ','.join(_to_bool_str(x) for x in v)
    return _to_bool_str(v)


def _as_str_dict(d: Dict[str, Any]) -> Dict[str, str]:
    return {str(k): _serialize_value(v) for k, v in (d or {}).items()}
