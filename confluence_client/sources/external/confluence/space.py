from typing import Any, Dict, Iterable, Optional

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.models.entities import (
    LongRunningTask,
    PagingInformation,
    Result,
    Space,
)
from confluence_client.sources.external.confluence.base import ConfluenceDomain, require


class SpaceDomain(ConfluenceDomain):
    async def get_all(
        self,
        paging: Optional[PagingInformation] = None,
        expand: Optional[Iterable[str]] = None,
    ) -> Result[Space]:
        """HTTP GET /rest/api/space"""
        response = await self._request(
            "GET",
            "/space",
            query=self._expand_query(self.expand.space if expand is None else expand, self._paging_query(paging)),
        )
        return self._parse(Result[Space], response)

    async def get(self, space_key: str, expand: Optional[Iterable[str]] = None) -> Space:
        """HTTP GET /rest/api/space/{key}"""
        response = await self._request(
            "GET",
            "/space/{key}",
            path={"key": require(space_key, "space key")},
            query=self._expand_query(self.expand.space if expand is None else expand),
        )
        return self._parse(Space, response)

    async def create(self, key: str, name: str, description: Optional[str] = None) -> Space:
        """HTTP POST /rest/api/space"""
        return await self._create("/space", key, name, description)

    async def create_private(self, key: str, name: str, description: Optional[str] = None) -> Space:
        """Create a space only visible to the current user

        HTTP POST /rest/api/space/_private
        """
        return await self._create("/space/_private", key, name, description)

    async def delete(self, space_key: str) -> LongRunningTask:
        """Delete a space, Confluence does this in the background

        HTTP DELETE /rest/api/space/{key}
        """
        response = await self._request("DELETE", "/space/{key}", path={"key": require(space_key, "space key")})
        return self._parse(LongRunningTask, response, HttpStatusCode.ACCEPTED)

    async def _create(self, rel_path: str, key: str, name: str, description: Optional[str]) -> Space:
        _body: Dict[str, Any] = {"key": require(key, "space key"), "name": require(name, "space name")}
        if description:
            _body["description"] = {"plain": {"value": description, "representation": "plain"}}
        response = await self._request("POST", rel_path, body=_body)
        return self._parse(Space, response)
