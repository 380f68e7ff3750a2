from typing import Any, Dict, Iterable, List, Optional, Union

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.models.entities import (
    Content,
    History,
    Label,
    PagingInformation,
    Result,
)
from confluence_client.query.clause import Clause
from confluence_client.query.fields import ContentType
from confluence_client.sources.external.confluence.base import (
    ConfluenceDomain,
    ContentId,
    content_id_of,
    require,
)


class ContentDomain(ConfluenceDomain):
    """Pages, blog posts and their labels"""

    async def search(
        self,
        cql: Union[Clause, str],
        paging: Optional[PagingInformation] = None,
        expand: Optional[Iterable[str]] = None,
        cql_context: Optional[str] = None,
    ) -> Result[Content]:
        """Search content with a CQL query

        HTTP GET /rest/api/content/search

        Args:
            cql: A Clause or a string from Where.and_/Where.or_
            paging: start and limit of the result page
            expand: Expand values, defaults to ExpandConfig.search
            cql_context: JSON serialized search context, e.g. '{"spaceKey":"TEST"}'
        """
        query_text = cql.render() if isinstance(cql, Clause) else cql
        if not query_text or not query_text.strip():
            raise InvalidArgumentError("A CQL query is required for a search")

        _query: Dict[str, Any] = {"cql": query_text}
        if cql_context:
            _query["cqlcontext"] = cql_context
        _query.update(self._paging_query(paging))
        _query = self._expand_query(self.expand.search if expand is None else expand, _query)

        self.logger.debug("Searching content with cql: %s", query_text)
        response = await self._request("GET", "/content/search", query=_query)
        return self._parse(Result[Content], response)

    async def get(
        self,
        content_id: ContentId,
        expand: Optional[Iterable[str]] = None,
        with_storage: bool = False,
    ) -> Content:
        """Get a single content, with_storage also fetches the body in storage format

        HTTP GET /rest/api/content/{id}
        """
        if expand is None:
            expand = self.expand.get_content_with_storage if with_storage else self.expand.get_content
        response = await self._request(
            "GET",
            "/content/{id}",
            path={"id": content_id_of(content_id)},
            query=self._expand_query(expand),
        )
        return self._parse(Content, response)

    async def get_children(
        self,
        content_id: ContentId,
        paging: Optional[PagingInformation] = None,
        expand: Optional[Iterable[str]] = None,
    ) -> Result[Content]:
        """HTTP GET /rest/api/content/{id}/child/page"""
        response = await self._request(
            "GET",
            "/content/{id}/child/page",
            path={"id": content_id_of(content_id)},
            query=self._expand_query(expand, self._paging_query(paging)),
        )
        return self._parse(Result[Content], response)

    async def get_history(self, content_id: ContentId) -> History:
        """HTTP GET /rest/api/content/{id}/history"""
        response = await self._request("GET", "/content/{id}/history", path={"id": content_id_of(content_id)})
        return self._parse(History, response)

    async def create(
        self,
        content_type: Union[ContentType, str],
        title: str,
        space_key: str,
        body: str,
        ancestor_id: Optional[ContentId] = None,
    ) -> Content:
        """Create a page or blog post, the body is in storage format

        HTTP POST /rest/api/content
        """
        try:
            content_type = ContentType(content_type)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown content type {content_type!r}") from e
        if content_type not in (ContentType.PAGE, ContentType.BLOG_POST):
            raise InvalidArgumentError(f"Cannot create content of type {content_type}")
        _body: Dict[str, Any] = {
            "type": content_type.value,
            "title": require(title, "title"),
            "space": {"key": require(space_key, "space key")},
            "body": {"storage": {"value": body or "", "representation": "storage"}},
        }
        if ancestor_id is not None:
            _body["ancestors"] = [{"id": content_id_of(ancestor_id)}]

        response = await self._request("POST", "/content", body=_body)
        return self._parse(Content, response, HttpStatusCode.OK)

    async def update(self, content: Content) -> Content:
        """Store changed content, the caller has to increase the version number

        HTTP PUT /rest/api/content/{id}
        """
        response = await self._request(
            "PUT",
            "/content/{id}",
            path={"id": content_id_of(content)},
            body=content.to_wire(),
        )
        return self._parse(Content, response)

    async def delete(self, content_id: ContentId, is_trashed: bool = False) -> None:
        """Move content to the trash, or purge it when it already is trashed

        HTTP DELETE /rest/api/content/{id}
        """
        _query = {"status": "trashed"} if is_trashed else {}
        response = await self._request(
            "DELETE", "/content/{id}", path={"id": content_id_of(content_id)}, query=_query
        )
        self._ensure_status(response, HttpStatusCode.NO_CONTENT)

    async def get_labels(self, content_id: ContentId) -> List[Label]:
        """HTTP GET /rest/api/content/{id}/label"""
        response = await self._request("GET", "/content/{id}/label", path={"id": content_id_of(content_id)})
        return self._parse(Result[Label], response).results

    async def add_labels(self, content_id: ContentId, labels: Iterable[Union[Label, str]]) -> List[Label]:
        """HTTP POST /rest/api/content/{id}/label"""
        _body = [
            (label if isinstance(label, Label) else Label(name=require(label, "label"))).to_wire()
            for label in labels
        ]
        if not _body:
            raise InvalidArgumentError("At least one label is required")
        response = await self._request("POST", "/content/{id}/label", path={"id": content_id_of(content_id)}, body=_body)
        return self._parse(Result[Label], response).results

    async def delete_label(self, content_id: ContentId, label: str) -> None:
        """HTTP DELETE /rest/api/content/{id}/label/{label}"""
        response = await self._request(
            "DELETE",
            "/content/{id}/label/{label}",
            path={"id": content_id_of(content_id), "label": require(label, "label")},
        )
        self._ensure_status(response, HttpStatusCode.NO_CONTENT)
