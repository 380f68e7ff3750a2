from typing import Iterable, Optional

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.models.entities import Content, PagingInformation, Result
from confluence_client.sources.external.confluence.base import (
    ConfluenceDomain,
    ContentId,
    content_id_of,
    require,
)


class AttachmentDomain(ConfluenceDomain):
    """Attachments are content of type attachment below a page or blog post"""

    async def get_attachments(
        self,
        content_id: ContentId,
        paging: Optional[PagingInformation] = None,
        expand: Optional[Iterable[str]] = None,
    ) -> Result[Content]:
        """HTTP GET /rest/api/content/{id}/child/attachment"""
        response = await self._request(
            "GET",
            "/content/{id}/child/attachment",
            path={"id": content_id_of(content_id)},
            query=self._expand_query(self.expand.attachment if expand is None else expand, self._paging_query(paging)),
        )
        return self._parse(Result[Content], response)

    async def attach(
        self,
        content_id: ContentId,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
        comment: Optional[str] = None,
    ) -> Result[Content]:
        """Upload a file as attachment

        HTTP POST /rest/api/content/{id}/child/attachment (multipart)
        """
        if content is None:
            raise InvalidArgumentError("Attachment content is required")
        response = await self._request(
            "POST",
            "/content/{id}/child/attachment",
            path={"id": content_id_of(content_id)},
            body={"comment": comment} if comment else None,
            files=[("file", (require(filename, "filename"), content, content_type))],
            # Confluence rejects multipart uploads without this header
            headers={"X-Atlassian-Token": "nocheck"},
        )
        return self._parse(Result[Content], response)

    async def delete(self, attachment: ContentId) -> None:
        """HTTP DELETE /rest/api/content/{id}"""
        response = await self._request("DELETE", "/content/{id}", path={"id": content_id_of(attachment)})
        self._ensure_status(response, HttpStatusCode.NO_CONTENT)

    async def get_content(self, attachment: Content) -> bytes:
        """Download the raw bytes of an attachment using its download link"""
        download = attachment.links.download if attachment.links else None
        if not download:
            raise InvalidArgumentError(f"Attachment {attachment.id} has no download link")
        response = await self._request(
            "GET", "", absolute_url=self.base_url + "/" + download.lstrip("/"), headers={"Accept": "*/*"}
        )
        self._ensure_status(response)
        return response.bytes()
