from typing import Optional
from urllib.parse import urlsplit

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.models.entities import Picture, SystemInfo
from confluence_client.sources.external.confluence.base import ConfluenceDomain, require


class MiscDomain(ConfluenceDomain):
    async def get_system_info(self) -> Optional[SystemInfo]:
        """Get the system information, None when the server does not offer it

        HTTP GET /rest/api/settings/systemInfo
        """
        response = await self._request("GET", "/settings/systemInfo")
        if response.is_status(HttpStatusCode.NOT_FOUND):
            self.logger.debug("System info is not available on %s", self.base_url)
            return None
        return self._parse(SystemInfo, response)

    async def get_picture(self, picture: Picture) -> bytes:
        """Download a profile picture or space icon, the path is relative to the host"""
        parts = urlsplit(self.base_url)
        url = f"{parts.scheme}://{parts.netloc}/{require(picture.path, 'picture path').lstrip('/')}"
        response = await self._request("GET", "", absolute_url=url, headers={"Accept": "*/*"})
        self._ensure_status(response)
        return response.bytes()
