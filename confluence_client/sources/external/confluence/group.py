from typing import List, Optional

from confluence_client.models.entities import Group, PagingInformation, Result
from confluence_client.sources.external.confluence.base import ConfluenceDomain

DEFAULT_GROUP_PAGING = PagingInformation(start=0, limit=200)


class GroupDomain(ConfluenceDomain):
    async def get_groups(self, paging: Optional[PagingInformation] = None) -> List[Group]:
        """HTTP GET /rest/api/group"""
        response = await self._request("GET", "/group", query=self._paging_query(paging, DEFAULT_GROUP_PAGING))
        return self._parse(Result[Group], response).results
