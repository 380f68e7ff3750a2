from typing import Any, Dict, List, Optional, Union

from confluence_client.config.constants.http_status_code import HttpStatusCode
from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.models.entities import (
    Group,
    PagingInformation,
    Result,
    SearchResult,
    User,
    UserWatch,
)
from confluence_client.query.clause import Clause
from confluence_client.sources.external.confluence.base import (
    ConfluenceDomain,
    ContentId,
    content_id_of,
    require,
)

Account = Union[User, str]

DEFAULT_MEMBERSHIP_PAGING = PagingInformation(start=0, limit=200)


def account_id_of(account: Account) -> str:
    account_id = account.account_id if isinstance(account, User) else account
    if not account_id:
        raise InvalidArgumentError("An account id is required")
    return account_id


class UserDomain(ConfluenceDomain):
    """Users, their group memberships and what they watch

    The watch methods act on the current user unless an account is passed.
    """

    async def get_current_user(self) -> User:
        """HTTP GET /rest/api/user/current"""
        return self._parse(User, await self._request("GET", "/user/current"))

    async def get_anonymous_user(self) -> User:
        """HTTP GET /rest/api/user/anonymous"""
        return self._parse(User, await self._request("GET", "/user/anonymous"))

    async def get_user(self, account: Account) -> User:
        """HTTP GET /rest/api/user?accountId=..."""
        response = await self._request("GET", "/user", query={"accountId": account_id_of(account)})
        return self._parse(User, response)

    async def get_group_memberships(
        self,
        account: Account,
        paging: Optional[PagingInformation] = None,
    ) -> List[Group]:
        """HTTP GET /rest/api/user/memberof"""
        _query = self._paging_query(paging, DEFAULT_MEMBERSHIP_PAGING)
        _query["accountId"] = account_id_of(account)
        response = await self._request("GET", "/user/memberof", query=_query)
        return self._parse(Result[Group], response).results

    async def search_users(
        self,
        cql: Union[Clause, str],
        paging: Optional[PagingInformation] = None,
    ) -> Result[SearchResult]:
        """Search users with CQL query

        HTTP GET /rest/api/search/user

        Args:
            cql: CQL query, e.g. "type = user"
            paging: start and limit of the result page
        """
        _query: Dict[str, Any] = {"cql": cql.render() if isinstance(cql, Clause) else require(cql, "cql")}
        _query.update(self._paging_query(paging))
        response = await self._request("GET", "/search/user", query=_query)
        return self._parse(Result[SearchResult], response)

    async def add_content_watcher(self, content_id: ContentId, account: Optional[Account] = None) -> None:
        await self._watch("POST", "content", content_id_of(content_id), account)

    async def delete_content_watcher(self, content_id: ContentId, account: Optional[Account] = None) -> None:
        await self._watch("DELETE", "content", content_id_of(content_id), account)

    async def is_content_watcher(self, content_id: ContentId, account: Optional[Account] = None) -> bool:
        return await self._is_watching("content", content_id_of(content_id), account)

    async def add_label_watcher(self, label: str, account: Optional[Account] = None) -> None:
        await self._watch("POST", "label", require(label, "label"), account)

    async def delete_label_watcher(self, label: str, account: Optional[Account] = None) -> None:
        await self._watch("DELETE", "label", require(label, "label"), account)

    async def is_label_watcher(self, label: str, account: Optional[Account] = None) -> bool:
        # An unknown label is answered with 403 instead of "not watching"
        return await self._is_watching("label", require(label, "label"), account, HttpStatusCode.FORBIDDEN)

    async def add_space_watcher(self, space_key: str, account: Optional[Account] = None) -> None:
        await self._watch("POST", "space", require(space_key, "space key"), account)

    async def delete_space_watcher(self, space_key: str, account: Optional[Account] = None) -> None:
        await self._watch("DELETE", "space", require(space_key, "space key"), account)

    async def is_space_watcher(self, space_key: str, account: Optional[Account] = None) -> bool:
        return await self._is_watching("space", require(space_key, "space key"), account)

    @staticmethod
    def _account_query(account: Optional[Account]) -> Dict[str, Any]:
        return {} if account is None else {"accountId": account_id_of(account)}

    async def _watch(self, method: str, kind: str, target: str, account: Optional[Account]) -> None:
        response = await self._request(
            method,
            "/user/watch/" + kind + "/{target}",
            path={"target": target},
            query=self._account_query(account),
        )
        self._ensure_status(response, HttpStatusCode.NO_CONTENT)

    async def _is_watching(
        self,
        kind: str,
        target: str,
        account: Optional[Account],
        not_watching_status: Optional[HttpStatusCode] = None,
    ) -> bool:
        response = await self._request(
            "GET",
            "/user/watch/" + kind + "/{target}",
            path={"target": target},
            query=self._account_query(account),
        )
        if not_watching_status is not None and response.is_status(not_watching_status):
            return False
        return self._parse(UserWatch, response).watching
