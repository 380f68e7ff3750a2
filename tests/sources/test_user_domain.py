"""
Tests for users, group memberships and watchers.
"""
import pytest  # type: ignore

from confluence_client.exceptions import ConfluenceApiError, InvalidArgumentError
from confluence_client.models.entities import PagingInformation, User
from confluence_client.query.where import Where


@pytest.fixture
def account_id(faker_instance):
    return faker_instance.uuid4()


class TestUsers:
    async def test_current_user(self, data_source, confluence_server, account_id):
        confluence_server.add(
            "GET",
            "/user/current",
            json={"accountId": account_id, "displayName": "Jane", "profilePicture": {"path": "/wiki/a.png"}},
        )

        user = await data_source.user.get_current_user()

        assert user.account_id == account_id
        assert user.profile_picture.path == "/wiki/a.png"
        assert confluence_server.last_request.headers["Authorization"] == "Bearer test-token"

    async def test_anonymous_user(self, data_source, confluence_server):
        confluence_server.add("GET", "/user/anonymous", json={"type": "anonymous", "displayName": "Anonymous"})

        user = await data_source.user.get_anonymous_user()

        assert user.type == "anonymous"
        assert not user.has_identifier

    async def test_get_user(self, data_source, confluence_server, account_id):
        confluence_server.add("GET", "/user", json={"accountId": account_id})

        user = await data_source.user.get_user(User(accountId=account_id))

        assert confluence_server.last_request.url.params["accountId"] == account_id
        assert user.account_id == account_id

    async def test_get_user_requires_account_id(self, data_source):
        with pytest.raises(InvalidArgumentError):
            await data_source.user.get_user(User(displayName="Jane"))

    async def test_group_memberships_default_paging(self, data_source, confluence_server, account_id):
        confluence_server.add("GET", "/user/memberof", json={"results": [{"name": "confluence-users"}]})

        groups = await data_source.user.get_group_memberships(account_id)

        params = confluence_server.last_request.url.params
        assert params["start"] == "0"
        assert params["limit"] == "200"
        assert params["accountId"] == account_id
        assert [group.name for group in groups] == ["confluence-users"]

    async def test_group_memberships_paging(self, data_source, confluence_server, account_id):
        confluence_server.add("GET", "/user/memberof", json={"results": []})

        await data_source.user.get_group_memberships(account_id, PagingInformation(start=10, limit=5))

        assert confluence_server.last_request.url.params["limit"] == "5"

    async def test_search_users(self, data_source, confluence_server, account_id):
        confluence_server.add(
            "GET",
            "/search/user",
            json={"results": [{"user": {"accountId": account_id}, "entityType": "user"}], "totalSize": 1},
        )

        result = await data_source.user.search_users(Where.type.is_user, PagingInformation(limit=1))

        params = confluence_server.last_request.url.params
        assert params["cql"] == "type = user"
        assert params["limit"] == "1"
        assert result.total_size == 1
        assert result.results[0].user.account_id == account_id


class TestWatchers:
    async def test_add_content_watcher(self, data_source, confluence_server):
        confluence_server.add("POST", "/user/watch/content/42", status=204)

        await data_source.user.add_content_watcher(42)

        assert "accountId" not in confluence_server.last_request.url.params

    async def test_delete_content_watcher_for_account(self, data_source, confluence_server, account_id):
        confluence_server.add("DELETE", "/user/watch/content/42", status=204)

        await data_source.user.delete_content_watcher(42, account_id)

        assert confluence_server.last_request.url.params["accountId"] == account_id

    @pytest.mark.parametrize("watching", [True, False])
    async def test_is_content_watcher(self, data_source, confluence_server, watching):
        confluence_server.add("GET", "/user/watch/content/42", json={"watching": watching})

        assert await data_source.user.is_content_watcher(42) is watching

    async def test_label_watcher(self, data_source, confluence_server):
        confluence_server.add("POST", "/user/watch/label/test1", status=204)
        confluence_server.add("GET", "/user/watch/label/test1", json={"watching": True})

        await data_source.user.add_label_watcher("test1")

        assert await data_source.user.is_label_watcher("test1")

    async def test_unknown_label_is_not_watched(self, data_source, confluence_server):
        confluence_server.add("GET", "/user/watch/label/nope", status=403, json={"statusCode": 403})

        assert await data_source.user.is_label_watcher("nope") is False

    async def test_space_watcher(self, data_source, confluence_server):
        confluence_server.add("POST", "/user/watch/space/TEST", status=204)
        confluence_server.add("DELETE", "/user/watch/space/TEST", status=204)
        confluence_server.add("GET", "/user/watch/space/TEST", json={"watching": False})

        await data_source.user.add_space_watcher("TEST")
        await data_source.user.delete_space_watcher("TEST")

        assert not await data_source.user.is_space_watcher("TEST")
        assert [request.method for request in confluence_server.requests] == ["POST", "DELETE", "GET"]

    async def test_forbidden_space_is_an_error(self, data_source, confluence_server):
        confluence_server.add("GET", "/user/watch/space/SECRET", status=403, json={"message": "Forbidden"})

        with pytest.raises(ConfluenceApiError) as exc_info:
            await data_source.user.is_space_watcher("SECRET")

        assert exc_info.value.status_code == 403

    async def test_watch_requires_label(self, data_source, confluence_server):
        with pytest.raises(InvalidArgumentError):
            await data_source.user.add_label_watcher("")

        assert confluence_server.requests == []
