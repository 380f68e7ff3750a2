"""
Tests for spaces, groups and the miscellaneous endpoints.
"""
import json

import pytest  # type: ignore

from confluence_client.exceptions import ConfluenceApiError, InvalidArgumentError
from confluence_client.models.entities import PagingInformation, Picture

SPACE = {
    "id": 98306,
    "key": "TEST",
    "name": "Test Space",
    "type": "global",
    "description": {"plain": {"value": "A space for tests", "representation": "plain"}},
    "icon": {"path": "/wiki/download/attachments/icon.png", "width": 48, "height": 48, "isDefault": False},
}


class TestSpaces:
    async def test_get_all(self, data_source, confluence_server):
        confluence_server.add("GET", "/space", json={"results": [SPACE], "_links": {"next": "/rest/api/space?start=1"}})

        result = await data_source.space.get_all(PagingInformation(start=0, limit=1))

        params = confluence_server.last_request.url.params
        assert params["expand"] == "icon,description.plain,homepage"
        assert params["limit"] == "1"
        assert result.has_next
        assert result.results[0].description.plain.value == "A space for tests"

    async def test_get(self, data_source, confluence_server):
        confluence_server.add("GET", "/space/TEST", json=SPACE)

        space = await data_source.space.get("TEST", expand=["icon"])

        assert space.icon.width == 48
        assert confluence_server.last_request.url.params["expand"] == "icon"

    async def test_create(self, data_source, confluence_server):
        confluence_server.add("POST", "/space", json=SPACE)

        space = await data_source.space.create("TEST", "Test Space", "A space for tests")

        body = json.loads(confluence_server.last_request.content)
        assert body == {
            "key": "TEST",
            "name": "Test Space",
            "description": {"plain": {"value": "A space for tests", "representation": "plain"}},
        }
        assert space.key == "TEST"

    async def test_create_private(self, data_source, confluence_server):
        confluence_server.add("POST", "/space/_private", json={"key": "MINE"})

        space = await data_source.space.create_private("MINE", "Mine")

        assert json.loads(confluence_server.last_request.content) == {"key": "MINE", "name": "Mine"}
        assert space.key == "MINE"

    async def test_create_requires_name(self, data_source):
        with pytest.raises(InvalidArgumentError):
            await data_source.space.create("TEST", "")

    async def test_delete(self, data_source, confluence_server):
        confluence_server.add(
            "DELETE", "/space/TEST", status=202, json={"id": "task-1", "_links": {"status": "/rest/api/longtask/task-1"}}
        )

        task = await data_source.space.delete("TEST")

        assert task.id == "task-1"
        assert task.links.status == "/rest/api/longtask/task-1"


class TestGroups:
    async def test_default_paging(self, data_source, confluence_server):
        confluence_server.add(
            "GET", "/group", json={"results": [{"name": "confluence-users", "type": "group"}, {"name": "admins"}]}
        )

        groups = await data_source.group.get_groups()

        params = confluence_server.last_request.url.params
        assert (params["start"], params["limit"]) == ("0", "200")
        assert [group.name for group in groups] == ["confluence-users", "admins"]


class TestMisc:
    async def test_system_info(self, data_source, confluence_server):
        confluence_server.add("GET", "/settings/systemInfo", json={"cloudId": "cloud-1", "commitHash": "abc"})

        info = await data_source.misc.get_system_info()

        assert info.cloud_id == "cloud-1"

    async def test_system_info_not_available(self, data_source):
        assert await data_source.misc.get_system_info() is None

    async def test_system_info_error(self, data_source, confluence_server):
        confluence_server.add("GET", "/settings/systemInfo", status=500, content=b"boom")

        with pytest.raises(ConfluenceApiError) as exc_info:
            await data_source.misc.get_system_info()

        assert exc_info.value.status_code == 500
        assert exc_info.value.reason == "boom"

    async def test_get_picture(self, data_source, confluence_server):
        confluence_server.add("GET", "/wiki/download/attachments/icon.png", content=b"\x89PNG")

        data = await data_source.misc.get_picture(Picture(path="/wiki/download/attachments/icon.png"))

        assert data == b"\x89PNG"
        assert str(confluence_server.last_request.url) == (
            "https://confluence.example.com/wiki/download/attachments/icon.png"
        )
        assert confluence_server.last_request.headers["Accept"] == "*/*"
