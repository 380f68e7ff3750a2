"""
Wire entities of the Confluence REST API (rest/api), parsed with pydantic.

Only the attributes the client works with are declared, everything else in
the JSON is ignored.
"""
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from confluence_client.query.fields import ContentType

T = TypeVar("T")


class ConfluenceEntity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the Confluence attribute names, leaving out unset values"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Links(ConfluenceEntity):
    base: Optional[str] = None
    context: Optional[str] = None
    self_link: Optional[str] = Field(default=None, alias="self")
    web_ui: Optional[str] = Field(default=None, alias="webui")
    tiny_ui: Optional[str] = Field(default=None, alias="tinyui")
    download: Optional[str] = None
    next: Optional[str] = None
    status: Optional[str] = None


class PagingInformation(BaseModel):
    limit: Optional[int] = None
    start: Optional[int] = None

    def to_query(self) -> Dict[str, int]:
        return {key: value for key, value in (("start", self.start), ("limit", self.limit)) if value is not None}


class Picture(ConfluenceEntity):
    path: str
    width: Optional[int] = None
    height: Optional[int] = None
    is_default: Optional[bool] = Field(default=None, alias="isDefault")


class User(ConfluenceEntity):
    account_id: Optional[str] = Field(default=None, alias="accountId")
    account_type: Optional[str] = Field(default=None, alias="accountType")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    public_name: Optional[str] = Field(default=None, alias="publicName")
    email: Optional[str] = None
    type: Optional[str] = None
    # Deprecated by Atlassian in favour of the account id
    username: Optional[str] = None
    user_key: Optional[str] = Field(default=None, alias="userKey")
    profile_picture: Optional[Picture] = Field(default=None, alias="profilePicture")

    @property
    def has_identifier(self) -> bool:
        return bool(self.account_id or self.username)


class Group(ConfluenceEntity):
    id: Optional[str] = None
    name: str
    type: Optional[str] = None


class Label(ConfluenceEntity):
    id: Optional[str] = None
    name: str
    prefix: Optional[str] = "global"


class Description(ConfluenceEntity):
    value: str
    representation: str = "plain"


class SpaceDescription(ConfluenceEntity):
    plain: Optional[Description] = None


class Space(ConfluenceEntity):
    id: Optional[int] = None
    key: str
    name: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    icon: Optional[Picture] = None
    description: Optional[SpaceDescription] = None
    links: Optional[Links] = Field(default=None, alias="_links")


class Version(ConfluenceEntity):
    number: int
    when: Optional[str] = None
    message: Optional[str] = None
    minor_edit: Optional[bool] = Field(default=None, alias="minorEdit")
    by: Optional[User] = None


class Storage(ConfluenceEntity):
    value: str
    representation: str = "storage"


class Body(ConfluenceEntity):
    storage: Optional[Storage] = None
    view: Optional[Storage] = None


class History(ConfluenceEntity):
    latest: Optional[bool] = None
    created_by: Optional[User] = Field(default=None, alias="createdBy")
    created_date: Optional[str] = Field(default=None, alias="createdDate")


class Result(ConfluenceEntity, Generic[T]):
    """A page of results as returned by the list and search endpoints"""
    results: List[T] = Field(default_factory=list)
    start: Optional[int] = None
    limit: Optional[int] = None
    size: Optional[int] = None
    total_size: Optional[int] = Field(default=None, alias="totalSize")
    links: Optional[Links] = Field(default=None, alias="_links")

    @property
    def has_next(self) -> bool:
        return bool(self.links and self.links.next)


class Metadata(ConfluenceEntity):
    labels: Optional[Result[Label]] = None
    media_type: Optional[str] = Field(default=None, alias="mediaType")
    comment: Optional[str] = None


class Content(ConfluenceEntity):
    id: Optional[int] = None
    # Types unknown to ContentType (e.g. whiteboard, folder, database) stay plain strings
    type: Union[ContentType, str] = Field(default=ContentType.PAGE, union_mode="left_to_right")
    status: Optional[str] = None
    title: Optional[str] = None
    space: Optional[Space] = None
    version: Optional[Version] = None
    history: Optional[History] = None
    body: Optional[Body] = None
    metadata: Optional[Metadata] = None
    ancestors: Optional[List["Content"]] = None
    links: Optional[Links] = Field(default=None, alias="_links")


class SearchResult(ConfluenceEntity):
    """An entry of the generic search endpoint (rest/api/search)"""
    content: Optional[Content] = None
    user: Optional[User] = None
    space: Optional[Space] = None
    title: Optional[str] = None
    excerpt: Optional[str] = None
    url: Optional[str] = None
    entity_type: Optional[str] = Field(default=None, alias="entityType")
    last_modified: Optional[str] = Field(default=None, alias="lastModified")


class SystemInfo(ConfluenceEntity):
    cloud_id: Optional[str] = Field(default=None, alias="cloudId")
    commit_hash: Optional[str] = Field(default=None, alias="commitHash")


class UserWatch(ConfluenceEntity):
    watching: bool = False


class LongRunningTask(ConfluenceEntity):
    id: str
    links: Optional[Links] = Field(default=None, alias="_links")


class ApiError(ConfluenceEntity):
    """Error body of a failed Confluence request"""
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    message: Optional[str] = None
    reason: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


Content.model_rebuild()
