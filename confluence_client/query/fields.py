from enum import Enum


class Field(str, Enum):
    """Queryable CQL fields, the value is the token used in the rendered query"""
    ANCESTOR = "ancestor"
    CONTENT = "content"
    CREATED = "created"
    CREATOR = "creator"
    CONTRIBUTOR = "contributor"
    FAVOURITE = "favourite"
    ID = "id"
    LABEL = "label"
    LAST_MODIFIED = "lastmodified"
    MACRO = "macro"
    MENTION = "mention"
    PARENT = "parent"
    SPACE = "space"
    TEXT = "text"
    TITLE = "title"
    TYPE = "type"
    WATCHER = "watcher"

    @property
    def token(self) -> str:
        return self.value

    @property
    def is_multi_valued(self) -> bool:
        """Fields that can hold several values per content, these cannot be sorted on"""
        return self in _MULTI_VALUED_FIELDS

    def __str__(self) -> str:
        return self.value


_MULTI_VALUED_FIELDS = frozenset({Field.LABEL})


class ContentType(str, Enum):
    """Values of the CQL type field"""
    PAGE = "page"
    BLOG_POST = "blogpost"
    ATTACHMENT = "attachment"
    COMMENT = "comment"
    SPACE = "space"
    USER = "user"

    def __str__(self) -> str:
        return self.value
