"""
Typed clause builders.

Every builder is bound to one CQL field and only offers the comparisons that
make sense for the values of that field. Each call validates its arguments
and returns a new Clause.
"""
from datetime import date, datetime
from typing import Any, Iterable, Union

from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.query import functions
from confluence_client.query.clause import Clause
from confluence_client.query.fields import ContentType, Field
from confluence_client.query.functions import CqlFunction
from confluence_client.query.operators import Operator

CQL_DATE_FORMAT = "%Y-%m-%d"
CQL_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

DateValue = Union[date, datetime, CqlFunction]


def quote(value: str) -> str:
    """Quote a string for CQL, escaping backslashes and double quotes"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_list(values: Iterable[str]) -> str:
    return f"({', '.join(values)})"


def _require_text(value: Any, name: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def _require_values(values: tuple, name: str) -> tuple:
    if not values:
        raise InvalidArgumentError(f"At least one {name} is required")
    return values


class FieldClause:
    """Base for builders bound to a single field"""

    def __init__(self, field: Field) -> None:
        self._field = field

    @property
    def field(self) -> Field:
        return self._field

    def _clause(self, operator: Operator, value: str) -> Clause:
        return Clause(self._field, operator, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._field.token})"


class ComparableClause(FieldClause):
    """Builder offering equality and membership checks, subclasses format the values"""

    def _format_value(self, value: Any) -> str:
        raise NotImplementedError

    def is_(self, value: Any) -> Clause:
        return self._clause(Operator.EQUAL_TO, self._format_value(value))

    def is_not(self, value: Any) -> Clause:
        return self._clause(Operator.NOT_EQUAL_TO, self._format_value(value))

    def in_(self, *values: Any) -> Clause:
        _require_values(values, f"{self._field.token} value")
        return self._clause(Operator.IN, format_list(self._format_value(v) for v in values))

    def not_in(self, *values: Any) -> Clause:
        _require_values(values, f"{self._field.token} value")
        return self._clause(Operator.NOT_IN, format_list(self._format_value(v) for v in values))


class UserClause(ComparableClause):
    """Clauses on user fields: creator, contributor, mention, watcher and favourite

    A user can be given as an account id or as an object with an account_id
    (or the deprecated username) attribute, like the User entity.
    """

    def _format_value(self, user: Any) -> str:
        if isinstance(user, CqlFunction):
            return user.render()
        if user is None:
            raise InvalidArgumentError(f"A user is required for {self._field.token}")
        if isinstance(user, str):
            return quote(_require_text(user, "account id"))
        identifier = getattr(user, "account_id", None) or getattr(user, "username", None)
        if not identifier:
            raise InvalidArgumentError(
                f"User {user!r} has neither an account id nor a username",
                details={"field": self._field.token},
            )
        return quote(_require_text(identifier, "account id"))

    def is_current_user(self) -> Clause:
        return self.is_(functions.current_user())

    def is_not_current_user(self) -> Clause:
        return self.is_not(functions.current_user())


class DatetimeClause(FieldClause):
    """Clauses on date fields: created and lastmodified"""

    def _format_value(self, value: DateValue) -> str:
        if isinstance(value, CqlFunction):
            return value.render()
        # datetime is a subclass of date, so it has to be checked first
        if isinstance(value, datetime):
            # CQL reads dates in the timezone of the Confluence user, an offset cannot be expressed
            if value.utcoffset() is not None:
                raise InvalidArgumentError(
                    f"Expected a naive datetime in the timezone of the Confluence user, got {value.isoformat()}",
                    details={"field": self._field.token},
                )
            return quote(value.strftime(CQL_DATETIME_FORMAT))
        if isinstance(value, date):
            return quote(value.strftime(CQL_DATE_FORMAT))
        raise InvalidArgumentError(
            f"Expected a date, datetime or CQL function for {self._field.token}, got {value!r}",
            details={"field": self._field.token},
        )

    def on(self, value: DateValue) -> Clause:
        return self._clause(Operator.EQUAL_TO, self._format_value(value))

    def before(self, value: DateValue) -> Clause:
        return self._clause(Operator.LESS_THAN, self._format_value(value))

    def after(self, value: DateValue) -> Clause:
        return self._clause(Operator.GREATER_THAN, self._format_value(value))

    def on_or_before(self, value: DateValue) -> Clause:
        return self._clause(Operator.LESS_THAN_EQUAL_TO, self._format_value(value))

    def on_or_after(self, value: DateValue) -> Clause:
        return self._clause(Operator.GREATER_THAN_EQUAL_TO, self._format_value(value))


class TypeClause(ComparableClause):
    def __init__(self) -> None:
        super().__init__(Field.TYPE)

    def _format_value(self, content_type: Union[ContentType, str]) -> str:
        if isinstance(content_type, ContentType):
            return content_type.value
        text = _require_text(content_type, "content type")
        try:
            return ContentType(text).value
        except ValueError as e:
            raise InvalidArgumentError(
                f"Unknown content type {content_type!r}",
                details={"allowed": [t.value for t in ContentType]},
            ) from e

    @property
    def is_page(self) -> Clause:
        return self.is_(ContentType.PAGE)

    @property
    def is_blog_post(self) -> Clause:
        return self.is_(ContentType.BLOG_POST)

    @property
    def is_attachment(self) -> Clause:
        return self.is_(ContentType.ATTACHMENT)

    @property
    def is_comment(self) -> Clause:
        return self.is_(ContentType.COMMENT)

    @property
    def is_space(self) -> Clause:
        return self.is_(ContentType.SPACE)

    @property
    def is_user(self) -> Clause:
        return self.is_(ContentType.USER)


class SpaceClause(ComparableClause):
    def __init__(self) -> None:
        super().__init__(Field.SPACE)

    def _format_value(self, space: Any) -> str:
        if isinstance(space, CqlFunction):
            return space.render()
        if space is not None and not isinstance(space, str):
            space = getattr(space, "key", None)
        return quote(_require_text(space, "space key"))

    def is_current_space(self) -> Clause:
        return self.is_(functions.current_space())


class TextClause(FieldClause):
    """Full text clauses, only containment is supported by CQL"""

    def __init__(self, field: Field = Field.TEXT) -> None:
        super().__init__(field)

    def contains(self, text: str) -> Clause:
        return self._clause(Operator.CONTAINS, quote(_require_text(text, "search text")))

    def does_not_contain(self, text: str) -> Clause:
        return self._clause(Operator.DOES_NOT_CONTAIN, quote(_require_text(text, "search text")))


class TitleClause(TextClause, ComparableClause):
    def __init__(self) -> None:
        super().__init__(Field.TITLE)

    def _format_value(self, title: str) -> str:
        return quote(_require_text(title, "title"))


class LabelClause(ComparableClause):
    def __init__(self) -> None:
        super().__init__(Field.LABEL)

    def _format_value(self, label: Any) -> str:
        if label is not None and not isinstance(label, str):
            label = getattr(label, "name", None)
        return quote(_require_text(label, "label"))


class ContentClause(ComparableClause):
    """Clauses on content ids: id, ancestor, parent and content"""

    def _format_value(self, content_id: Union[int, str, Any]) -> str:
        if content_id is not None and not isinstance(content_id, (int, str)):
            content_id = getattr(content_id, "id", None)
        if isinstance(content_id, bool) or content_id is None:
            raise InvalidArgumentError(f"A content id is required for {self._field.token}")
        text = str(content_id).strip()
        if not (text.isascii() and text.isdecimal()) or int(text) <= 0:
            raise InvalidArgumentError(
                f"Content id must be a positive number, got {content_id!r}",
                details={"field": self._field.token},
            )
        return text
