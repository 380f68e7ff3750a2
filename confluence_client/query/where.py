from typing import Any, Callable, Union

from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError
from confluence_client.query.clause import Clause
from confluence_client.query.clauses import (
    ContentClause,
    DatetimeClause,
    FieldClause,
    LabelClause,
    SpaceClause,
    TextClause,
    TitleClause,
    TypeClause,
    UserClause,
)
from confluence_client.query.fields import Field

Renderable = Union[Clause, str]


class _BuilderAttribute:
    """Class attribute that hands out a new builder on every access"""

    def __init__(self, factory: Callable[[], FieldClause]) -> None:
        self._factory = factory

    def __get__(self, instance: Any, owner: type) -> FieldClause:
        return self._factory()


def _render_operand(operand: Renderable) -> str:
    if isinstance(operand, Clause):
        return operand.render()
    if isinstance(operand, str) and operand.strip():
        return operand
    raise InvalidArgumentError(f"Cannot combine {operand!r}, expected a Clause or a non empty CQL string")


def _combine(keyword: str, operands: tuple) -> str:
    if len(operands) < 2:
        raise InvalidArgumentError(f"'{keyword}' needs at least two clauses, got {len(operands)}")
    return "(" + f" {keyword} ".join(_render_operand(operand) for operand in operands) + ")"


class Where:
    """Entry point for building CQL queries

    Example:
        query = Where.and_(Where.type.is_page, Where.text.contains("foo"))
        # '(type = page and text ~ "foo")'
    """

    # User based clauses
    creator = _BuilderAttribute(lambda: UserClause(Field.CREATOR))
    contributor = _BuilderAttribute(lambda: UserClause(Field.CONTRIBUTOR))
    mention = _BuilderAttribute(lambda: UserClause(Field.MENTION))
    watcher = _BuilderAttribute(lambda: UserClause(Field.WATCHER))
    favourite = _BuilderAttribute(lambda: UserClause(Field.FAVOURITE))

    # Date based clauses
    created = _BuilderAttribute(lambda: DatetimeClause(Field.CREATED))
    last_modified = _BuilderAttribute(lambda: DatetimeClause(Field.LAST_MODIFIED))

    # Content based clauses
    id = _BuilderAttribute(lambda: ContentClause(Field.ID))
    ancestor = _BuilderAttribute(lambda: ContentClause(Field.ANCESTOR))
    parent = _BuilderAttribute(lambda: ContentClause(Field.PARENT))
    content = _BuilderAttribute(lambda: ContentClause(Field.CONTENT))

    type = _BuilderAttribute(TypeClause)
    space = _BuilderAttribute(SpaceClause)
    title = _BuilderAttribute(TitleClause)
    text = _BuilderAttribute(TextClause)
    label = _BuilderAttribute(LabelClause)

    @staticmethod
    def and_(*operands: Renderable) -> str:
        """Render the clauses and join them with 'and' inside parentheses"""
        return _combine("and", operands)

    @staticmethod
    def or_(*operands: Renderable) -> str:
        """Render the clauses and join them with 'or' inside parentheses"""
        return _combine("or", operands)
