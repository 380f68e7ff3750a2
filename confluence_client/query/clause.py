import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from confluence_client.exceptions.confluence_exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
)
from confluence_client.query.fields import Field
from confluence_client.query.operators import Operator

logger = logging.getLogger(__name__)


class SortDirection(Enum):
    """Direction of an order by entry, DEFAULT leaves the choice to the server"""
    DEFAULT = ""
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class OrderDirective:
    """A single entry of the order by list of a clause"""
    field: Field
    direction: SortDirection = SortDirection.DEFAULT

    def __post_init__(self) -> None:
        if not isinstance(self.field, Field):
            raise InvalidArgumentError(f"Cannot order by {self.field!r}, expected a Field")
        if self.field.is_multi_valued:
            raise InvalidArgumentError(
                f"Cannot order by something that can have multiple values, like {self.field.token}",
                details={"field": self.field.token},
            )

    def render(self) -> str:
        if self.direction is SortDirection.DEFAULT:
            return self.field.token
        return f"{self.field.token} {self.direction.value}"


class Clause:
    """A CQL where clause

    Either a comparison of a field against a value, optionally followed by
    order by directives, or a literal which is rendered unchanged.

    Example:
        clause = Clause(Field.SPACE, Operator.EQUAL_TO, '"TEST"').order_by_ascending(Field.CREATED)
        str(clause)  # 'space = "TEST" order by created asc'
    """

    def __init__(self, field: Field, operator: Operator, value: str) -> None:
        self._field = field
        self._operator = operator
        self._value = value
        self._literal: Optional[str] = None
        self._order_by: List[OrderDirective] = []
        self._rendered: Optional[str] = None

    @classmethod
    def from_literal(cls, literal: str) -> "Clause":
        """Wrap an already rendered CQL fragment"""
        if not literal:
            raise InvalidArgumentError("A literal clause needs a non empty CQL string")
        clause = cls.__new__(cls)
        clause._field = None
        clause._operator = None
        clause._value = None
        clause._literal = literal
        clause._order_by = []
        clause._rendered = literal
        return clause

    @property
    def field(self) -> Optional[Field]:
        return self._field

    @property
    def operator(self) -> Optional[Operator]:
        return self._operator

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def is_literal(self) -> bool:
        return self._literal is not None

    @property
    def order_directives(self) -> Tuple[OrderDirective, ...]:
        return tuple(self._order_by)

    def order_by(self, field: Field) -> "Clause":
        """Order by the field, using the server default direction"""
        return self._add_order(OrderDirective(field))

    def order_by_ascending(self, field: Field) -> "Clause":
        return self._add_order(OrderDirective(field, SortDirection.ASCENDING))

    def order_by_descending(self, field: Field) -> "Clause":
        return self._add_order(OrderDirective(field, SortDirection.DESCENDING))

    def negate(self) -> "Clause":
        """Replace the operator with its inverse, e.g. = becomes != and ~ becomes !~"""
        self._ensure_mutable("negate")
        self._operator = self._operator.inverse
        self._rendered = None
        return self

    def render(self) -> str:
        """Build the CQL text, the result is cached until the clause is changed"""
        if self._rendered is not None:
            return self._rendered

        parts = [f"{self._field.token} {self._operator.token} {self._value}"]
        if self._order_by:
            parts.append(" order by ")
            parts.append(", ".join(directive.render() for directive in self._order_by))
        self._rendered = "".join(parts)
        logger.debug("Rendered CQL clause: %s", self._rendered)
        return self._rendered

    def _add_order(self, directive: OrderDirective) -> "Clause":
        self._ensure_mutable("order")
        self._order_by.append(directive)
        self._rendered = None
        return self

    def _ensure_mutable(self, action: str) -> None:
        if self.is_literal:
            raise InvalidOperationError(
                f"Cannot {action} a literal clause",
                details={"literal": self._literal},
            )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.is_literal:
            return f"Clause.from_literal({self._literal!r})"
        return f"Clause({self._field!s}, {self._operator!s}, {self._value!r})"
