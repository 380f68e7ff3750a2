from enum import Enum
from typing import Dict

from confluence_client.exceptions.confluence_exceptions import InvariantViolationError


class Operator(str, Enum):
    """CQL comparison operators, the value is the token used in the rendered query"""
    EQUAL_TO = "="
    NOT_EQUAL_TO = "!="
    CONTAINS = "~"
    DOES_NOT_CONTAIN = "!~"
    IN = "in"
    NOT_IN = "not in"
    GREATER_THAN = ">"
    GREATER_THAN_EQUAL_TO = ">="
    LESS_THAN = "<"
    LESS_THAN_EQUAL_TO = "<="

    @property
    def token(self) -> str:
        return self.value

    @property
    def inverse(self) -> "Operator":
        """The operator that selects exactly what this one rejects"""
        try:
            return _INVERSES[self]
        except KeyError as e:
            raise InvariantViolationError(
                f"No inverse registered for operator {self.name}",
                details={"operator": self.value},
            ) from e

    def __str__(self) -> str:
        return self.value


_INVERSES: Dict[Operator, Operator] = {
    Operator.EQUAL_TO: Operator.NOT_EQUAL_TO,
    Operator.NOT_EQUAL_TO: Operator.EQUAL_TO,
    Operator.CONTAINS: Operator.DOES_NOT_CONTAIN,
    Operator.DOES_NOT_CONTAIN: Operator.CONTAINS,
    Operator.IN: Operator.NOT_IN,
    Operator.NOT_IN: Operator.IN,
    Operator.GREATER_THAN: Operator.LESS_THAN,
    Operator.LESS_THAN: Operator.GREATER_THAN,
    Operator.GREATER_THAN_EQUAL_TO: Operator.LESS_THAN_EQUAL_TO,
    Operator.LESS_THAN_EQUAL_TO: Operator.GREATER_THAN_EQUAL_TO,
}


def _check_inverse_table() -> None:
    for operator in Operator:
        if operator not in _INVERSES:
            raise InvariantViolationError(f"Operator {operator.name} has no inverse")
        if _INVERSES[_INVERSES[operator]] is not operator:
            raise InvariantViolationError(f"Inverse of operator {operator.name} is not symmetric")


_check_inverse_table()
