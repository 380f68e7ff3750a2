"""
CQL functions that can stand in for a value, e.g. ``created > startOfWeek("-1w")``.
"""
import re
from dataclasses import dataclass
from typing import Optional

from confluence_client.exceptions.confluence_exceptions import InvalidArgumentError

# An increment like "-1d", "+2w" or "3M" (units: y, M, w, d, h, m)
_INCREMENT_PATTERN = re.compile(r"^[+-]?\d+[yMwdhm]$")


@dataclass(frozen=True)
class CqlFunction:
    name: str
    argument: Optional[str] = None

    def render(self) -> str:
        if self.argument is None:
            return f"{self.name}()"
        return f'{self.name}("{self.argument}")'

    def __str__(self) -> str:
        return self.render()


def _date_function(name: str, increment: Optional[str]) -> CqlFunction:
    if increment is not None and not _INCREMENT_PATTERN.match(increment):
        raise InvalidArgumentError(
            f"Invalid increment {increment!r} for {name}(), expected something like '-1d'",
            details={"function": name, "increment": increment},
        )
    return CqlFunction(name, increment)


def current_user() -> CqlFunction:
    return CqlFunction("currentUser")


def current_space() -> CqlFunction:
    return CqlFunction("currentSpace")


def now(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("now", increment)


def start_of_day(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("startOfDay", increment)


def start_of_week(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("startOfWeek", increment)


def start_of_month(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("startOfMonth", increment)


def start_of_year(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("startOfYear", increment)


def end_of_day(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("endOfDay", increment)


def end_of_week(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("endOfWeek", increment)


def end_of_month(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("endOfMonth", increment)


def end_of_year(increment: Optional[str] = None) -> CqlFunction:
    return _date_function("endOfYear", increment)
