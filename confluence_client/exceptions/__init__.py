from confluence_client.exceptions.confluence_exceptions import (
    ConfluenceApiError,
    ConfluenceError,
    InvalidArgumentError,
    InvalidOperationError,
    InvariantViolationError,
)

__all__ = [
    "ConfluenceApiError",
    "ConfluenceError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "InvariantViolationError",
]
