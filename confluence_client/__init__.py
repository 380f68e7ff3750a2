from confluence_client.config.settings import ConfluenceSettings, ExpandConfig
from confluence_client.exceptions.confluence_exceptions import (
    ConfluenceApiError,
    ConfluenceError,
    InvalidArgumentError,
    InvalidOperationError,
    InvariantViolationError,
)
from confluence_client.query import (
    Clause,
    ContentType,
    Field,
    Operator,
    OrderDirective,
    SortDirection,
    Where,
)
from confluence_client.sources.client.confluence.confluence import ConfluenceClient
from confluence_client.sources.external.confluence.confluence import ConfluenceDataSource

__version__ = "0.1.0"

__all__ = [
    "Clause",
    "ConfluenceApiError",
    "ConfluenceClient",
    "ConfluenceDataSource",
    "ConfluenceError",
    "ConfluenceSettings",
    "ContentType",
    "ExpandConfig",
    "Field",
    "InvalidArgumentError",
    "InvalidOperationError",
    "InvariantViolationError",
    "Operator",
    "OrderDirective",
    "SortDirection",
    "Where",
]
