from confluence_client.query.clause import Clause, OrderDirective, SortDirection
from confluence_client.query.fields import ContentType, Field
from confluence_client.query.operators import Operator
from confluence_client.query.where import Where

__all__ = [
    "Clause",
    "ContentType",
    "Field",
    "Operator",
    "OrderDirective",
    "SortDirection",
    "Where",
]
