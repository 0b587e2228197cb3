"""sqlparts statement layer: clause aggregation into SELECT statements."""
from sqlparts.query.builder import OrderDirection, Query, union

__all__ = [
    "OrderDirection",
    "Query",
    "union",
]
