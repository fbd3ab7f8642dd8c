from typing import Protocol

from ...enum import QueryType
from .valid_query import ValidQuery


class QueryProtocol(Protocol):
    """
    Structural protocol for every query the [`InfluxClient`][influxline.comm.InfluxClient]
    can dispatch.

    A class implicitly satisfies this protocol if it can render itself via `build()`
    and report its [`QueryType`][influxline.enum.QueryType] via `get_type()`. The
    client needs nothing else to choose the endpoint and the HTTP verb.

    ### Reference Implementations
    * [`WriteQuery`][influxline.models.query.builders.WriteQuery]: line protocol points.
    * [`ReadQuery`][influxline.models.query.builders.ReadQuery]: raw InfluxQL statements.
    """

    def build(self) -> ValidQuery:
        """
        Renders the query text.

        Raises:
            InvalidQueryError: If the query is structurally invalid.
        """
        ...

    def get_type(self) -> QueryType:
        """Returns whether the query is a read or a write."""
        ...
