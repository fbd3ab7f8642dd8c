from enum import Enum


class QueryType(Enum):
    """
    Decides which endpoint (and which HTTP verb) the client uses for a query.

    The type is a structural property of the builder class, it is never
    inferred from the query text.
    """

    Read = "read"  # Sent to '/query'; GET or POST depending on the statement.
    Write = "write"  # Sent to '/write'; always POST with line protocol body.
