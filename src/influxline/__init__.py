"""
influxline - Python client for the InfluxDB HTTP line protocol interface.

This module provides the main entry points:

- **InfluxClient**: Asynchronous client dispatching queries to the server.
- **Query builders**: `WriteQuery` (line protocol points) and `ReadQuery` (raw InfluxQL).
- **Models**: `Timestamp` and `Value`, the building blocks of a point.

Example:
    >>> from influxline import InfluxClient, Query, Timestamp
    >>> client = InfluxClient("http://localhost:8086", "test")
    >>> query = Query.write_query(Timestamp.now(), "weather").add_field("temperature", 82)
    >>> # await client.query(query)
"""

# --- Client ---
from .comm import (
    InfluxClient as InfluxClient,
    ClientConfig as ClientConfig,
    Authentication as Authentication,
    ServerInfo as ServerInfo,
)

# --- Core Models ---
from .models import (
    Timestamp as Timestamp,
    Value as Value,
    WriteableMixin as WriteableMixin,
)

# --- Main Query classes ---
from .models.query import (
    Query as Query,
    QueryProtocol as QueryProtocol,
    ReadQuery as ReadQuery,
    WriteQuery as WriteQuery,
    ValidQuery as ValidQuery,
)

# --- Enums ---
from .enum import (
    Precision as Precision,
    QueryType as QueryType,
    ValueKind as ValueKind,
)

# --- Errors ---
from .errors import (
    InfluxError as InfluxError,
    InvalidQueryError as InvalidQueryError,
    UrlConstructionError as UrlConstructionError,
    ConnectionFailedError as ConnectionFailedError,
    AuthenticationError as AuthenticationError,
    AuthorizationError as AuthorizationError,
    DeserializationError as DeserializationError,
    DatabaseError as DatabaseError,
    ProtocolError as ProtocolError,
)

from .logging_config import (
    get_logger as get_logger,
    setup_sdk_logging as setup_sdk_logging,
)

__all__ = [
    # Client
    "InfluxClient",
    "ClientConfig",
    "Authentication",
    "ServerInfo",
    # Logging
    "get_logger",
    "setup_sdk_logging",
    # Core Models
    "Timestamp",
    "Value",
    "WriteableMixin",
    # Query
    "Query",
    "QueryProtocol",
    "ReadQuery",
    "WriteQuery",
    "ValidQuery",
    # Enums
    "Precision",
    "QueryType",
    "ValueKind",
    # Errors
    "InfluxError",
    "InvalidQueryError",
    "UrlConstructionError",
    "ConnectionFailedError",
    "AuthenticationError",
    "AuthorizationError",
    "DeserializationError",
    "DatabaseError",
    "ProtocolError",
]


# --- Set up the top-level logger for the SDK ---

from logging import NullHandler

_sdk_logger = get_logger()
_sdk_logger.addHandler(NullHandler())
