"""
Error Taxonomy.

Every failure surfaced by the SDK is an instance of [`InfluxError`][influxline.errors.InfluxError].
Build-time failures ([`InvalidQueryError`][influxline.errors.InvalidQueryError]) are raised
before any network I/O takes place; all the others originate from the
[`InfluxClient`][influxline.comm.InfluxClient] while talking to the server.

| Exception | Raised when |
| :--- | :--- |
| `InvalidQueryError` | A query violates a structural rule (e.g. a write without fields). |
| `UrlConstructionError` | The base URL or the request parameters cannot form a valid URL. |
| `ConnectionFailedError` | The server cannot be reached (transport failure). |
| `AuthorizationError` | The server answered `401 Unauthorized`. |
| `AuthenticationError` | The server answered `403 Forbidden`. |
| `DeserializationError` | The response body is not valid UTF-8 text. |
| `DatabaseError` | The response body carries an embedded `"error"` key. |
| `ProtocolError` | Any other malformed response (e.g. missing ping headers). |
"""

from typing import Optional


class InfluxError(Exception):
    """Base class of all the errors raised by the influxline SDK."""

    pass


class InvalidQueryError(InfluxError):
    """Raised by `build()` when the query is structurally invalid."""

    pass


class UrlConstructionError(InfluxError):
    """Raised when the endpoint URL cannot be assembled."""

    pass


class ConnectionFailedError(InfluxError, ConnectionError):
    """Raised when the transport layer fails to reach the server."""

    pass


class AuthenticationError(InfluxError):
    """Raised on HTTP 403: the credentials are not allowed to run the query."""

    def __init__(self, msg: str = "forbidden: the user is not allowed to run this query"):
        super().__init__(msg)


class AuthorizationError(InfluxError):
    """Raised on HTTP 401: missing or wrong credentials."""

    def __init__(self, msg: str = "unauthorized: missing or invalid credentials"):
        super().__init__(msg)


class DeserializationError(InfluxError):
    """Raised when the response body cannot be decoded as text."""

    pass


class DatabaseError(InfluxError):
    """
    Raised when the server reports an error inside the response body.

    Attributes:
        body (Optional[str]): The full decoded response body.
    """

    def __init__(self, msg: str, body: Optional[str] = None):
        super().__init__(msg)
        self.body = body


class ProtocolError(InfluxError):
    """Raised when the server response violates the expected HTTP contract."""

    pass
