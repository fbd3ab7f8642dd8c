"""
InfluxDB Client Entry Point.

This module provides the `InfluxClient`, the primary interface for sending
queries to an InfluxDB server over its HTTP API. The client decides the endpoint
and the HTTP verb from the query, attaches the database and credential
parameters, and maps every transport or protocol failure into the
[error taxonomy][influxline.errors].
"""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional, Tuple

import aiohttp
from yarl import URL

from ..enum import Endpoint, QueryType
from ..errors import (
    AuthenticationError,
    AuthorizationError,
    ConnectionFailedError,
    DatabaseError,
    DeserializationError,
    ProtocolError,
    UrlConstructionError,
)
from ..logging_config import get_logger
from ..models.query import QueryProtocol, ValidQuery
from .config import ClientConfig
from .server_info import ServerInfo

# Set the hierarchical logger
logger = get_logger(__name__)

_BUILD_HEADER = "X-Influxdb-Build"
_VERSION_HEADER = "X-Influxdb-Version"

# Read statements containing one of these keywords are sent via GET, all the others via POST
_GET_KEYWORDS = ("SELECT", "SHOW")

# Marker of a server-side error embedded in a JSON response body
_ERROR_MARKER = '"error"'


@dataclass(frozen=True)
class _PreparedRequest:
    """Fully resolved HTTP request, ready to be sent."""

    method: str
    url: URL
    body: Optional[str] = None


class InfluxClient:
    """
    Asynchronous client of the InfluxDB 1.x HTTP API.

    The client is immutable: [`with_auth()`][influxline.comm.InfluxClient.with_auth]
    returns a new client, and a single instance can be shared by any number of
    concurrent `query()` calls. No ordering is guaranteed between concurrent calls.

    Tip: Session reuse
        By default every call opens (and closes) its own `aiohttp.ClientSession`.
        Pass a `session` to reuse connections; the client never closes a session it
        did not create.

    Example:
        ```python
        import asyncio
        from influxline import InfluxClient, Query, Timestamp

        async def main():
            client = InfluxClient("http://localhost:8086", "test").with_auth("admin", "password")

            await client.query(
                Query.write_query(Timestamp.now(), "weather").add_field("temperature", 82)
            )
            print(await client.query(Query.raw_read_query("SELECT * FROM weather")))

        asyncio.run(main())
        ```
    """

    __slots__ = ("_config", "_session")

    def __init__(
        self,
        url: str,
        database: str,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Args:
            url: The URL where InfluxDB is running (e.g. `http://localhost:8086`).
            database: The database against which queries and writes are run.
            session: Optional session used for every request.
        """
        self._config = ClientConfig(url=str(url), database=str(database))
        self._session = session

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "InfluxClient":
        """Creates a client from an existing [`ClientConfig`][influxline.comm.config.ClientConfig]."""
        client = cls(config.url, config.database, session=session)
        client._config = config
        return client

    def with_auth(self, username: str, password: str) -> "InfluxClient":
        """
        Returns a copy of this client sending the given credentials.

        Args:
            username: The InfluxDB user.
            password: The password of the user.
        """
        return InfluxClient.from_config(
            self._config.with_auth(username, password), session=self._session
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def database_name(self) -> str:
        """The name of the database the client is using."""
        return self._config.database

    @property
    def database_url(self) -> str:
        """The URL of the InfluxDB installation the client is using."""
        return self._config.url

    def __repr__(self) -> str:
        return (
            f"InfluxClient(url={self._config.url!r}, database={self._config.database!r}, "
            f"auth={self._config.auth is not None})"
        )

    # --- Main API Methods ---

    async def ping(self) -> ServerInfo:
        """
        Pings the InfluxDB server.

        Returns:
            ServerInfo: The build type and the version of the server.

        Raises:
            UrlConstructionError: If the base URL is malformed.
            ConnectionFailedError: If the server is unreachable.
            ProtocolError: If the response misses the build or version header.
        """
        url = self._endpoint_url(Endpoint.PING, [])
        logger.debug(f"Pinging '{url}'")

        async with self._session_scope() as session:
            try:
                async with session.get(url) as response:
                    build = response.headers.get(_BUILD_HEADER)
                    version = response.headers.get(_VERSION_HEADER)
            except aiohttp.InvalidURL as e:
                raise UrlConstructionError(f"Invalid ping URL '{url}', err: '{e}'") from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(f"Ping of '{self._config.url}' failed, err: '{e}'")
                raise ConnectionFailedError(
                    f"Connection to InfluxDB at '{self._config.url}' failed.\nInner err: '{e}'"
                ) from e

        if build is None or version is None:
            missing = [
                name
                for name, value in ((_BUILD_HEADER, build), (_VERSION_HEADER, version))
                if value is None
            ]
            raise ProtocolError(f"Ping response is missing the headers {missing}")

        return ServerInfo(build=build, version=version)

    async def query(self, query: QueryProtocol) -> str:
        """
        Sends a [`ReadQuery`][influxline.models.query.builders.ReadQuery] or a
        [`WriteQuery`][influxline.models.query.builders.WriteQuery] to the server.

        Read statements go to `/query`: via GET when the text contains `SELECT` or
        `SHOW`, via POST otherwise. Writes are always POSTed to `/write` with the
        line protocol as body and the timestamp precision as parameter.

        Note: Heuristics
            The verb selection is a case-sensitive substring test, not a parser
            (a lower-case `select` is POSTed). Likewise, any response body containing
            the literal `"error"` is reported as a `DatabaseError`, even when the
            marker appears in legitimate data.

        Args:
            query: Any object implementing [`QueryProtocol`][influxline.models.query.protocols.QueryProtocol].

        Returns:
            str: The raw response body (JSON for reads, usually empty for writes).

        Raises:
            InvalidQueryError: If the query cannot be built. No request is sent.
            UrlConstructionError: If the base URL or the parameters are malformed.
            ConnectionFailedError: If the server is unreachable.
            AuthorizationError: If the server answers 401.
            AuthenticationError: If the server answers 403.
            ProtocolError: If the response body cannot be read.
            DeserializationError: If the response body is not UTF-8.
            DatabaseError: If the response body contains an error.
        """
        # Build first: an invalid query must fail before any I/O
        valid_query = query.build()
        request = self._prepare_request(query, valid_query)
        logger.debug(f"Dispatching {request.method} '{request.url.path}'")

        async with self._session_scope() as session:
            try:
                async with session.request(
                    request.method, request.url, data=request.body
                ) as response:
                    self._check_status(response)
                    raw_body = await self._read_body(response)
            except aiohttp.InvalidURL as e:
                raise UrlConstructionError(
                    f"Invalid request URL '{request.url.path}', err: '{e}'"
                ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(f"Request to '{self._config.url}' failed, err: '{e}'")
                raise ConnectionFailedError(
                    f"Connection to InfluxDB at '{self._config.url}' failed.\nInner err: '{e}'"
                ) from e

        return self._decode_body(raw_body)

    # --- Request assembly ---

    def _prepare_request(
        self, query: QueryProtocol, valid_query: ValidQuery
    ) -> _PreparedRequest:
        """Chooses endpoint, verb, parameters and body for an already built query."""
        text = valid_query.get()
        params = self._config.to_params()

        if query.get_type() is QueryType.Read:
            params.append(("q", text))
            method = "GET" if any(kw in text for kw in _GET_KEYWORDS) else "POST"
            return _PreparedRequest(
                method=method, url=self._endpoint_url(Endpoint.QUERY, params)
            )

        # 'Now' timestamps have no precision token: the parameter is omitted
        get_precision = getattr(query, "get_precision", None)
        precision = get_precision() if get_precision is not None else ""
        if precision:
            params.append(("precision", precision))
        return _PreparedRequest(
            method="POST",
            url=self._endpoint_url(Endpoint.WRITE, params),
            body=text,
        )

    def _endpoint_url(self, endpoint: Endpoint, params: List[Tuple[str, str]]) -> URL:
        """
        Joins the base URL with `endpoint` and appends `params`.

        Raises:
            UrlConstructionError: If the result is not an absolute http(s) URL.
        """
        base = self._config.url.rstrip("/")
        try:
            url = URL(f"{base}/{endpoint}")
        except (TypeError, ValueError) as e:
            raise UrlConstructionError(f"Malformed base URL '{base}', err: '{e}'") from e

        if not url.is_absolute() or url.scheme not in ("http", "https"):
            raise UrlConstructionError(
                f"Base URL '{base}' must be an absolute http(s) URL"
            )

        try:
            return url.with_query(params)
        except (TypeError, ValueError) as e:
            raise UrlConstructionError(f"Invalid query parameters, err: '{e}'") from e

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            if self._session.closed:
                raise ConnectionFailedError(
                    f"Connection to InfluxDB at '{self._config.url}' failed.\n"
                    "Inner err: 'the injected session is closed'"
                )
            yield self._session
        else:
            async with aiohttp.ClientSession() as session:
                yield session

    # --- Response interpretation ---

    @staticmethod
    def _check_status(response: aiohttp.ClientResponse) -> None:
        if response.status == 401:
            logger.warning("InfluxDB rejected the credentials (401)")
            raise AuthorizationError()
        if response.status == 403:
            logger.warning("InfluxDB denied the query to the user (403)")
            raise AuthenticationError()

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> bytes:
        try:
            return await response.read()
        except aiohttp.ClientPayloadError as e:
            raise ProtocolError(f"Failed to read the response body, err: '{e}'") from e

    @staticmethod
    def _decode_body(raw_body: bytes) -> str:
        try:
            body = raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(
                "response could not be converted to UTF-8"
            ) from e

        if _ERROR_MARKER in body:
            raise DatabaseError(f'influxdb error: "{body}"', body=body)

        return body
