"""
This module provides the "Fluent" API for constructing the queries sent to an InfluxDB server.

**Key Components:**

* [**`Query`**][influxline.models.query.builders.Query]: Namespace of static factories for both builders.
* [**`WriteQuery`**][influxline.models.query.builders.WriteQuery]: Accumulates a single point and renders it as line protocol.
* [**`ReadQuery`**][influxline.models.query.builders.ReadQuery]: Wraps a raw InfluxQL statement verbatim.

Example:
    ```python
    from influxline import Query, Timestamp

    write_query = (
        Query.write_query(Timestamp.now(), "measurement")
        .add_field("field1", 5)
        .add_tag("author", "Gero")
        .build()
    )

    read_query = Query.raw_read_query("SELECT * FROM weather").build()
    ```
"""

from typing import Any, List, Optional, Tuple

from ...enum import QueryType
from ...errors import InvalidQueryError
from ..timestamp import Timestamp
from ..value import Value
from .valid_query import ValidQuery


def _render_pairs(pairs: List[Tuple[str, str]]) -> str:
    return ",".join(f"{name}={value}" for name, value in pairs)


class WriteQuery:
    """
    Builder of a single line protocol point.

    Tags and fields are kept in insertion order, duplicates included: no sorting
    and no merging of repeated keys takes place. A point requires at least one
    field; tags alone are not enough and make `build()` fail.

    Example:
        ```python
        from influxline import Query, Timestamp

        query = (
            Query.write_query(Timestamp.hours(11), "weather")
            .add_field("temperature", 82)
            .add_tag("location", "us-midwest")
            .add_tag("season", "summer")
        )
        assert query.build() == 'weather,location="us-midwest",season="summer" temperature=82 11'
        ```
    """

    def __init__(self, timestamp: Timestamp, measurement: str):
        """
        Creates an empty point for `measurement`, stamped with `timestamp`.

        Args:
            timestamp: The point time and precision.
            measurement: The name of the series the point belongs to.
        """
        self._timestamp = timestamp
        self._measurement = str(measurement)
        self._fields: List[Tuple[str, str]] = []
        self._tags: List[Tuple[str, str]] = []

    @property
    def measurement(self) -> str:
        return self._measurement

    @property
    def timestamp(self) -> Timestamp:
        return self._timestamp

    @property
    def fields(self) -> List[Tuple[str, str]]:
        """Rendered `(name, value)` field pairs, in insertion order."""
        return list(self._fields)

    @property
    def tags(self) -> List[Tuple[str, str]]:
        """Rendered `(name, value)` tag pairs, in insertion order."""
        return list(self._tags)

    def add_field(self, name: str, value: Optional[Any]) -> "WriteQuery":
        """
        Appends a field to the point.

        A `None` value is treated as absent and adds nothing, which makes
        "write this field only if present" a plain call.

        Args:
            name: The field key.
            value: A `Value`, a native scalar (`bool`, `int`, `float`, `str`) or `None`.

        Returns:
            The builder itself, for chaining.

        Raises:
            TypeError: If `value` is not a supported scalar.
        """
        if value is None:
            return self
        self._fields.append((str(name), Value.from_native(value).render()))
        return self

    def add_tag(self, name: str, value: Any) -> "WriteQuery":
        """
        Appends a tag to the point.

        Please note that a `WriteQuery` requires at least one field. Composing a
        query with only tags will result in a failure building the query.

        Args:
            name: The tag key.
            value: A `Value` or a native scalar (`bool`, `int`, `float`, `str`).

        Returns:
            The builder itself, for chaining.

        Raises:
            TypeError: If `value` is not a supported scalar.
        """
        self._tags.append((str(name), Value.from_native(value).render()))
        return self

    def get_precision(self) -> str:
        """Returns the request `precision` token of the point timestamp."""
        return self._timestamp.precision()

    def build(self) -> ValidQuery:
        """
        Renders the point as `measurement[,tags] fields[ timestamp]`.

        Raises:
            InvalidQueryError: If no field has been added.
        """
        if not self._fields:
            raise InvalidQueryError("fields cannot be empty")

        tags = _render_pairs(self._tags)
        if tags:
            tags = "," + tags

        time = self._timestamp.render()
        if time:
            time = " " + time

        return ValidQuery(
            f"{self._measurement}{tags} {_render_pairs(self._fields)}{time}"
        )

    def get_type(self) -> QueryType:
        return QueryType.Write

    def __repr__(self) -> str:
        return (
            f"WriteQuery(measurement={self._measurement!r}, tags={self._tags!r}, "
            f"fields={self._fields!r}, timestamp={self._timestamp!r})"
        )


class ReadQuery:
    """
    Raw InfluxQL statement.

    The text is never validated client-side: `build()` always succeeds and
    syntax errors surface only when the server rejects the request.
    """

    def __init__(self, query: str):
        self._query = str(query)

    @property
    def query(self) -> str:
        return self._query

    def build(self) -> ValidQuery:
        return ValidQuery(self._query)

    def get_type(self) -> QueryType:
        return QueryType.Read

    def __repr__(self) -> str:
        return f"ReadQuery({self._query!r})"


class Query:
    """
    Entry point namespace for the query builders.

    Both factories return plain builder instances; `Query` itself holds no state.
    """

    @staticmethod
    def write_query(timestamp: Timestamp, measurement: str) -> WriteQuery:
        """
        Returns a [`WriteQuery`][influxline.models.query.builders.WriteQuery] builder.

        Example:
            ```python
            Query.write_query(Timestamp.now(), "measurement").add_field("field1", 5)
            ```
        """
        return WriteQuery(timestamp, measurement)

    @staticmethod
    def raw_read_query(query: str) -> ReadQuery:
        """
        Returns a [`ReadQuery`][influxline.models.query.builders.ReadQuery] builder.

        Example:
            ```python
            Query.raw_read_query("SELECT * FROM weather")
            ```
        """
        return ReadQuery(query)
