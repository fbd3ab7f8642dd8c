"""
Mixins Module.

This module provides `WriteableMixin`, which turns a user-defined record class into
a [`WriteQuery`][influxline.models.query.builders.WriteQuery] from an explicit
listing of its field and tag attributes.
"""

from typing import TYPE_CHECKING, Tuple

from ..logging_config import get_logger
from .timestamp import Timestamp

if TYPE_CHECKING:
    from .query.builders import WriteQuery

# Set the hierarchical logger
logger = get_logger(__name__)


class WriteableMixin:
    """
    A mixin that converts a record into a line protocol point.

    The inheriting class lists which of its attributes are written, and how:

    * `__influx_fields__`: attribute names written as fields (required, non-empty).
    * `__influx_tags__`: attribute names written as tags (optional).
    * `__influx_time__`: name of the attribute holding the
      [`Timestamp`][influxline.models.Timestamp] (defaults to `"time"`).

    Attributes are read in the listed order, tags first and fields after.
    A field whose value is `None` is skipped.

    Important: Collision Safety
        The listing is checked at class definition time. An empty field list, or a
        name declared both as field and tag, raises a `ValueError`.

    Example:
        ```python
        from dataclasses import dataclass
        from typing import Optional
        from influxline import Timestamp, WriteableMixin

        @dataclass
        class WeatherReading(WriteableMixin):
            __influx_fields__ = ("temperature", "humidity")
            __influx_tags__ = ("wind_direction",)

            time: Timestamp
            temperature: int
            humidity: Optional[float]
            wind_direction: str

        reading = WeatherReading(Timestamp.hours(1), 82, None, "north")
        query = reading.into_query("weather")
        assert query.build() == 'weather,wind_direction="north" temperature=82 1'
        ```
    """

    __influx_fields__: Tuple[str, ...] = ()
    __influx_tags__: Tuple[str, ...] = ()
    __influx_time__: str = "time"

    def __init_subclass__(cls, **kwargs):
        """
        Validates the field/tag listing of the child class.

        Raises:
            ValueError: If no field is declared or a name is both field and tag.
        """
        super().__init_subclass__(**kwargs)

        if not cls.__influx_fields__:
            raise ValueError(
                f"Class '{cls.__name__}' must declare at least one name in '__influx_fields__'"
            )

        duplicates = set(cls.__influx_fields__) & set(cls.__influx_tags__)
        if duplicates:
            raise ValueError(
                f"Class '{cls.__name__}' declares {sorted(duplicates)} both as field and tag"
            )

    def into_query(self, measurement: str) -> "WriteQuery":
        """
        Builds the write query of this record.

        Args:
            measurement: The measurement the point is written to.

        Returns:
            A `WriteQuery` ready to be built or further extended.

        Raises:
            TypeError: If the time attribute is not a `Timestamp`, or an attribute
                holds an unsupported value type.
        """
        timestamp = getattr(self, self.__influx_time__)
        if not isinstance(timestamp, Timestamp):
            raise TypeError(
                f"Attribute '{self.__influx_time__}' must be a Timestamp, "
                f"got '{type(timestamp).__name__}'"
            )

        query = timestamp.into_query(measurement)
        for name in self.__influx_tags__:
            query = query.add_tag(name, getattr(self, name))
        for name in self.__influx_fields__:
            query = query.add_field(name, getattr(self, name))

        logger.debug(f"Record '{type(self).__name__}' converted into {query!r}")
        return query
