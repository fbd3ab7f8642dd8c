"""
Timestamp Definitions.

This module defines the `Timestamp` attached to every write query. A timestamp is a
non-negative integer count expressed at one of seven resolutions; the resolution
is sent to the server as the `precision` request parameter, while only the bare
number appears in the line protocol body.
"""

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator, model_validator

from ..enum import Precision

if TYPE_CHECKING:
    from .query.builders import WriteQuery

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Duration of one unit, for every precision that maps onto `timedelta`
_UNIT_DELTAS = {
    Precision.Microseconds: timedelta(microseconds=1),
    Precision.Milliseconds: timedelta(milliseconds=1),
    Precision.Seconds: timedelta(seconds=1),
    Precision.Minutes: timedelta(minutes=1),
    Precision.Hours: timedelta(hours=1),
}


class Timestamp(BaseModel):
    """
    A point in time at a given resolution.

    Instances are immutable and are normally created through the factory
    classmethods (`Timestamp.now()`, `Timestamp.hours(11)`, ...).

    Attributes:
        unit: The resolution of `value`. `Precision.Now` lets the server assign
            the time on arrival.
        value: The number of `unit`s since the Unix epoch. Always 0 for `Now`.

    Example:
        ```python
        from influxline import Timestamp

        ts = Timestamp.hours(11)
        assert ts.render() == "11"
        assert ts.precision() == "h"
        assert Timestamp.now().render() == ""
        ```
    """

    model_config = ConfigDict(frozen=True)

    unit: Precision
    """The resolution the value is expressed in."""

    value: StrictInt = 0
    """Non-negative count of `unit`s since the Unix epoch."""

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        """Ensures the timestamp is not before the epoch."""
        if v < 0:
            raise ValueError(f"Timestamp value must be non-negative. Got {v}")
        return v

    @model_validator(mode="after")
    def validate_now_has_no_value(self) -> "Timestamp":
        if self.unit is Precision.Now and self.value != 0:
            raise ValueError("A 'Now' timestamp cannot carry a value")
        return self

    # --- Factories ---

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(unit=Precision.Now)

    @classmethod
    def nanoseconds(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Nanoseconds, value=value)

    @classmethod
    def microseconds(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Microseconds, value=value)

    @classmethod
    def milliseconds(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Milliseconds, value=value)

    @classmethod
    def seconds(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Seconds, value=value)

    @classmethod
    def minutes(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Minutes, value=value)

    @classmethod
    def hours(cls, value: int) -> "Timestamp":
        return cls(unit=Precision.Hours, value=value)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Timestamp":
        """
        Factory method to create a millisecond Timestamp from a `datetime`.

        Naive datetimes are interpreted as UTC.

        Args:
            dt: The datetime to convert. Must not be earlier than the epoch.

        Returns:
            A `Timestamp` with `Precision.Milliseconds`.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls.milliseconds((dt - _EPOCH) // timedelta(milliseconds=1))

    # --- Rendering ---

    def precision(self) -> str:
        """Returns the request `precision` token ("" for `Now`)."""
        return self.unit.value

    def render(self) -> str:
        """Returns the line protocol rendering: "" for `Now`, else the bare number."""
        if self.unit is Precision.Now:
            return ""
        return str(self.value)

    def __str__(self) -> str:
        return self.render()

    # --- Conversions ---

    def to_datetime(self) -> datetime:
        """
        Converts the timestamp into a timezone-aware UTC `datetime`.

        `Now` resolves to the current time. Nanosecond timestamps are truncated
        to microseconds, the finest resolution `datetime` supports.

        Raises:
            ValueError: If the timestamp lies beyond `datetime.max`.
        """
        if self.unit is Precision.Now:
            return datetime.now(timezone.utc)
        try:
            if self.unit is Precision.Nanoseconds:
                return _EPOCH + timedelta(microseconds=self.value // 1_000)
            return _EPOCH + self.value * _UNIT_DELTAS[self.unit]
        except OverflowError as e:
            raise ValueError(
                f"Timestamp {self.value}{self.precision()} is out of the datetime range"
            ) from e

    def into_query(self, measurement: str) -> "WriteQuery":
        """
        Starts a [`WriteQuery`][influxline.models.query.builders.WriteQuery] stamped
        with this timestamp.

        Example:
            ```python
            query = Timestamp.seconds(1700000000).into_query("weather").add_field("temperature", 82)
            ```
        """
        from .query.builders import WriteQuery

        return WriteQuery(self, measurement)
