from datetime import datetime, timedelta, timezone

import pytest

from influxline import Precision, Timestamp, WriteQuery


MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
MILLIS_PER_SECOND = 1000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_format_for_timestamp_now():
    assert Timestamp.now().render() == ""
    assert str(Timestamp.now()) == ""


def test_format_for_timestamp_else():
    assert Timestamp.nanoseconds(100).render() == "100"
    assert str(Timestamp.hours(11)) == "11"


@pytest.mark.parametrize(
    "timestamp, token",
    [
        (Timestamp.now(), ""),
        (Timestamp.nanoseconds(1), "ns"),
        (Timestamp.microseconds(1), "u"),
        (Timestamp.milliseconds(1), "ms"),
        (Timestamp.seconds(1), "s"),
        (Timestamp.minutes(1), "m"),
        (Timestamp.hours(1), "h"),
    ],
)
def test_precision_token(timestamp: Timestamp, token: str):
    assert timestamp.precision() == token


def test_timestamp_equality():
    assert Timestamp.hours(2) == Timestamp(unit=Precision.Hours, value=2)
    assert Timestamp.hours(2) != Timestamp.minutes(2)


def test_negative_timestamp_rejected():
    with pytest.raises(ValueError, match="Timestamp value must be non-negative"):
        Timestamp.seconds(-1)


def test_non_integer_timestamp_rejected():
    with pytest.raises(ValueError):
        Timestamp.hours(True)

    with pytest.raises(ValueError):
        Timestamp.hours("11")

    with pytest.raises(ValueError):
        Timestamp.seconds(1.0)


def test_now_with_value_rejected():
    with pytest.raises(ValueError, match="cannot carry a value"):
        Timestamp(unit=Precision.Now, value=5)


def test_timestamp_is_immutable():
    ts = Timestamp.seconds(10)
    with pytest.raises(ValueError):
        ts.value = 11


def test_datetime_from_timestamp_now():
    assert Timestamp.now().to_datetime().date() == datetime.now(timezone.utc).date()


def test_datetime_from_timestamp_hours():
    assert Timestamp.hours(2).to_datetime() == EPOCH + timedelta(
        milliseconds=2 * MINUTES_PER_HOUR * SECONDS_PER_MINUTE * MILLIS_PER_SECOND
    )


def test_datetime_from_timestamp_minutes():
    assert Timestamp.minutes(2).to_datetime() == EPOCH + timedelta(
        milliseconds=2 * SECONDS_PER_MINUTE * MILLIS_PER_SECOND
    )


def test_datetime_from_timestamp_seconds():
    assert Timestamp.seconds(2).to_datetime() == EPOCH + timedelta(
        milliseconds=2 * MILLIS_PER_SECOND
    )


def test_datetime_from_timestamp_millis():
    assert Timestamp.milliseconds(2).to_datetime() == EPOCH + timedelta(milliseconds=2)


def test_datetime_from_timestamp_micros():
    assert Timestamp.microseconds(3).to_datetime() == EPOCH + timedelta(microseconds=3)


def test_datetime_from_timestamp_nanos_is_truncated():
    assert Timestamp.nanoseconds(1_999).to_datetime() == EPOCH + timedelta(microseconds=1)


def test_datetime_out_of_range_raises():
    with pytest.raises(ValueError, match="out of the datetime range"):
        Timestamp.hours(10**9).to_datetime()


def test_timestamp_from_datetime():
    dt = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
    assert Timestamp.from_datetime(dt) == Timestamp.milliseconds(1000)


def test_timestamp_from_naive_datetime_is_utc():
    dt = datetime(2020, 1, 1, 12, 0, 0)
    expected = int(dt.replace(tzinfo=timezone.utc).timestamp()) * MILLIS_PER_SECOND
    assert Timestamp.from_datetime(dt) == Timestamp.milliseconds(expected)


def test_timestamp_from_aware_datetime_other_zone():
    dt = datetime(1970, 1, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=1)))
    assert Timestamp.from_datetime(dt) == Timestamp.milliseconds(0)


def test_timestamp_into_query():
    query = Timestamp.hours(11).into_query("weather")
    assert isinstance(query, WriteQuery)
    assert query.measurement == "weather"
    assert query.get_precision() == "h"
    assert query.add_field("temperature", 82).build() == "weather temperature=82 11"
